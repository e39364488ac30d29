"""
Fetching, writing and command-line entry points for opening win rates.
"""
