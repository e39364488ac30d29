"""
Opening book package: reference opening records and game matching.

Builds lookup tables from the lichess chess-openings dataset, identifies
which catalogued opening a game reached, and aggregates a player's results
per opening.
"""

from .errors import (
    DataWriteError,
    MalformedMoveTextError,
    NetworkError,
    OpeningDataError,
    SchemaValidationError,
)
from .lookup import LookupBuilder, OpeningIndex
from .matching import OpeningIdentifier, first_match, replay_positions
from .records import OpeningRecord, process_row, process_rows
from .stats import Stats, analyze_games, collect_opening_stats, rank_openings

__all__ = [
    'DataWriteError',
    'MalformedMoveTextError',
    'NetworkError',
    'OpeningDataError',
    'SchemaValidationError',
    'LookupBuilder',
    'OpeningIndex',
    'OpeningIdentifier',
    'first_match',
    'replay_positions',
    'OpeningRecord',
    'process_row',
    'process_rows',
    'Stats',
    'analyze_games',
    'collect_opening_stats',
    'rank_openings',
]
