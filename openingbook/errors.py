"""
Error types raised while building or using the opening reference data.

None of these are recovered below the command-line entry points: a failed
fetch, a bad response, a failed write or an unplayable move list aborts the
whole run.
"""

from typing import Optional


class OpeningDataError(Exception):
    """Base class for all errors raised by this project."""


class NetworkError(OpeningDataError):
    """An HTTP request failed or returned a non-success status."""

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class SchemaValidationError(OpeningDataError):
    """A response body did not match the expected shape."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class DataWriteError(OpeningDataError):
    """Creating the output directory or writing a data file failed."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class MalformedMoveTextError(OpeningDataError):
    """Move text could not be replayed into a legal sequence of moves."""

    def __init__(self, message: str, move_text: str = ""):
        super().__init__(message)
        self.move_text = move_text
