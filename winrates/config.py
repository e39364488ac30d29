"""
Configuration for data generation and game analysis.
"""

import logging
import os
from pathlib import Path

from openingbook import stats

# Where generated lookup tables are written and read from
DATA_DIR = Path(os.getenv('OPENINGS_DATA_DIR', 'data/external'))

# lichess-org/chess-openings, one TSV per ECO volume
OPENING_CATEGORIES = ('a', 'b', 'c', 'd', 'e')
OPENINGS_URL_TEMPLATE = 'https://raw.githubusercontent.com/lichess-org/chess-openings/master/{category}.tsv'

# chess.com public API
ARCHIVES_URL_TEMPLATE = 'https://api.chess.com/pub/player/{username}/games/archives'
USER_AGENT = os.getenv('OPENINGS_USER_AGENT', 'opening-winrates/1.0')
HEADERS = {'User-Agent': USER_AGENT}

# Analysis parameters
ARCHIVE_MONTHS = 6
STANDARD_RULES = 'chess'
MIN_GAMES = stats.MIN_GAMES  # openings need more games than this to be listed
TOP_N = stats.TOP_N

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT
    )
