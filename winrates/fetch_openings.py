"""
Download the raw opening rows from the lichess chess-openings dataset.
"""

import logging
from typing import List, Sequence

from .concurrency import gather
from .config import OPENING_CATEGORIES, OPENINGS_URL_TEMPLATE
from .client import get

logger = logging.getLogger(__name__)


def fetch_category(category: str) -> List[str]:
    """
    Fetch one ECO volume and return its rows without the header line.

    Raises:
        NetworkError: If the download fails
    """
    response = get(OPENINGS_URL_TEMPLATE.format(category=category))
    rows = response.text.split("\n")[1:]
    logger.debug(f"Category {category}: {len(rows)} lines")
    return rows


def fetch_openings(categories: Sequence[str] = OPENING_CATEGORIES) -> List[str]:
    """
    Fetch every category concurrently.

    Returns:
        Non-empty rows of all categories, in category order then file order

    Raises:
        NetworkError: If any category fails; nothing is returned in that case
    """
    logger.info(f"Fetching opening categories: {', '.join(categories)}")
    pages = gather(fetch_category, list(categories))
    rows = [row for page in pages for row in page if row]
    logger.info(f"Fetched {len(rows)} opening rows")
    return rows
