"""
Fetch a player's recent games from chess.com and tag them with openings.
"""

import logging
from typing import List, Mapping

from openingbook.matching import OpeningIdentifier
from openingbook.records import OpeningRecord

from .concurrency import gather
from .config import ARCHIVE_MONTHS, ARCHIVES_URL_TEMPLATE, STANDARD_RULES
from .client import get
from .schemas import ArchiveList, ArchivePage, GameWithOpening, parse_response

logger = logging.getLogger(__name__)


def fetch_archive_list(username: str) -> List[str]:
    """
    Monthly archive URLs for a player, oldest first.

    Raises:
        NetworkError: If the request fails
        SchemaValidationError: If the response is not an archive list
    """
    url = ARCHIVES_URL_TEMPLATE.format(username=username)
    response = get(url)
    return parse_response(ArchiveList, response.text, url=url).archives


def fetch_archive(url: str, identifier: OpeningIdentifier) -> List[GameWithOpening]:
    """
    Fetch one monthly archive and match its standard chess games.

    Variant games (chess960, bughouse, ...) are dropped.

    Raises:
        NetworkError: If the request fails
        SchemaValidationError: If any game in the archive is malformed
        MalformedMoveTextError: If a game's moves cannot be replayed
    """
    response = get(url)
    page = parse_response(ArchivePage, response.text, url=url)

    games = [
        GameWithOpening(game=game, opening=identifier.identify(game.pgn))
        for game in page.games
        if game.rules == STANDARD_RULES
    ]
    logger.debug(f"{url}: {len(games)} of {len(page.games)} games are standard chess")
    return games


def fetch_user_games(
    username: str,
    index: Mapping[str, OpeningRecord],
    months: int = ARCHIVE_MONTHS
) -> List[GameWithOpening]:
    """
    Fetch and match a player's games from their most recent archives.

    Archives are fetched concurrently. Games come back in archive order,
    then in the order the archive lists them.

    Args:
        username: chess.com handle
        index: Opening positions to match against
        months: Number of most recent monthly archives to read

    Returns:
        Standard chess games with their matched opening

    Raises:
        NetworkError, SchemaValidationError, MalformedMoveTextError: If any
        archive fails; no partial list is returned
    """
    archives = fetch_archive_list(username)
    recent = archives[-months:] if months > 0 else []

    logger.info(f"Username: {username}")
    logger.info(f"Analyzing the following archives: {' | '.join(url[-7:] for url in recent)}")

    identifier = OpeningIdentifier(index)
    pages = gather(lambda url: fetch_archive(url, identifier), recent)
    games = [game for page in pages for game in page]

    logger.info(f"Found a total of {len(games)} games")
    return games
