"""
Identify which known opening a game went through.

The game is replayed and its positions are probed against the opening
index from the last ply backwards. The first hit is the deepest position
the game shares with a catalogued line, so a late transposition into a
known line wins over an earlier, shallower match.
"""

import logging
from typing import List, Mapping, Optional, Sequence

from .records import OpeningRecord, position_code, replay

logger = logging.getLogger(__name__)


def replay_positions(move_text: str) -> List[str]:
    """
    Position codes reached after each ply of a game, in order.

    Raises:
        MalformedMoveTextError: If the move text cannot be replayed
    """
    game = replay(move_text)
    board = game.board()
    positions = []
    for move in game.mainline_moves():
        board.push(move)
        positions.append(position_code(board))
    return positions


def first_match(
    positions: Sequence[str],
    index: Mapping[str, OpeningRecord]
) -> Optional[OpeningRecord]:
    """Return the opening of the deepest position found in the index."""
    for epd in reversed(positions):
        record = index.get(epd)
        if record is not None:
            return record
    return None


class OpeningIdentifier:
    """Match games against an opening index."""

    def __init__(self, index: Mapping[str, OpeningRecord]):
        self.index = index

    def identify(self, move_text: str) -> Optional[OpeningRecord]:
        """
        Find the opening a game's moves belong to.

        Args:
            move_text: PGN of the game (tag pairs allowed)

        Returns:
            Matching OpeningRecord, or None when no position is known
        """
        if not move_text or not move_text.strip():
            return None

        opening = first_match(replay_positions(move_text), self.index)
        if opening is None:
            logger.debug("No known opening position in game")
        return opening
