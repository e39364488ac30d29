"""
Opening records and the row processing that produces them.

Each row of the lichess ``chess-openings`` dataset holds an ECO code, an
opening name and the move text of the line. Replaying the move text gives
the position the line ends in, which is what games are matched against.
"""

import io
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Union

import chess
import chess.pgn
from tqdm import tqdm

from .errors import MalformedMoveTextError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OpeningRecord:
    """A named opening line and the position it reaches."""

    eco: str
    name: str
    pgn: str
    epd: str
    uci: str

    @property
    def category(self) -> str:
        """ECO volume letter (A-E)."""
        return self.eco[:1].upper()

    def to_dict(self) -> Dict[str, str]:
        return {
            'eco': self.eco,
            'name': self.name,
            'pgn': self.pgn,
            'epd': self.epd,
            'uci': self.uci,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> 'OpeningRecord':
        return cls(
            eco=data['eco'],
            name=data['name'],
            pgn=data['pgn'],
            epd=data['epd'],
            uci=data['uci'],
        )


def replay(move_text: str) -> chess.pgn.Game:
    """
    Parse move text into a game, failing on anything that cannot be played.

    Args:
        move_text: PGN movetext, with or without tag pairs

    Returns:
        Parsed game (an empty game for empty text)

    Raises:
        MalformedMoveTextError: If the parser hit an illegal or unreadable move
    """
    game = chess.pgn.read_game(io.StringIO(move_text))
    if game is None:
        return chess.pgn.Game()

    if game.errors:
        raise MalformedMoveTextError(
            f"Cannot replay move text: {game.errors[0]}",
            move_text=move_text
        )

    return game


def position_code(position: Union[chess.Board, str]) -> str:
    """
    Reduce a position to its first four FEN fields.

    Piece placement, side to move, castling rights and en passant square;
    the halfmove and fullmove counters are dropped so that transpositions
    reach the same code.
    """
    fen = position.fen() if isinstance(position, chess.Board) else position
    return " ".join(fen.split()[:4])


def move_code(moves: Iterable[chess.Move]) -> str:
    """Concatenate moves in UCI notation, e.g. ``e2e4e7e5`` or ``b7a8q``."""
    return "".join(move.uci() for move in moves)


def process_row(row: str) -> OpeningRecord:
    """
    Build an OpeningRecord from one tab separated dataset row.

    Columns after the move text are ignored.

    Raises:
        MalformedMoveTextError: If the row has no move text or it cannot be replayed
    """
    columns = row.split("\t")
    if len(columns) < 3:
        raise MalformedMoveTextError(f"Expected eco, name and moves in row: {row!r}", move_text=row)

    eco, name, pgn = columns[0], columns[1], columns[2]

    game = replay(pgn)
    board = game.board()
    moves: List[chess.Move] = []
    for move in game.mainline_moves():
        board.push(move)
        moves.append(move)

    return OpeningRecord(
        eco=eco,
        name=name,
        pgn=pgn,
        epd=position_code(board),
        uci=move_code(moves)
    )


def process_rows(
    rows: Iterable[str],
    handler: Optional[Callable[[OpeningRecord], None]] = None,
    progress: bool = True
) -> Iterator[OpeningRecord]:
    """
    Process rows in order, yielding one record per row.

    Args:
        rows: Raw dataset rows
        handler: Optional callback invoked with each record as it is built
        progress: Show a progress bar
    """
    for row in tqdm(rows, desc="Processing openings", disable=not progress):
        record = process_row(row)
        if handler is not None:
            handler(record)
        yield record
