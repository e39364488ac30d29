"""
Per-opening win/loss/draw statistics for one player.

Games are split by the colour the player had, bucketed by the name of the
matched opening, and ranked by win rate. Only openings played often enough
to say something (more than ``min_games`` times) are reported.
"""

import logging
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Dict, Iterable, List

import pandas as pd

if TYPE_CHECKING:
    from winrates.schemas import Game, GameWithOpening

logger = logging.getLogger(__name__)

COLORS = ('white', 'black')
WIN = 'win'
LOSS = 'loss'
DRAW = 'draw'

MIN_GAMES = 15
TOP_N = 10


@dataclass
class Stats:
    total: int = 0
    wins: int = 0
    losses: int = 0
    draws: int = 0

    def record(self, outcome: str) -> None:
        """Count one game with the given outcome."""
        if outcome == WIN:
            self.wins += 1
        elif outcome == LOSS:
            self.losses += 1
        elif outcome == DRAW:
            self.draws += 1
        else:
            raise ValueError(f"Unknown outcome: {outcome}")
        self.total += 1

    @property
    def win_rate(self) -> float:
        return self.wins / self.total * 100 if self.total else 0.0


def player_color(game: 'Game', username: str) -> str:
    """
    Colour the player had in a game.

    Anyone who is not White is taken to be Black; the handle is not
    checked against the Black side.
    """
    if game.white.username.lower() == username.lower():
        return 'white'
    if game.black.username.lower() != username.lower():
        logger.debug(f"{username} not found in {game.url}, counting as black")
    return 'black'


def game_outcome(game: 'Game', color: str) -> str:
    """
    Collapse the two sides' result strings into win, loss or draw.

    chess.com reports granular results ("checkmated", "timeout",
    "agreed", "repetition", ...). Both sides carrying the same string is a
    draw; otherwise the player either has "win" or lost.
    """
    opponent = 'white' if color == 'black' else 'black'
    result = getattr(game, color).result
    if result == getattr(game, opponent).result:
        return DRAW
    return WIN if result == WIN else LOSS


def collect_opening_stats(
    username: str,
    games: Iterable['GameWithOpening']
) -> Dict[str, Dict[str, Stats]]:
    """
    Count results per colour and opening name.

    Games without a matched opening are skipped. Openings appear in the
    order they were first seen.
    """
    opening_stats: Dict[str, Dict[str, Stats]] = {color: {} for color in COLORS}
    skipped = 0

    for item in games:
        if item.opening is None:
            skipped += 1
            continue

        color = player_color(item.game, username)
        stats = opening_stats[color].setdefault(item.opening.name, Stats())
        stats.record(game_outcome(item.game, color))

    logger.info(
        f"Collected stats for {len(opening_stats['white'])} white and "
        f"{len(opening_stats['black'])} black openings ({skipped} games without a known opening)"
    )
    return opening_stats


def rank_openings(
    opening_stats: Dict[str, Stats],
    min_games: int = MIN_GAMES,
    top_n: int = TOP_N
) -> pd.DataFrame:
    """
    Rank openings by win rate.

    Args:
        opening_stats: Stats keyed by opening name
        min_games: Openings must have been played more than this many times
        top_n: Maximum number of rows returned

    Returns:
        DataFrame indexed by opening name with total, wins, losses, draws
        and win_rate columns, best win rate first. Ties keep first-seen order.
    """
    columns = ['total', 'wins', 'losses', 'draws', 'win_rate']
    if not opening_stats:
        return pd.DataFrame(columns=columns)

    frame = pd.DataFrame.from_records(
        [dict(asdict(stats), win_rate=stats.win_rate) for stats in opening_stats.values()],
        index=list(opening_stats.keys()),
        columns=columns
    )
    frame.index.name = 'opening'

    frame = frame[frame['total'] > min_games]
    frame = frame.sort_values('win_rate', ascending=False, kind='stable')
    return frame.head(top_n)


def format_opening(name: str, win_rate: float, total: int) -> str:
    return f"{win_rate:.2f}%: {name} played {total} games."


def analyze_games(
    username: str,
    games: Iterable['GameWithOpening'],
    min_games: int = MIN_GAMES,
    top_n: int = TOP_N
) -> Dict[str, List[str]]:
    """
    Summarise a player's best openings with each colour.

    Args:
        username: Handle of the analysed player (case-insensitive)
        games: Games tagged with their matched opening
        min_games: Minimum number of games (exclusive) for an opening to be listed
        top_n: Number of openings listed per colour

    Returns:
        {"white": [...], "black": [...]} of formatted summary lines
    """
    opening_stats = collect_opening_stats(username, games)

    summary = {}
    for color in COLORS:
        ranked = rank_openings(opening_stats[color], min_games=min_games, top_n=top_n)
        summary[color] = [
            format_opening(name, row['win_rate'], int(row['total']))
            for name, row in ranked.iterrows()
        ]
    return summary
