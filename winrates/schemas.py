"""
Response shapes of the chess.com public API.

Responses are validated strictly at the boundary: a missing field or a
field of the wrong type fails the whole response. Fields the API adds that
are not listed here are ignored.
"""

from dataclasses import dataclass
from typing import List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from openingbook.errors import SchemaValidationError
from openingbook.records import OpeningRecord

M = TypeVar('M', bound=BaseModel)


class _Strict(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True, populate_by_name=True)


class PlayerSide(_Strict):
    rating: int
    result: str
    id: str = Field(alias='@id')
    username: str
    uuid: str


class Accuracies(_Strict):
    white: float
    black: float


class Game(_Strict):
    url: str
    pgn: str
    time_control: str
    end_time: int
    rated: bool
    tcn: Optional[str] = None
    uuid: str
    initial_setup: str
    fen: str
    time_class: str
    rules: str
    white: PlayerSide
    black: PlayerSide
    accuracies: Optional[Accuracies] = None


class ArchiveList(_Strict):
    archives: List[str]


class ArchivePage(_Strict):
    games: List[Game]


@dataclass(frozen=True)
class GameWithOpening:
    """A game and the opening it was matched to, if any."""

    game: Game
    opening: Optional[OpeningRecord]


def parse_response(model: Type[M], body: str, url: Optional[str] = None) -> M:
    """
    Validate a JSON response body against a model.

    Raises:
        SchemaValidationError: If the body is not JSON or does not match
    """
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        raise SchemaValidationError(
            f"Response from {url} does not match {model.__name__}: {e}",
            url=url
        ) from e
