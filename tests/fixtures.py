"""
Shared test data: opening rows, chess.com payloads and fake HTTP responses.
"""

import json

import requests

from openingbook.lookup import LookupBuilder
from openingbook.records import process_row
from winrates.schemas import Game, GameWithOpening

OPENING_ROWS = [
    "C20\tKing's Pawn Game\t1. e4 e5",
    "C44\tKing's Knight Opening: Normal Variation\t1. e4 e5 2. Nf3 Nc6",
    "C50\tItalian Game\t1. e4 e5 2. Nf3 Nc6 3. Bc4",
    "B20\tSicilian Defense\t1. e4 c5",
]

ITALIAN_PGN = "1. e4 e5 2. Nf3 Nc6 3. Bc4 Bc5 4. c3 Nf6"

CHESSCOM_PGN = (
    '[Event "Live Chess"]\n'
    '[Site "Chess.com"]\n'
    '[White "alice"]\n'
    '[Black "bob"]\n'
    '[Result "1-0"]\n'
    '\n'
    '1. e4 {[%clk 0:09:58]} 1... e5 {[%clk 0:09:57]} 2. Nf3 {[%clk 0:09:55]} '
    '2... Nc6 {[%clk 0:09:50]} 3. Bc4 {[%clk 0:09:49]} 3... Bc5 {[%clk 0:09:40]} 1-0\n'
)


def build_lookup(rows=OPENING_ROWS):
    return LookupBuilder().extend(process_row(row) for row in rows)


def make_response(status_code=200, text="", url="", reason=None):
    response = requests.Response()
    response.status_code = status_code
    response._content = text.encode('utf-8')
    response.encoding = 'utf-8'
    response.url = url
    response.reason = reason or {200: 'OK', 404: 'Not Found'}.get(status_code, 'Error')
    return response


def make_side(username, result, rating=1500):
    return {
        'rating': rating,
        'result': result,
        '@id': f'https://api.chess.com/pub/player/{username.lower()}',
        'username': username,
        'uuid': f'uuid-{username.lower()}',
    }


def make_game(white='alice', black='bob', white_result='win', black_result='checkmated',
              pgn=ITALIAN_PGN, rules='chess', game_id=1):
    return {
        'url': f'https://www.chess.com/game/live/{game_id}',
        'pgn': pgn,
        'time_control': '600',
        'end_time': 1700000000 + game_id,
        'rated': True,
        'uuid': f'game-{game_id}',
        'initial_setup': 'rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1',
        'fen': '8/8/8/8/8/8/8/8 w - - 0 1',
        'time_class': 'rapid',
        'rules': rules,
        'white': make_side(white, white_result),
        'black': make_side(black, black_result),
        'accuracies': {'white': 88.5, 'black': 71.2},
    }


def game_model(**kwargs):
    return Game.model_validate_json(json.dumps(make_game(**kwargs)))


def tagged(opening, **kwargs):
    return GameWithOpening(game=game_model(**kwargs), opening=opening)
