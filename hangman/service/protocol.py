"""
JSON wire protocol between the game server and its clients.

  GET  /       -> {"id": "<uuid>", "word": "*****", "guesses": 7}
  GET  /<id>   -> an update or a final message (see below)
  PUT  /<id>   <- {"letter": "e"}
               -> {"word": "**E**", "guesses": 7}                       (update)
               -> {"victory": true, "message": "...", "word": "APPLE"}  (final)

Errors come back as HTTP 400 with {"error": "<message>"}.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Union

from hangman.engine import Game

WIN_FLAWLESS = "FLAWLESS VICTORY!"
WIN = "Victory is yours!"
LOSE = "Sorry, friend. You've been hanged!"
ALREADY_WON = "I said you won! Stop rubbing it in. >.<"
ALREADY_LOST = "Better luck next time!"

# Winning with at least this many wrong guesses to spare is flawless.
FLAWLESS_MARGIN = 3


@dataclass
class GameUpdate:
    word: str
    guesses: int


@dataclass
class GameFinal:
    victory: bool
    message: str
    word: str


UpdateResponse = Union[GameUpdate, GameFinal]


def create_response(game_id: str, game: Game) -> Dict:
    return {"id": game_id, "word": game.masked_word(), "guesses": game.guesses_remaining()}


def update_response(game: Game) -> Dict:
    return {"word": game.masked_word(), "guesses": game.guesses_remaining()}


def final_response(game: Game, message: str) -> Dict:
    return {"victory": game.is_won(), "message": message, "word": game.word}


def error_response(message: str) -> Dict:
    return {"error": message}


def parse_update(body: Dict) -> UpdateResponse:
    """
    Decode a PUT/GET /<id> body. A "victory" key marks the final message;
    anything else must be an update.
    """
    if "victory" in body:
        return GameFinal(bool(body["victory"]), str(body.get("message", "")), str(body["word"]))
    return GameUpdate(str(body["word"]), int(body["guesses"]))
