"""
Hangman game server.

Routes:
  GET  /      create a game with a random secret word
  GET  /<id>  read the current state of a game
  PUT  /<id>  submit one letter

Games live in memory in a GameStore: a dict keyed by uuid behind one lock.
Every request holds the lock for its whole read-modify-write, so two guesses
on the same game never interleave.
"""

from __future__ import annotations

import logging
import random
import threading
import uuid
from typing import Dict, List, Sequence

from flask import Flask, jsonify, request

from hangman.engine import Game, HangmanError, GameNotFound, IllegalGuess
from . import protocol

log = logging.getLogger(__name__)


class GameStore:
    """In-memory registry of games. Not persisted across restarts."""

    def __init__(self, words: Sequence[str], *, seed: int | None = None):
        if not words:
            raise ValueError("your word list is empty!")
        self.words: List[str] = list(words)
        self.lock = threading.Lock()
        self._rng = random.Random(seed)
        self._games: Dict[str, Game] = {}

    def __len__(self) -> int:
        with self.lock:
            return len(self._games)

    def create(self) -> Dict:
        with self.lock:
            game = Game(self._rng.choice(self.words))
            game_id = str(uuid.uuid4())
            self._games[game_id] = game
            log.info("created game %s (%d letters)", game_id, len(game.word))
            return protocol.create_response(game_id, game)

    def _get(self, game_id: str) -> Game:
        game = self._games.get(game_id)
        if game is None:
            raise GameNotFound(game_id)
        return game

    def _finished(self, game: Game) -> Dict:
        if game.is_lost():
            return protocol.final_response(game, protocol.ALREADY_LOST)
        return protocol.final_response(game, protocol.ALREADY_WON)

    def read(self, game_id: str) -> Dict:
        with self.lock:
            game = self._get(game_id)
            if game.is_over():
                return self._finished(game)
            return protocol.update_response(game)

    def guess(self, game_id: str, letter) -> Dict:
        """
        Apply one guess. Raises IllegalGuess, DuplicateGuess or GameNotFound.
        """
        # Shape check first; a malformed guess should not even look up the game.
        if not isinstance(letter, str) or len(letter) != 1 or not letter.isascii():
            raise IllegalGuess(str(letter))

        with self.lock:
            game = self._get(game_id)
            if game.is_over():
                return self._finished(game)

            hit = game.guess(letter)
            log.debug("game %s: %s -> %s", game_id, letter, "hit" if hit else "miss")

            if game.is_won():
                message = (protocol.WIN_FLAWLESS
                           if game.guesses_remaining() >= protocol.FLAWLESS_MARGIN
                           else protocol.WIN)
                log.info("game %s won: %s", game_id, game.word)
                return protocol.final_response(game, message)
            if game.is_lost():
                log.info("game %s lost: %s", game_id, game.word)
                return protocol.final_response(game, protocol.LOSE)
            return protocol.update_response(game)


def create_app(words: Sequence[str], *, seed: int | None = None) -> Flask:
    """
    Application factory. `words` is the already-normalized word list
    (see hangman.datasets.load_dictionary).
    """
    app = Flask(__name__)
    store = GameStore(words, seed=seed)
    app.config["GAME_STORE"] = store

    @app.errorhandler(HangmanError)
    def handle_game_error(e: HangmanError):
        log.info("rejected request: %s", e)
        return jsonify(protocol.error_response(str(e))), 400

    @app.route("/", methods=["GET"])
    def create_game():
        return jsonify(store.create())

    @app.route("/<game_id>", methods=["GET"])
    def read_game(game_id: str):
        return jsonify(store.read(game_id))

    @app.route("/<game_id>", methods=["PUT"])
    def update_game(game_id: str):
        data = request.get_json(silent=True) or {}
        return jsonify(store.guess(game_id, data.get("letter")))

    return app
