"""
HTTP client for the hangman server and the turn loop that plugs a solver into it.

The server only ever sends back the new masked word; it never says whether a
letter was right. Solvers work that out themselves from the next pattern.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict

import requests

from hangman import __version__
from hangman.engine import HangmanError
from . import protocol

log = logging.getLogger(__name__)

DUPLICATE_MARKER = "has already been guessed"
MAX_RETRIES = 26


class HangmanAPIError(HangmanError):
    """The server rejected a request (HTTP 400) or answered with something unexpected."""

    def __init__(self, message: str, status: int | None = None):
        self.message = message
        self.status = status
        super().__init__(message)

    @property
    def is_duplicate(self) -> bool:
        return DUPLICATE_MARKER in self.message


@dataclass
class GameOutcome:
    victory: bool
    message: str
    word: str
    turns: int


class HangmanClient:
    def __init__(self, base_url: str, session=None, timeout: float | None = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": f"hangman-client v{__version__}"})
        self.timeout = timeout

    def _request(self, method: str, path: str, **kwargs) -> Dict:
        response = self.session.request(method, self.base_url + path,
                                        timeout=self.timeout, **kwargs)
        try:
            body = response.json()
        except ValueError:
            response.raise_for_status()
            raise HangmanAPIError(f"expected JSON from {path}, got {response.text[:80]!r}",
                                  response.status_code)
        if isinstance(body, dict) and "error" in body:
            raise HangmanAPIError(str(body["error"]), response.status_code)
        response.raise_for_status()
        return body

    def new_game(self) -> Dict:
        """Start a game; returns {"id", "word", "guesses"}."""
        return self._request("GET", "/")

    def read_game(self, game_id: str) -> protocol.UpdateResponse:
        return protocol.parse_update(self._request("GET", f"/{game_id}"))

    def guess(self, game_id: str, letter: str) -> protocol.UpdateResponse:
        return protocol.parse_update(self._request("PUT", f"/{game_id}", json={"letter": letter}))


def play_game(client: HangmanClient, solver, *, max_retries: int = MAX_RETRIES) -> GameOutcome:
    """
    Play one game to the end.

    Each turn the solver gets the latest masked word. A duplicate-guess
    rejection leaves the game untouched, so the same turn is retried by asking
    the solver again with the same pattern. Any other error propagates.
    """
    created = client.new_game()
    game_id = created["id"]
    word, guesses = created["word"], int(created["guesses"])
    log.info("playing game %s", game_id)

    turns = 0
    retries = 0
    while True:
        letter = solver.select_next_letter(word, guesses)
        try:
            update = client.guess(game_id, letter)
        except HangmanAPIError as e:
            if not e.is_duplicate or retries >= max_retries:
                raise
            retries += 1
            log.debug("duplicate guess %s, retrying turn", letter)
            continue
        retries = 0
        turns += 1

        if isinstance(update, protocol.GameFinal):
            return GameOutcome(update.victory, update.message, update.word, turns)
        word, guesses = update.word, update.guesses
        log.debug("%s -> %s (%d left)", letter, word, guesses)
