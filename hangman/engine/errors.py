"""
Error types shared by the game engine, the server and the client.

The messages are the exact strings the server puts on the wire, so a client
can surface them to the user unchanged.
"""

from __future__ import annotations


class HangmanError(Exception):
    """Base class for every game-level error."""


class IllegalGuess(HangmanError):
    def __init__(self, letter: str):
        self.letter = letter
        super().__init__(
            f"guesses must consist of a single ASCII character - {letter} is not valid")


class DuplicateGuess(HangmanError):
    def __init__(self, letter: str):
        self.letter = letter
        super().__init__(f"guesses must be unique - {letter} has already been guessed")


class GameNotFound(HangmanError):
    def __init__(self, game_id):
        self.game_id = game_id
        super().__init__(f"game not found for id {game_id}")


class InvalidMask(HangmanError, ValueError):
    """A masked word contains something other than A-Z and the wildcard."""

    def __init__(self, masked_word: str):
        self.masked_word = masked_word
        super().__init__(f"invalid masked word: {masked_word!r}")
