"""
Authoritative hangman game state.

Conventions:
  - The secret word is stored uppercase.
  - Hidden positions are rendered with MASK_CHAR ('*').
  - A game is lost once MAX_INCORRECT wrong letters have been guessed.

This module knows nothing about HTTP; the server wraps it and the offline
harness drives it directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Set

from .errors import DuplicateGuess
from .validation import validate_letter

# Single source of truth for the wrong-guess budget.
MAX_INCORRECT = 7
MASK_CHAR = "*"


@dataclass
class Game:
    word: str
    correct: Set[str] = field(default_factory=set)
    incorrect: Set[str] = field(default_factory=set)

    def __post_init__(self):
        self.word = self.word.upper()

    def guesses_remaining(self) -> int:
        return max(0, MAX_INCORRECT - len(self.incorrect))

    def is_lost(self) -> bool:
        return self.guesses_remaining() <= 0

    def is_won(self) -> bool:
        return all(ch in self.correct for ch in self.word)

    def is_over(self) -> bool:
        return self.is_won() or self.is_lost()

    def masked_word(self) -> str:
        """
        Example:
          Game("APPLE", correct={"P"}).masked_word() -> "*PP**"
        """
        return "".join(ch if ch in self.correct else MASK_CHAR for ch in self.word)

    def guess(self, letter: str) -> bool:
        """
        Apply one guess and return True if the letter occurs in the word.

        Raises:
          IllegalGuess   : not a single ASCII character
          DuplicateGuess : letter was already guessed (hit or miss)
        """
        g = validate_letter(letter)
        if g in self.correct or g in self.incorrect:
            raise DuplicateGuess(letter)

        if g in self.word:
            self.correct.add(g)
            return True
        self.incorrect.add(g)
        return False
