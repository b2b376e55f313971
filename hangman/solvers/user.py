"""
Human-driven solver: shows the board and reads one letter from the user.
"""

from __future__ import annotations

from typing import Callable

from .base import BaseSolver, DEFAULT_SEED, register


@register
class UserInputSolver(BaseSolver):
    id = "user"
    name = "User input"
    version = "1.0.0"

    def __init__(self, *, input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print,
                 seed: int | None = DEFAULT_SEED, **_ignored):
        super().__init__(seed=seed)
        self.input_fn = input_fn
        self.output_fn = output_fn

    def select_next_letter(self, masked_word: str, remaining_wrong_guesses: int) -> str:
        self.output_fn(f"{masked_word} (Guesses remaining: {remaining_wrong_guesses})")
        while True:
            answer = self.input_fn("Guess: ").strip()
            if len(answer) == 1 and answer.isascii() and answer.isalpha():
                return answer.upper()
            self.output_fn("Try entering just one letter")
