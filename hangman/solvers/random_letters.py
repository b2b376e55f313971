"""
Random solver.

Strategy:
  - Shuffle A-Z once with the solver RNG and walk through it in order,
    wrapping around at the end.

Notes:
  - Ignores the masked word entirely; a baseline to verify the pipeline.
  - Never repeats a letter within the first 26 turns.
"""

from __future__ import annotations

import string
from typing import List

from .base import BaseSolver, DEFAULT_SEED, register


@register
class RandomSolver(BaseSolver):
    id = "random"
    name = "Random (shuffled alphabet)"
    version = "1.0.0"

    def __init__(self, *, seed: int | None = DEFAULT_SEED, **_ignored):
        super().__init__(seed=seed)
        self._shuffle()

    def _shuffle(self) -> None:
        self.alpha: List[str] = list(string.ascii_uppercase)
        self.rng.shuffle(self.alpha)
        self.idx = 0

    def reset(self, *, seed: int | None = None) -> None:
        super().reset(seed=seed)
        self._shuffle()

    def select_next_letter(self, masked_word: str, remaining_wrong_guesses: int) -> str:
        if self.idx >= len(self.alpha):
            self.idx = 0
        letter = self.alpha[self.idx]
        self.idx += 1
        return letter
