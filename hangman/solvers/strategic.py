"""
Strategic solver (letter frequency over the surviving dictionary).

Idea:
  - Keep the dictionary words that still fit the revealed pattern and use no
    letter already known to be absent.
  - Count every letter occurrence across those words (a word with two P's
    counts P twice).
  - Guess the most frequent letter not yet submitted; break ties with the
    seeded RNG.

Feedback:
  The server never says whether a guess was right. The solver learns it on
  the next turn: if the pending letter now shows up in the masked word it was
  a hit, otherwise it joins `disallowed`. Every pending letter ends up in
  `submitted` either way, so `disallowed` is always a subset of `submitted`.

Notes:
  - remaining_wrong_guesses is accepted but does not change the choice.
  - With no usable tally (empty dictionary, nothing left to guess) the solver
    falls back to a uniform pick over A-Z, which may repeat a letter.
"""

from __future__ import annotations

import logging
import string
from collections import Counter
from typing import FrozenSet, Iterable, List, Optional, Sequence

from hangman.datasets.io import load_dictionary
from hangman.engine import filter_candidates, validate_mask
from .base import BaseSolver, DEFAULT_SEED, register

log = logging.getLogger(__name__)

ALPHABET = string.ascii_uppercase


@register
class StrategicSolver(BaseSolver):
    id = "strategic"
    name = "Strategic (letter frequency)"
    version = "1.0.0"

    def __init__(self, dictionary: Iterable[str] = (), *, seed: int | None = DEFAULT_SEED):
        super().__init__(seed=seed)
        self.dictionary: Sequence[str] = tuple(dictionary)
        self._submitted: set[str] = set()
        self._disallowed: set[str] = set()
        self._pending: Optional[str] = None
        self.last_tie_break: List[str] = []

    @classmethod
    def from_path(cls, path, *, seed: int | None = DEFAULT_SEED) -> "StrategicSolver":
        """Load the dictionary file; raises FileNotFoundError if it is missing."""
        return cls(load_dictionary(path), seed=seed)

    # Read-only views of the guess history
    @property
    def submitted(self) -> FrozenSet[str]:
        return frozenset(self._submitted)

    @property
    def disallowed(self) -> FrozenSet[str]:
        return frozenset(self._disallowed)

    @property
    def pending(self) -> Optional[str]:
        return self._pending

    def reset(self, *, seed: int | None = None) -> None:
        super().reset(seed=seed)
        self._submitted.clear()
        self._disallowed.clear()
        self._pending = None
        self.last_tie_break = []

    def _reconcile(self, masked_word: str) -> None:
        """Fold the previous turn's letter into the history using the new pattern."""
        if self._pending is None:
            return
        u, self._pending = self._pending, None
        self._submitted.add(u)
        if u not in masked_word:
            self._disallowed.add(u)
            log.debug("letter %s is absent", u)

    def tally(self, masked_word: str) -> Counter:
        """
        Letter occurrences across the surviving candidates, minus letters that
        have already been submitted.
        """
        candidates = filter_candidates(self.dictionary, masked_word, self._disallowed)
        counts = Counter(ch for w in candidates for ch in w if ch in ALPHABET)
        for u in self._submitted:
            counts.pop(u, None)
        return counts

    def select_next_letter(self, masked_word: str, remaining_wrong_guesses: int) -> str:
        """
        Reconcile the pending letter, then pick among the top-frequency unused
        letters.

        Raises:
          InvalidMask if `masked_word` is empty or has characters outside A-Z/'*'.
        """
        validate_mask(masked_word)
        self._reconcile(masked_word)

        counts = self.tally(masked_word)
        best = max(counts.values(), default=0)
        # Sorted so a fixed seed reproduces the same pick regardless of set order.
        self.last_tie_break = sorted(u for u, c in counts.items() if c == best and c > 0)

        if self.last_tie_break:
            selected = self.rng.choice(self.last_tie_break)
        else:
            selected = self.rng.choice(ALPHABET)
            log.debug("no candidates left for %s; falling back to %s", masked_word, selected)

        self._pending = selected
        return selected
