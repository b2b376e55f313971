"""
Candidate filtering given the revealed pattern.

Given:
  - a pool of uppercase words (the candidate dictionary)
  - the current masked word, e.g. "*PP**"
  - the set of letters known to be absent

Return:
  - words that agree with every revealed position and use no absent letter.

Revealed letters are matched exactly by position; '*' matches any letter.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Pattern, Set

from .game import MASK_CHAR
from .validation import validate_mask


def build_shape(masked_word: str) -> Pattern[str]:
    """
    Compile the per-position shape expression for `masked_word`.

    Example:
      build_shape("*PP**").pattern -> ".PP.."
    """
    validate_mask(masked_word)
    expr = "".join("." if ch == MASK_CHAR else re.escape(ch) for ch in masked_word)
    return re.compile(expr)


def filter_candidates(words: Iterable[str], masked_word: str,
                      disallowed: Set[str] = frozenset()) -> List[str]:
    """
    Keep only words that fit the shape of `masked_word` and contain none of
    the `disallowed` letters.

    Order is preserved as in `words`. Words of a different length never match.
    """
    shape = build_shape(masked_word)
    out: List[str] = []
    for w in words:
        if not shape.fullmatch(w):
            continue
        if any(ch in disallowed for ch in w):
            continue
        out.append(w)
    return out
