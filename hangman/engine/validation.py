"""
Input validation for guesses and masked words.

  - A guess is acceptable iff it is a single ASCII character. It is
    canonicalized to uppercase. Whether it is a duplicate is the game's call.
  - A masked word is acceptable iff it is non-empty and made only of A-Z and
    the wildcard '*'. Anything else means the caller broke the protocol, so
    we fail loudly instead of guessing what was meant.
"""

import re

from .errors import IllegalGuess, InvalidMask

_MASK_RE = re.compile(r"[A-Z*]+")


def validate_letter(letter) -> str:
    """Return the uppercase form of `letter` or raise IllegalGuess."""
    if not isinstance(letter, str) or len(letter) != 1 or not letter.isascii():
        raise IllegalGuess(str(letter))
    return letter.upper()


def validate_mask(masked_word) -> str:
    if not isinstance(masked_word, str) or not _MASK_RE.fullmatch(masked_word):
        raise InvalidMask(str(masked_word))
    return masked_word
