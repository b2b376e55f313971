from .errors import HangmanError, IllegalGuess, DuplicateGuess, GameNotFound, InvalidMask
from .game import Game, MAX_INCORRECT, MASK_CHAR
from .constraints import build_shape, filter_candidates
from .validation import validate_letter, validate_mask

__all__ = [
    "HangmanError", "IllegalGuess", "DuplicateGuess", "GameNotFound", "InvalidMask",
    "Game", "MAX_INCORRECT", "MASK_CHAR",
    "build_shape", "filter_candidates",
    "validate_letter", "validate_mask",
]
