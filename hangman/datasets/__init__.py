from .validator import validate_dictionary, pretty_summary
from .io import MIN_WORD_LENGTH, read_lines, write_lines, normalize_words, load_dictionary

__all__ = [
    "validate_dictionary", "pretty_summary",
    "MIN_WORD_LENGTH", "read_lines", "write_lines", "normalize_words", "load_dictionary",
]
