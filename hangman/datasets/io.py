from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

# Shorter entries are too easy to be worth a game.
MIN_WORD_LENGTH = 5


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def normalize_words(lines: Iterable[str]) -> List[str]:
    """
    Keep ASCII entries of at least MIN_WORD_LENGTH characters, uppercased and
    sorted. Duplicates are kept.
    """
    words = [w.strip() for w in lines]
    return sorted(w.upper() for w in words if w.isascii() and len(w) >= MIN_WORD_LENGTH)


def load_dictionary(p: Path | str) -> List[str]:
    """
    Load a newline-delimited word list as the candidate dictionary.
    Raises FileNotFoundError if the path doesn't exist; an empty result is fine.
    """
    return normalize_words(read_lines(p))
