"""
Dictionary validator.

What this module does:
- Inspect a newline-delimited word list before it is served or used by a solver.
- Count what load_dictionary would keep and why the rest is dropped
  (blank, shorter than MIN_WORD_LENGTH, non-ASCII, non-alphabetic).
- Compute the SHA-256 of the raw file so run manifests pin the exact list.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from hangman.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib

from .io import MIN_WORD_LENGTH


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class DroppedCounts:
    """Lines load_dictionary would discard, by reason."""
    blank: int = 0
    short: int = 0
    non_ascii: int = 0


@dataclass
class DictionaryReport:
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    lines: int           # raw line count
    count: int           # words kept after normalization
    unique_count: int    # unique kept words
    non_alpha: int       # kept words with characters outside A-Z (e.g. "CAN'T")
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    dropped: DroppedCounts = field(default_factory=DroppedCounts)
    passed: bool = False
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


# -----------------------------
# Public API
# -----------------------------

def validate_dictionary(path: str) -> Dict:
    """
    Validate a dictionary file.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see DictionaryReport schema). `passed`
        requires at least one kept word; dropped lines are reported as issues
        but do not fail the check since loading filters them anyway.
    """
    p = Path(path)
    if not p.exists():
        rep = DictionaryReport(path=path, exists=False, lines=0, count=0, unique_count=0,
                               non_alpha=0, sha256="",
                               issues=[f"dictionary file not found: {path}"])
        return asdict(rep)

    dropped = DroppedCounts()
    kept: List[str] = []
    lines = 0
    with p.open("r", encoding="utf-8") as f:
        for raw in f:
            lines += 1
            w = raw.strip()
            if not w:
                dropped.blank += 1
            elif not w.isascii():
                dropped.non_ascii += 1
            elif len(w) < MIN_WORD_LENGTH:
                dropped.short += 1
            else:
                kept.append(w.upper())

    non_alpha = sum(1 for w in kept if not w.isalpha())
    issues: List[str] = []
    if not kept:
        issues.append("dictionary contains 0 usable words")
    if dropped.short:
        issues.append(f"{dropped.short} word(s) shorter than {MIN_WORD_LENGTH} dropped")
    if dropped.non_ascii:
        issues.append(f"{dropped.non_ascii} non-ASCII line(s) dropped")
    if non_alpha:
        issues.append(f"{non_alpha} kept word(s) contain non-letters")
    if len(set(kept)) != len(kept):
        issues.append("dictionary contains duplicate words")

    rep = DictionaryReport(
        path=str(p),
        exists=True,
        lines=lines,
        count=len(kept),
        unique_count=len(set(kept)),
        non_alpha=non_alpha,
        sha256=_sha256_file(p),
        dropped=dropped,
        passed=bool(kept),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words.txt | kept=2315 (uniq=2315, sha=abc123...) | dropped blank=0 short=12 non_ascii=1 | OK
    """
    d = report["dropped"]
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{report['path']} | kept={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| dropped blank={d['blank']} short={d['short']} non_ascii={d['non_ascii']} | {status}"
    )
