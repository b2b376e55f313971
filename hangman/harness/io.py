"""
I/O utilities for experiment runs.

Responsibilities:
- write_csv:     flatten per-game results into a tidy CSV (one row per game).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- summarize:     aggregate win rate and guess statistics for a batch.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Masked words are prefixed with an apostrophe to keep Excel from reading
  strings like "*PP**" as formulas.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

import numpy as np


def _excel_safe(masked: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "*PP**" -> "'*PP**"
    """
    return "'" + masked if masked else masked


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      solver, answer, success, guesses, misses, time_ms, letters, final

    `letters` is the guessed letters in order, `final` the last masked word.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["solver", "answer", "success", "guesses", "misses", "time_ms", "letters", "final"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            hist = r.get("history", [])
            w.writerow({
                "solver": r.get("solver_id", "?"),
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "misses": r["misses"],
                "time_ms": round(float(r["time_ms"]), 3),
                "letters": "".join(letter for letter, _ in hist),
                "final": _excel_safe(hist[-1][1]) if hist else "",
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dataset validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (solvers, dictionary path, seed, sample, outdir)
      - dictionary: output of datasets.validate_dictionary(...)
      - summary: per-solver output of summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate a batch: games, win_rate, mean/median guesses and mean misses.
    All values are plain floats/ints so the dict can go straight into JSON.
    """
    if not results:
        return {"games": 0, "win_rate": 0.0, "mean_guesses": 0.0,
                "median_guesses": 0.0, "mean_misses": 0.0}
    wins = np.array([r["success"] for r in results], dtype=float)
    guesses = np.array([r["guesses"] for r in results], dtype=float)
    misses = np.array([r["misses"] for r in results], dtype=float)
    return {
        "games": len(results),
        "win_rate": float(wins.mean()),
        "mean_guesses": float(guesses.mean()),
        "median_guesses": float(np.median(guesses)),
        "mean_misses": float(misses.mean()),
    }


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
