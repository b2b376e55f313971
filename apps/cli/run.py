# apps/cli/run.py
"""
CLI entry point for offline solver evaluation.

This script:
  1) Validates the dictionary (prints counts + SHA).
  2) Loads it and plays every (or a sampled subset of) word as a secret
     against each requested solver, without a server.
  3) Writes per solver:
       - CSV:  per-game results
       - JSON: manifest with config, dictionary report, summary, git commit
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from hangman.datasets import load_dictionary, validate_dictionary, pretty_summary
from hangman.harness import run_case, summarize
from hangman.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from hangman.solvers import create_solver, get_solver_ids


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def _run_one_solver(solver_id, cases, *, dictionary, base_seed, progress):
    solver = create_solver(solver_id, dictionary=dictionary, seed=base_seed)
    results = []
    total = len(cases)
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc=solver_id, unit="game") if progress == "bar" else cases
    for idx, ans in enumerate(iterator, 1):
        # Derive a per-game seed so runs are reproducible and independent
        r = run_case(solver, ans, seed=base_seed + idx * 1013904223)
        r["solver_id"] = solver.id
        results.append(r)

        if progress == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{solver_id} {idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if progress == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()
    return results


def main(argv=None):
    """
    Parse CLI args, validate the dictionary, run each solver and write outputs.
    """
    playable = [s for s in get_solver_ids() if s != "user"]

    ap = argparse.ArgumentParser(description="hangman — offline solver evaluation")
    ap.add_argument("dictionary", help="path to word list (secrets and strategic candidates)")
    ap.add_argument("--solvers", nargs="+", default=["strategic"], choices=playable,
                    help="solver ids to evaluate")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of words (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto",
                    help="Show run progress (auto=bar on a terminal, else plain text).")
    ap.add_argument("--log-level", default="WARNING", help="logging level (DEBUG, INFO, ...)")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(levelname)s %(name)s: %(message)s")

    rep = validate_dictionary(args.dictionary)
    print(pretty_summary(rep))
    if not rep["exists"]:
        print(f"error: dictionary not found: {args.dictionary}", file=sys.stderr)
        return 1

    dictionary = load_dictionary(args.dictionary)
    # Only letter-only words can be fully revealed.
    cases = [w for w in dictionary if w.isalpha()]
    if args.sample and args.sample < len(cases):
        rng = random.Random(args.seed)
        rng.shuffle(cases)
        cases = cases[: args.sample]

    progress = _progress_mode(args.progress)
    run_id = timestamp_id()
    outdir = Path(args.outdir)

    for solver_id in args.solvers:
        results = _run_one_solver(solver_id, cases, dictionary=dictionary,
                                  base_seed=args.seed, progress=progress)
        summary = summarize(results)

        sdir = outdir / solver_id
        csv_path = write_csv(results, str(sdir / f"run_{run_id}.csv"))
        manifest_path = write_manifest({
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": vars(args),
            "dictionary": rep,
            "solver_id": solver_id,
            "summary": summary,
        }, str(sdir / f"run_{run_id}_manifest.json"))

        print(f"{solver_id}: win_rate={summary['win_rate']:.3f} "
              f"mean_guesses={summary['mean_guesses']:.2f} mean_misses={summary['mean_misses']:.2f}")
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
