# apps/cli/play.py
"""
Play one game of hangman against a running server.

Usage:
    python -m apps.cli.play http://127.0.0.1:8080 strategic --dictionary words.txt
    python -m apps.cli.play http://127.0.0.1:8080 random
    python -m apps.cli.play http://127.0.0.1:8080 user
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

import requests

from hangman.engine import HangmanError
from hangman.solvers import create_solver, get_solver_ids, StrategicSolver, DEFAULT_SEED
from hangman.service import HangmanClient, play_game


def _build_solver(args):
    if args.solver == "strategic":
        if not args.dictionary:
            raise SystemExit("the strategic solver needs --dictionary")
        return StrategicSolver.from_path(args.dictionary, seed=args.seed)
    return create_solver(args.solver, seed=args.seed)


def main(argv=None):
    ap = argparse.ArgumentParser(description="hangman — play one game against a server")
    ap.add_argument("server", nargs="?", default=os.environ.get("HANGMAN_SERVER"),
                    help="hangman url (default: $HANGMAN_SERVER)")
    ap.add_argument("solver", nargs="?", default="strategic", choices=get_solver_ids())
    ap.add_argument("--dictionary", help="path to dictionary (strategic solver)")
    ap.add_argument("--seed", type=int, default=DEFAULT_SEED, help="solver RNG seed")
    ap.add_argument("--timeout", type=float, default=10.0, help="HTTP timeout in seconds")
    ap.add_argument("--log-level", default="WARNING", help="logging level (DEBUG, INFO, ...)")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(levelname)s %(name)s: %(message)s")
    if not args.server:
        ap.error("no server given and HANGMAN_SERVER is not set")

    try:
        solver = _build_solver(args)
        outcome = play_game(HangmanClient(args.server, timeout=args.timeout), solver)
    except (HangmanError, requests.RequestException, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if outcome.victory:
        print(f"We win! {outcome.message} ({outcome.word})")
    else:
        print(f"We lose. :( {outcome.message} ({outcome.word})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
