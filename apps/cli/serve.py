# apps/cli/serve.py
"""
Start the hangman game server.

Usage:
    python -m apps.cli.serve words.txt --port 8080 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from hangman.datasets import load_dictionary, validate_dictionary, pretty_summary
from hangman.service import create_app


def main(argv=None):
    ap = argparse.ArgumentParser(description="hangman — game server")
    ap.add_argument("path", help="path to word list (one word per line)")
    ap.add_argument("--host", default=os.environ.get("HANGMAN_HOST", "127.0.0.1"))
    ap.add_argument("--port", type=int, default=int(os.environ.get("HANGMAN_PORT", "8080")))
    ap.add_argument("--seed", type=int, help="RNG seed for secret word selection")
    ap.add_argument("--log-level", default="INFO", help="logging level (DEBUG, INFO, ...)")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    rep = validate_dictionary(args.path)
    print(pretty_summary(rep))
    try:
        app = create_app(load_dictionary(args.path), seed=args.seed)
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    app.run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
