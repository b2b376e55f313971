"""
Experiment harness core primitives.

- run_case:  play a single game (one secret word) with a given solver.
- run_batch: play many games in sequence (optionally a sample prefix).
- The wrong-guess budget comes from the engine (MAX_INCORRECT).

These functions drive a local Game directly, with the same turn contract the
HTTP client uses: the solver sees the masked word and the remaining wrong
guesses, and a duplicate guess is retried without spending a turn.
"""

from __future__ import annotations
import logging
import time
from typing import Dict, List, Tuple
from hangman.engine import Game, DuplicateGuess

log = logging.getLogger(__name__)

# One retry per letter of the alphabet is enough to get past any duplicate run.
MAX_RETRIES = 26


def run_case(
        solver,
        answer: str,
        *,
        seed: int | None = None,
        max_retries: int = MAX_RETRIES,
) -> Dict:
    """
    Execute one game until it is won or lost.

    Args:
        solver:      an object implementing BaseSolver.select_next_letter
        answer:      the secret word for this case
        seed:        RNG seed to make solver tie-breaks reproducible
        max_retries: consecutive duplicate guesses tolerated before giving up

    Returns:
        dict with keys:
            success (bool), guesses (int), misses (int), time_ms (float),
            history (list[(letter, masked_after)]), answer (str)
    """
    solver.reset(seed=seed)
    game = Game(answer)

    # History accumulates (letter, masked word after the guess)
    history: List[Tuple[str, str]] = []
    retries = 0

    t0 = time.time()
    while not game.is_over():
        letter = solver.select_next_letter(game.masked_word(), game.guesses_remaining())
        try:
            game.guess(letter)
        except DuplicateGuess:
            retries += 1
            log.debug("duplicate guess %s on %s (retry %d)", letter, answer, retries)
            if retries > max_retries:
                break
            continue
        retries = 0
        history.append((letter, game.masked_word()))

    dt = (time.time() - t0) * 1000.0
    return {
        "success": game.is_won(), "guesses": len(history), "misses": len(game.incorrect),
        "time_ms": dt, "history": history, "answer": game.word,
    }


def run_batch(
        solver,
        answers: List[str],
        *,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K answers
    are used to speed up quick experiments.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, ans in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(solver, ans, seed=case_seed))
    return out
