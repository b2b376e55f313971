import json

from hangman.harness import run_case, run_batch, summarize, write_csv, write_manifest
from hangman.solvers import create_solver, BaseSolver

WORDS = ["APPLE", "GRAPE", "BERRY", "LEMON", "MELON"]


def test_run_case_smoke():
    solver = create_solver("strategic", dictionary=WORDS)
    r = run_case(solver, "lemon", seed=42)
    assert r["success"] is True
    assert r["answer"] == "LEMON"
    assert r["history"][-1][1] == "LEMON"
    letters = [letter for letter, _ in r["history"]]
    assert len(letters) == len(set(letters)) == r["guesses"]


class _Stubborn(BaseSolver):
    id = "stubborn"

    def select_next_letter(self, masked_word, remaining_wrong_guesses):
        return "A"


def test_run_case_gives_up_after_duplicate_retries():
    r = run_case(_Stubborn(), "APPLE", max_retries=3)
    assert r["success"] is False
    assert r["guesses"] == 1 and r["misses"] == 0


def test_run_batch_and_outputs(tmp_path):
    solver = create_solver("strategic", dictionary=WORDS)
    results = run_batch(solver, WORDS, seed=1, sample=3)
    assert [r["answer"] for r in results] == WORDS[:3]
    for r in results:
        r["solver_id"] = solver.id

    summary = summarize(results)
    assert summary["games"] == 3 and summary["win_rate"] == 1.0
    assert summary["mean_guesses"] > 0

    csv_path = write_csv(results, str(tmp_path / "out" / "run.csv"))
    lines = open(csv_path, encoding="utf-8").read().splitlines()
    assert lines[0] == "solver,answer,success,guesses,misses,time_ms,letters,final"
    assert len(lines) == 4 and lines[1].startswith("strategic,APPLE,True")

    m = write_manifest({"summary": summary}, str(tmp_path / "m.json"))
    assert json.loads(open(m, encoding="utf-8").read())["summary"]["games"] == 3


def test_summarize_empty():
    assert summarize([])["games"] == 0


def test_random_solver_finishes_every_game():
    solver = create_solver("random", seed=5)
    for r in run_batch(solver, WORDS, seed=5):
        assert r["guesses"] <= 26
        assert r["success"] or r["misses"] == 7
