import string

import pytest
from hangman.solvers import (
    create_solver, get_solver_ids, register, BaseSolver, RandomSolver, UserInputSolver,
)


def test_registry_ids():
    assert get_solver_ids() == ["random", "strategic", "user"]


def test_unknown_solver_id():
    with pytest.raises(ValueError) as e:
        create_solver("oracle")
    assert "Available" in str(e.value)


def test_register_rejects_duplicates():
    with pytest.raises(ValueError):
        @register
        class Again(BaseSolver):  # noqa: F811
            id = "random"


def test_random_solver_cycles_alphabet():
    s = RandomSolver(seed=4)
    first = [s.select_next_letter("*****", 7) for _ in range(26)]
    assert sorted(first) == list(string.ascii_uppercase)
    # wraps around in the same order
    assert s.select_next_letter("*****", 7) == first[0]


def test_random_solver_reset_reshuffles_deterministically():
    s = RandomSolver(seed=4)
    a = [s.select_next_letter("*****", 7) for _ in range(5)]
    s.reset(seed=4)
    assert [s.select_next_letter("*****", 7) for _ in range(5)] == a


def test_user_solver_reprompts_until_single_letter():
    answers = iter(["", "ab", "7", " q "])
    shown = []
    s = UserInputSolver(input_fn=lambda prompt: next(answers), output_fn=shown.append)
    assert s.select_next_letter("*PP**", 5) == "Q"
    assert shown[0] == "*PP** (Guesses remaining: 5)"
    assert shown.count("Try entering just one letter") == 3


def test_factory_ignores_dictionary_for_simple_solvers():
    assert isinstance(create_solver("random", dictionary=["APPLE"], seed=1), RandomSolver)
    assert isinstance(create_solver("user", dictionary=["APPLE"]), UserInputSolver)
