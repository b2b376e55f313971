from __future__ import annotations
from typing import List
from .base import BaseSolver, DEFAULT_SEED, REGISTRY, register

from . import strategic  # noqa: F401
from . import random_letters  # noqa: F401
from . import user  # noqa: F401

from .strategic import StrategicSolver
from .random_letters import RandomSolver
from .user import UserInputSolver

__all__ = [
    "BaseSolver", "DEFAULT_SEED", "REGISTRY", "register",
    "StrategicSolver", "RandomSolver", "UserInputSolver",
    "create_solver", "get_solver_ids",
]


def create_solver(solver_id: str, **kwargs) -> BaseSolver:
    """
    Factory: instantiate a registered solver by id.

    Keyword arguments go to the solver constructor (e.g. dictionary=..., seed=...).
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
