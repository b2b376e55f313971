from __future__ import annotations
import random
from typing import Dict, Type

# Chosen by mashing the keyboard. Plenty random.
DEFAULT_SEED = 3408509824

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    One solver instance plays one game at a time. The game loop calls
    select_next_letter once per turn with the latest masked word.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, *, seed: int | None = DEFAULT_SEED):
        self.seed = seed
        self.rng = random.Random(seed)

    def reset(self, *, seed: int | None = None) -> None:
        """Forget per-game state; reseed the RNG if a seed is given."""
        if seed is not None:
            self.seed = seed
            self.rng.seed(seed)

    def select_next_letter(self, masked_word: str, remaining_wrong_guesses: int) -> str:
        raise NotImplementedError("Override in subclass")
