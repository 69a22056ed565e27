from __future__ import annotations
from typing import List


class EmptyCandidatePool(ValueError):
    """Raised when a guess is requested but no candidate survives the constraints."""


# ---- Base class that solvers inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.N: int = 5
        self.words: List[str] = []

    def reset(self, *, words: List[str], N: int) -> None:
        self.words = list(words)
        self.N = int(N)

    def next_guess(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")
