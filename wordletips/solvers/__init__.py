from .base import BaseSolver, EmptyCandidatePool
from .positional_freq import PositionalFreqSolver, best_scoring_word, position_counts, score_words

__all__ = [
    "BaseSolver",
    "EmptyCandidatePool",
    "PositionalFreqSolver",
    "best_scoring_word",
    "position_counts",
    "score_words",
]
