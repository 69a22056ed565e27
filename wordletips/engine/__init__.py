from .scoring import score
from .constraints import Absent, Constraint, Exact, Present, filter_candidates, filter_words, satisfies
from .feedback import is_solved, is_well_formed, merge_rank, parse_feedback
from .constraint_set import ConstraintSet
from .validation import is_valid_word

__all__ = [
    "score",
    "Absent", "Constraint", "Exact", "Present",
    "satisfies", "filter_candidates", "filter_words",
    "parse_feedback", "is_well_formed", "is_solved", "merge_rank",
    "ConstraintSet",
    "is_valid_word",
]
