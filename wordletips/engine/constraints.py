"""
Constraint rules and candidate filtering.

A constraint is one rule about a single letter, derived from one piece of
feedback. There are exactly three kinds:

  Exact(letter, position)            word[position] == letter
  Present(letter, excluded, minimum) at least `minimum` occurrences of
                                     `letter` outside `excluded` positions
  Absent(letter, tolerance)          at most `tolerance` occurrences of
                                     `letter` in the whole word

`satisfies` is the single place that knows how each kind is checked; the
methods on the dataclasses just forward to it.

Filtering is a plain conjunction: a word survives iff it satisfies every
constraint. Order of application never changes the result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, FrozenSet, Iterable, List, Union


@dataclass(frozen=True)
class Exact:
    letter: str
    position: int

    def satisfies(self, word: str) -> bool:
        return satisfies(self, word)

    def __str__(self) -> str:
        return f"G({self.letter}, {self.position})"


@dataclass(frozen=True)
class Present:
    letter: str
    excluded: FrozenSet[int]
    minimum: int = 1

    def satisfies(self, word: str) -> bool:
        return satisfies(self, word)

    def __str__(self) -> str:
        return f"Y({self.letter}, {sorted(self.excluded)}, {self.minimum})"


@dataclass(frozen=True)
class Absent:
    letter: str
    tolerance: int = 0

    def satisfies(self, word: str) -> bool:
        return satisfies(self, word)

    def __str__(self) -> str:
        return f"B({self.letter}, {self.tolerance})"


Constraint = Union[Exact, Present, Absent]


def satisfies(constraint: Constraint, word: str) -> bool:
    """Return True if `word` is admissible under `constraint`."""
    if isinstance(constraint, Exact):
        return word[constraint.position] == constraint.letter

    if isinstance(constraint, Present):
        found = 0
        for i, ch in enumerate(word):
            if ch == constraint.letter and i not in constraint.excluded:
                found += 1
        return found >= constraint.minimum

    if isinstance(constraint, Absent):
        patience = constraint.tolerance
        for ch in word:
            if ch == constraint.letter:
                if patience == 0:
                    return False
                patience -= 1
        return True

    raise TypeError(f"not a constraint: {constraint!r}")


def filter_words(words: Iterable[str], predicate: Callable[[str], bool]) -> List[str]:
    """Keep the words for which `predicate` holds (order preserved)."""
    return [w for w in words if predicate(w)]


def filter_candidates(words: Iterable[str], constraints: Iterable[Constraint]) -> List[str]:
    """
    Keep only words that satisfy ALL `constraints`.

    Args:
      words       : candidate pool (order is preserved in the result)
      constraints : any iterable of constraints, e.g. a ConstraintSet

    Returns:
      List[str] of surviving candidates.
    """
    rules = list(constraints)
    out: List[str] = []
    for w in words:
        if all(satisfies(c, w) for c in rules):
            out.append(w)
    return out
