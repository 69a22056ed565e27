"""
Accumulated constraints for one game session.

The set is keyed so that duplicate detection and per-letter lookups are O(1):

  ("absent",  letter)            -> Absent      (at most one per letter)
  ("present", letter)            -> Present     (at most one per letter)
  ("exact",   letter, position)  -> Exact       (one per letter+position)

merge() folds in the round-local constraints produced by
engine.feedback.parse_feedback(). The set only ever gets stricter: every
word admitted after a merge was admitted before it.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .constraints import Absent, Constraint, Exact, Present, satisfies
from .feedback import merge_rank

log = logging.getLogger(__name__)

Key = Tuple


def key_of(constraint: Constraint) -> Key:
    if isinstance(constraint, Exact):
        return ("exact", constraint.letter, constraint.position)
    if isinstance(constraint, Present):
        return ("present", constraint.letter)
    if isinstance(constraint, Absent):
        return ("absent", constraint.letter)
    raise TypeError(f"not a constraint: {constraint!r}")


class ConstraintSet:
    def __init__(self, constraints: Iterable[Constraint] = ()):
        self._rules: Dict[Key, Constraint] = {}
        for c in constraints:
            self._rules[key_of(c)] = c

    # ---- read access ----
    def __iter__(self) -> Iterator[Constraint]:
        return iter(list(self._rules.values()))

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, constraint: object) -> bool:
        try:
            k = key_of(constraint)  # type: ignore[arg-type]
        except TypeError:
            return False
        return self._rules.get(k) == constraint

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConstraintSet):
            return NotImplemented
        return self._rules == other._rules

    def __repr__(self) -> str:
        return f"ConstraintSet({list(self._rules.values())!r})"

    def __str__(self) -> str:
        return "[" + " ".join(str(c) for c in self._rules.values()) + "]"

    def present_for(self, letter: str) -> Optional[Present]:
        return self._rules.get(("present", letter))  # type: ignore[return-value]

    def absent_for(self, letter: str) -> Optional[Absent]:
        return self._rules.get(("absent", letter))  # type: ignore[return-value]

    def exact_positions(self, letter: str) -> List[int]:
        return [c.position for c in self._rules.values()
                if isinstance(c, Exact) and c.letter == letter]

    def exact_count(self, letter: str) -> int:
        return len(self.exact_positions(letter))

    def admits(self, word: str) -> bool:
        return all(satisfies(c, word) for c in self._rules.values())

    def copy(self) -> "ConstraintSet":
        return ConstraintSet(self._rules.values())

    # ---- update ----
    def merge(self, round_constraints: Iterable[Constraint]) -> List[Constraint]:
        """
        Fold one round's constraints into the set.

        The input is re-sorted into merge order (Absent, Present, Exact) so
        callers may pass constraints in any order.

        Returns:
          the constraints that were added or replaced, in merge order.
        """
        changed: List[Constraint] = []
        for c in sorted(round_constraints, key=merge_rank):
            if c in self:
                continue
            if isinstance(c, Exact):
                changed.extend(self._merge_exact(c))
            elif isinstance(c, Present):
                changed.extend(self._merge_present(c))
            elif isinstance(c, Absent):
                changed.extend(self._merge_absent(c))
            else:
                raise TypeError(f"not a constraint: {c!r}")
        if changed:
            log.debug("merged %s -> %s", [str(c) for c in changed], self)
        return changed

    def _merge_exact(self, c: Exact) -> List[Constraint]:
        changed: List[Constraint] = []
        prev = self.present_for(c.letter)
        if prev is not None:
            # The confirmed occurrence stops counting toward the Present rule.
            minimum = prev.minimum - 1
            if minimum <= 0:
                del self._rules[key_of(prev)]
                log.debug("%s retires %s", c, prev)
            else:
                upd = Present(c.letter, prev.excluded | {c.position}, minimum)
                self._rules[key_of(upd)] = upd
                changed.append(upd)
        self._rules[key_of(c)] = c
        changed.append(c)
        return changed

    def _merge_present(self, c: Present) -> List[Constraint]:
        prev = self.present_for(c.letter)
        if prev is None:
            self._rules[key_of(c)] = c
            return [c]

        # Occurrences already pinned by Exact rules and excluded from `prev`
        # are not counted by it; discount them from the new signal too.
        pinned = sum(1 for p in self.exact_positions(c.letter)
                     if p in prev.excluded and p not in c.excluded)
        upd = Present(c.letter, prev.excluded | c.excluded,
                      max(prev.minimum, c.minimum - pinned))
        if upd == prev:
            return []
        self._rules[key_of(upd)] = upd
        return [upd]

    def _merge_absent(self, c: Absent) -> List[Constraint]:
        tolerance = max(c.tolerance, self.exact_count(c.letter))
        prev = self.absent_for(c.letter)
        if prev is not None:
            tolerance = min(tolerance, prev.tolerance)
        upd = Absent(c.letter, tolerance)
        if upd == prev:
            return []
        self._rules[key_of(upd)] = upd
        return [upd]
