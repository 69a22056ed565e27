"""
Turning a game response into round-local constraints.

A response is one symbol per position of the attempted word:
  '+' exact, '*' present, '-' absent.

parse_feedback() builds the constraints for one round, coalesces repeated
present signals per letter, fills in each absent letter's tolerance from the
same round, and returns them in merge order (Absent < Present < Exact).
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, List

from .constraints import Absent, Constraint, Exact, Present
from .scoring import ABSENT, EXACT, PRESENT

log = logging.getLogger(__name__)

# Merge order. Absent rules go first so their tolerance is settled against
# the exact matches already in the set; Exact goes last so it can retire
# Present rules merged in the same round.
MERGE_ORDER = {Absent: 0, Present: 1, Exact: 2}


def merge_rank(constraint: Constraint) -> int:
    return MERGE_ORDER[type(constraint)]


def is_well_formed(response: str, length: int) -> bool:
    """Only the length is checked; symbol content is not."""
    return len(response.strip()) == length


def is_solved(response: str) -> bool:
    response = response.strip()
    return bool(response) and all(ch == EXACT for ch in response)


def parse_feedback(guess: str, response: str) -> List[Constraint]:
    """
    Build the normalized, merge-ordered constraints for one round.

    Args:
      guess    : the attempted word
      response : symbols reported by the game, same length as `guess`

    Returns:
      List of constraints sorted by merge_rank (stable within a rank).
    """
    guess = guess.strip().lower()
    response = response.strip()
    if len(guess) != len(response):
        raise ValueError(f"response {response!r} does not match guess {guess!r}")

    raw: List[Constraint] = []
    for i, (letter, symbol) in enumerate(zip(guess, response)):
        if symbol == EXACT:
            raw.append(Exact(letter, i))
        elif symbol == PRESENT:
            raw.append(Present(letter, frozenset([i]), 1))
        elif symbol == ABSENT:
            raw.append(Absent(letter, 0))
        else:
            log.warning("ignoring unrecognized symbol %r at position %d of %r", symbol, i, response)

    return sorted(_normalize(raw), key=merge_rank)


def _normalize(raw: List[Constraint]) -> List[Constraint]:
    # Letters the game accounted for this round (exact + present signals);
    # an absent signal only covers occurrences beyond these.
    accounted: Counter = Counter(c.letter for c in raw if not isinstance(c, Absent))

    presents: Dict[str, Present] = {}
    out: List[Constraint] = []
    for c in raw:
        if isinstance(c, Present):
            prev = presents.get(c.letter)
            if prev is None:
                presents[c.letter] = c
                out.append(c)
            else:
                merged = Present(c.letter, prev.excluded | c.excluded, prev.minimum + c.minimum)
                out[out.index(prev)] = merged
                presents[c.letter] = merged
        elif isinstance(c, Absent):
            c = Absent(c.letter, accounted[c.letter])
            if c not in out:
                out.append(c)
        elif c not in out:
            out.append(c)
    return out
