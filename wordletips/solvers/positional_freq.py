"""
Positional Letter Frequency (PLF).

Idea:
  Build a (letter, position) histogram from the CURRENT candidate set.
  Score each candidate by sum(counts[letter][pos]) over its own letters.
  The first word with the strictly highest score wins, so the pick is
  reproducible for a given pool order.

Fast: O(|candidates|*N) to build + O(|candidates|*N) to score.
"""

from __future__ import annotations

from string import ascii_lowercase
from typing import List, Sequence

import numpy as np

from .base import BaseSolver, EmptyCandidatePool

ALPHABET = ascii_lowercase


def _letter_index(ch: str) -> int:
    i = ord(ch) - ord("a")
    if not 0 <= i < len(ALPHABET):
        raise ValueError(f"letter outside a-z: {ch!r}")
    return i


def position_counts(words: Sequence[str], N: int) -> np.ndarray:
    """Return a (26, N) int matrix: counts[letter][pos] over `words`."""
    counts = np.zeros((len(ALPHABET), N), dtype=np.int64)
    for w in words:
        if len(w) != N:
            raise ValueError(f"word {w!r} is not {N} letters long")
        for i, ch in enumerate(w):
            counts[_letter_index(ch), i] += 1
    return counts


def score_words(words: Sequence[str], counts: np.ndarray) -> List[int]:
    scores = []
    for w in words:
        s = 0
        for i, ch in enumerate(w):
            s += int(counts[_letter_index(ch), i])
        scores.append(s)
    return scores


def best_scoring_word(words: Sequence[str]) -> str:
    """
    Pick the highest-scoring word; ties go to the earliest word in `words`.

    Raises:
      EmptyCandidatePool if `words` is empty.
    """
    if not words:
        raise EmptyCandidatePool("no candidate words left to score")

    counts = position_counts(words, len(words[0]))
    scores = score_words(words, counts)

    best_score = -1
    best = words[0]
    for w, s in zip(words, scores):
        if s > best_score:
            best_score = s
            best = w
    return best


class PositionalFreqSolver(BaseSolver):
    id = "positional_freq"
    name = "Positional Letter Frequency"
    version = "2.0.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        return best_scoring_word(candidates)
