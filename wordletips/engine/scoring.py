"""
Reference feedback for a single (guess, answer) pair.

Conventions (same symbols a human types at the prompt):
  - '+' : exact   = correct letter in the correct position
  - '*' : present = correct letter in the wrong position
  - '-' : absent  = letter not present (or present fewer times than guessed)

The interactive solver never calls this; it stands in for the human when the
harness plays sessions against a known answer.

Algorithm (two-pass, duplicate-safe):
  1) First pass marks all exact matches and counts the remaining (unmatched)
     letters from the answer.
  2) Second pass marks present letters only while that letter still has
     remaining count.
"""

from collections import Counter
from typing import Literal

EXACT = "+"
PRESENT = "*"
ABSENT = "-"

# Each response character is one of '+', '*', '-'
ResponseChar = Literal["+", "*", "-"]


def score(guess: str, answer: str) -> str:
    """
    Compute the response string for `guess` against `answer`.

    Preconditions:
      - len(guess) == len(answer)

    Examples:
      score("belle", "level") -> "-+***"
      score("lemon", "level") -> "++---"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    if len(guess) != len(answer):
        raise ValueError(f"guess and answer must be the same length: {guess!r} vs {answer!r}")

    n = len(guess)
    pattern = [ABSENT] * n

    # Pass 1: exact matches; everything else in the answer is still available.
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = EXACT
        else:
            remaining[a] += 1

    # Pass 2: present only while the letter has unconsumed occurrences.
    for i, g in enumerate(guess):
        if pattern[i] == EXACT:
            continue
        if remaining[g] > 0:
            pattern[i] = PRESENT
            remaining[g] -= 1

    return "".join(pattern)
