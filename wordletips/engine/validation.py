"""
Word shape validation.

A word is usable iff:
  - it is a string
  - it is lowercase a-z only
  - it has exact length N

Nothing here checks that a word is real English; any token with the right
shape is a candidate.
"""

from string import ascii_lowercase

_LETTERS = frozenset(ascii_lowercase)


def is_valid_word(word: str, N: int) -> bool:
    """Return True if `word` has the shape of a candidate per the rules above."""
    if not isinstance(word, str):
        return False
    return len(word) == N and all(ch in _LETTERS for ch in word)
