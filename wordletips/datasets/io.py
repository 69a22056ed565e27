from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

from wordletips.engine.validation import is_valid_word


def read_tokens(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file and split it on any whitespace.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return p.read_text(encoding="utf-8").split()


def select_words(tokens: Iterable[str], N: int) -> List[str]:
    """Keep tokens that are exactly N lowercase a-z letters; everything else is dropped."""
    return [t for t in tokens if is_valid_word(t, N)]


def read_words(p: Path | str, N: int = 5) -> List[str]:
    """Candidate pool from a word file, in file order."""
    return select_words(read_tokens(p), N)
