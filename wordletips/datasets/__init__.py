from .validator import validate_wordlist, pretty_summary
from .io import read_tokens, read_words, select_words

__all__ = ["validate_wordlist", "pretty_summary", "read_words", "read_tokens", "select_words"]
