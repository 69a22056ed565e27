from pathlib import Path

import pytest
from wordletips.datasets import pretty_summary, read_words, validate_wordlist


def _write(p: Path, text: str):
    p.write_text(text, encoding="utf-8")


def test_read_words_keeps_only_lowercase_five_letter_tokens(tmp_path: Path):
    f = tmp_path / "words_en.txt"
    _write(f, "crane Raise stares ab1cd\nslate\n\n  trace\tcrane\n")
    assert read_words(f) == ["crane", "slate", "trace", "crane"]
    assert read_words(f, N=6) == ["stares"]


def test_read_words_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_words(tmp_path / "nope.txt")


def test_validate_wordlist_happy_path(tmp_path: Path):
    f = tmp_path / "words_en.txt"
    _write(f, "crane\nraise\nstare\n")
    rep = validate_wordlist(5, str(f))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["rejected"] == 0 and rep["issues"] == []
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "N=5" in s and "words=3" in s and s.endswith("OK")


def test_validate_wordlist_flags_skipped_and_duplicates(tmp_path: Path):
    f = tmp_path / "words_en.txt"
    _write(f, "crane\ncrane\nCRANE\n???\nstares\n")
    rep = validate_wordlist(5, str(f))
    assert rep["passed"] is True
    assert rep["count"] == 2 and rep["unique_count"] == 1 and rep["rejected"] == 3
    assert any("skipped" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlist_missing_or_empty(tmp_path: Path):
    rep = validate_wordlist(5, str(tmp_path / "nope.txt"))
    assert rep["passed"] is False and rep["exists"] is False
    assert "FAIL" in pretty_summary(rep)

    f = tmp_path / "empty.txt"
    _write(f, "ab cd efg\n")
    rep = validate_wordlist(5, str(f))
    assert rep["passed"] is False
    assert any("no 5-letter" in msg for msg in rep["issues"])
