"""
Word-list diagnostics.

What this module does:
- Inspect one word file: how many whitespace-separated tokens it holds, how
  many of them are usable candidates (lowercase, a-z only, exact length N),
  how many were rejected, and how many duplicates remain.
- Compute SHA-256 of the raw file so a run can record exactly which list it used.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordletips.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "words_en.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List
import hashlib

from .io import read_tokens, select_words


@dataclass
class WordlistReport:
    path: str            # file path (as given)
    N: int               # word length the list was checked against
    exists: bool         # did the file exist on disk?
    tokens: int          # whitespace-separated tokens in the file
    count: int           # accepted candidates
    unique_count: int    # accepted candidates after dedupe
    rejected: int        # tokens of the wrong shape
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def validate_wordlist(N: int, path: str) -> Dict:
    """
    Inspect the word list at `path` for length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordlistReport). `passed` is True
        when the file exists and holds at least one candidate; rejected tokens
        and duplicates are reported as issues but do not fail the check, since
        loading simply skips them.
    """
    p = Path(path)
    if not p.exists():
        rep = WordlistReport(str(p), N, False, 0, 0, 0, 0, "", False,
                             [f"word file not found: {path}"])
        return asdict(rep)

    tokens = read_tokens(p)
    words = select_words(tokens, N)
    unique = set(words)

    issues: List[str] = []
    if not words:
        issues.append(f"no {N}-letter lowercase words found")
    rejected = len(tokens) - len(words)
    if rejected:
        issues.append(f"{rejected} token(s) skipped (wrong length or characters)")
    if len(unique) != len(words):
        issues.append(f"{len(words) - len(unique)} duplicate word(s)")

    rep = WordlistReport(
        path=str(p),
        N=N,
        exists=True,
        tokens=len(tokens),
        count=len(words),
        unique_count=len(unique),
        rejected=rejected,
        sha256=_sha256_file(p),
        passed=bool(words),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for the console.

    Example:
        N=5 | words=12972 (uniq=12972, skipped=3, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, "
        f"skipped={report['rejected']}, sha={sha}) | {status}"
    )
