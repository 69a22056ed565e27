"""
I/O utilities for bench runs.

Responsibilities:
- summarize:      win rate / mean guesses / outcome counts for a batch.
- write_csv:      one row per session, with guess/response columns per round.
- write_manifest: dump a JSON manifest with config, word-list report, summary.
- timestamp_id:   stable UTC run ID string.

Responses are prefixed with an apostrophe to keep spreadsheet apps from
reading strings like "+-*--" as formulas.
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Dict, List
import csv
import json
import datetime as dt


def _text_cell(value: str) -> str:
    return "'" + value if value else value


def summarize(results: List[Dict]) -> Dict:
    n = len(results)
    wins = [r for r in results if r["success"]]
    return {
        "cases": n,
        "wins": len(wins),
        "win_rate": (len(wins) / n) if n else 0.0,
        "mean_guesses_won": (sum(r["guesses"] for r in wins) / len(wins)) if wins else 0.0,
        "outcomes": dict(Counter(r["outcome"] for r in results)),
    }


def write_csv(results: List[Dict], path: str, max_rounds: int, N: int) -> str:
    """
    Serialize a batch of session results to CSV.

    Schema (columns):
      N, answer, outcome, success, guesses, remaining, time_ms,
      guess_1, resp_1, ..., guess_<max_rounds>, resp_<max_rounds>

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["N", "answer", "outcome", "success", "guesses", "remaining", "time_ms"]
    for i in range(1, max_rounds + 1):
        fields += [f"guess_{i}", f"resp_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "N": N,
                "answer": r["answer"],
                "outcome": r["outcome"],
                "success": r["success"],
                "guesses": r["guesses"],
                "remaining": r["remaining"],
                "time_ms": round(float(r["time_ms"]), 3),
            }
            hist = r.get("history", [])
            for i in range(1, max_rounds + 1):
                g, resp = hist[i - 1] if i <= len(hist) else ("", "")
                row[f"guess_{i}"] = g
                row[f"resp_{i}"] = _text_cell(resp)
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest for a bench run.

    Typical keys:
      - run_id
      - config: CLI args
      - wordlist: output of datasets.validate_wordlist(...)
      - summary: output of summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """Compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")
