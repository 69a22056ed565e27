"""
Offline self-play.

- run_case:  play one session against a known answer, with the reference
             scorer standing in for the human at the feedback prompt.
- run_batch: run many answers in sequence (optionally a sample prefix).

These functions are UI-agnostic so they can be reused by the bench CLI, a
notebook, or tests without changes.
"""

from __future__ import annotations
import time
from typing import Dict, Iterable, List, Optional, Sequence

from wordletips.engine import score
from wordletips.session import RoundController, SessionConfig


def run_case(
        answer: str,
        words: Sequence[str],
        *,
        config: Optional[SessionConfig] = None,
) -> Dict:
    """
    Play one session until it is solved, exhausted, or runs out of candidates.

    Args:
        answer:  the hidden word for this case
        words:   the candidate pool the session starts from
        config:  word length and round cap (defaults to the standard game)

    Returns:
        dict with keys:
            answer (str), success (bool), outcome (str), guesses (int),
            time_ms (float), history (list[(guess, response)]),
            remaining (int)
    """
    config = config or SessionConfig()
    answer = answer.strip().lower()
    if len(answer) != config.word_length:
        raise ValueError(f"answer {answer!r} is not {config.word_length} letters long")

    t0 = time.perf_counter()
    controller = RoundController(words, lambda guess: score(guess, answer), config=config)
    result = controller.run()
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "answer": answer,
        "success": result.success,
        "outcome": result.outcome.value,
        "guesses": result.rounds,
        "time_ms": dt,
        "history": [(r.guess, r.response) for r in result.history],
        "remaining": len(result.candidates),
    }


def run_batch(
        answers: Iterable[str],
        words: Sequence[str],
        *,
        config: Optional[SessionConfig] = None,
        sample: Optional[int] = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If `sample` is given, only the first K
    answers are played.
    """
    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]
    return [run_case(ans, words, config=config) for ans in pool]
