# apps/cli/play.py
"""
Interactive helper: play the game elsewhere, type the colors back here.

Each round this prints how many words are still possible and which one to
try. After entering it in the game, type the response as 5 symbols:
  + exact (green), * present (yellow), - absent (black/gray)

Usage:
    python -m apps.cli.play --words words_en.txt
"""

from __future__ import annotations

import argparse
import logging
import sys

from wordletips.datasets import read_words
from wordletips.session import MAX_ROUNDS, WORD_LENGTH, Reporter, RoundController, SessionConfig


class ConsoleReporter(Reporter):
    def on_start(self, pool_size: int) -> None:
        print(f"Starting the game with {pool_size} candidates")

    def on_guess(self, number: int, pool_size: int, guess: str) -> None:
        print(f"Guessing among {pool_size} words")
        print(f"Try: {guess}")

    def on_malformed(self, response: str, expected_length: int) -> None:
        print(f"Something was wrong with your response (need {expected_length} symbols). "
              f"Try again. Got: {response!r}")

    def on_constraints(self, constraints) -> None:
        print(f"Current tips: {constraints}")

    def on_solved(self, guess: str, rounds: int) -> None:
        print(f"Solved: {guess} in {rounds} guess(es)")

    def on_empty_pool(self) -> None:
        print("No candidates left. Was that correct?")


def prompt_feedback(guess: str) -> str:
    print("What did you get? (+ for green, * for yellow, - for black)")
    print(guess)
    try:
        return input("> ")
    except EOFError:
        raise SystemExit("input closed")


def main():
    ap = argparse.ArgumentParser(description="wordletips: interactive guess helper")
    ap.add_argument("--words", default="words_en.txt",
                    help="word file (whitespace separated; other lengths are skipped)")
    ap.add_argument("--N", type=int, default=WORD_LENGTH, help="word length")
    ap.add_argument("--max-rounds", type=int, default=MAX_ROUNDS, help="guesses allowed")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    config = SessionConfig(word_length=args.N, max_rounds=args.max_rounds)
    try:
        words = read_words(args.words, config.word_length)
    except FileNotFoundError as e:
        print(f"Cannot read word list: {e}", file=sys.stderr)
        sys.exit(1)

    controller = RoundController(words, prompt_feedback, config=config, reporter=ConsoleReporter())
    result = controller.run()
    if not result.success and result.candidates:
        print(f"Out of guesses. {len(result.candidates)} candidate(s) left: "
              f"{' '.join(result.candidates[:10])}")


if __name__ == "__main__":
    main()
