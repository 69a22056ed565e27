# apps/cli/bench.py
"""
Batch self-play for the positional-frequency helper.

This script:
  1) Inspects the word list (prints counts + SHA).
  2) Plays one session per answer, using the reference scorer as feedback.
  3) Writes:
       - CSV:  per-session results + guess/response columns
       - JSON: manifest with config, word-list report and summary
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from tqdm import tqdm

from wordletips.datasets import pretty_summary, read_words, validate_wordlist
from wordletips.harness import run_case, summarize, timestamp_id, write_csv, write_manifest
from wordletips.session import MAX_ROUNDS, WORD_LENGTH, SessionConfig


def main():
    ap = argparse.ArgumentParser(description="wordletips: self-play benchmark")
    ap.add_argument("--words", default="words_en.txt", help="candidate pool the helper starts from")
    ap.add_argument("--answers", help="hidden answers to play (default: the word list itself)")
    ap.add_argument("--N", type=int, default=WORD_LENGTH, help="word length")
    ap.add_argument("--max-rounds", type=int, default=MAX_ROUNDS, help="guesses allowed")
    ap.add_argument("--sample", type=int, help="play only this many answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["bar", "off"], default="bar")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    config = SessionConfig(word_length=args.N, max_rounds=args.max_rounds)

    # 1) Inspect and load
    rep = validate_wordlist(config.word_length, args.words)
    print(pretty_summary(rep))
    if not rep["passed"]:
        print("; ".join(rep["issues"]), file=sys.stderr)
        sys.exit(1)
    words = read_words(args.words, config.word_length)
    try:
        answers = read_words(args.answers, config.word_length) if args.answers else list(words)
    except FileNotFoundError as e:
        print(f"Cannot read answers: {e}", file=sys.stderr)
        sys.exit(1)

    # 2) Choose cases
    if args.sample and args.sample < len(answers):
        pool = list(answers)
        random.Random(args.seed).shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = answers

    # 3) Play
    iterator = cases if args.progress == "off" else tqdm(cases, ncols=80, desc="Playing", unit="game")
    results = [run_case(ans, words, config=config) for ans in iterator]

    # 4) Write outputs
    summary = summarize(results)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = write_csv(results, str(outdir / f"bench_{run_id}.csv"),
                         max_rounds=config.max_rounds, N=config.word_length)
    manifest_path = write_manifest({
        "run_id": run_id,
        "config": vars(args),
        "wordlist": rep,
        "summary": summary,
    }, str(outdir / f"bench_{run_id}_manifest.json"))

    print(f"Won {summary['wins']}/{summary['cases']} ({summary['win_rate']:.1%}), "
          f"mean guesses when won: {summary['mean_guesses_won']:.2f}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
