# apps/cli/simulate.py
"""
Self-play over a list of answers.

This script:
  1) Loads the dictionary (embedded default or --dictionary FILE).
  2) Plays one round per answer (default: every dictionary word), guessing the
     picker's best word each turn, with a live progress indicator.
  3) Writes a CSV with per-round results and prints a short summary.
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path

# Optional rich progress bar
try:
    from tqdm import tqdm
    _HAS_TQDM = True
except ImportError:
    _HAS_TQDM = False

from packages.datasets import load_dictionary
from packages.engine import MAX_GUESSES, WordPicker
from packages.harness import run_case, write_csv, timestamp_id


def main(argv=None):
    ap = argparse.ArgumentParser(description="Self-play the word picker against known answers")
    ap.add_argument("--dictionary", help="word list (default: embedded list)")
    ap.add_argument("--answers", help="answers to play (default: the dictionary itself)")
    ap.add_argument("--sample", type=int, help="play only a random subset of answers")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for the CSV")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar if tqdm available, else plain text)."
    )
    args = ap.parse_args(argv)

    dictionary = load_dictionary(args.dictionary)
    if args.answers:
        answers = load_dictionary(args.answers)
    else:
        # same filtering the picker applies
        answers = list(WordPicker(dictionary).words)

    if args.sample and args.sample < len(answers):
        rng = random.Random(args.seed)
        answers = rng.sample(answers, args.sample)

    mode = args.progress
    if mode == "auto":
        mode = "bar" if (_HAS_TQDM and sys.stderr.isatty()) else "plain"

    total = len(answers)
    iterator = tqdm(answers, ncols=80, desc="Playing", unit="round") if mode == "bar" else answers

    results = []
    start = time.time()
    last_print = 0.0
    for idx, ans in enumerate(iterator, 1):
        results.append(run_case(ans, dictionary=dictionary))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {now - start:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    csv_path = Path(args.outdir) / f"simulate_{timestamp_id()}.csv"
    write_csv(results, str(csv_path), max_turns=MAX_GUESSES)

    solved = [r for r in results if r["success"]]
    avg = sum(r["guesses"] for r in solved) / len(solved) if solved else 0.0
    print(f"Solved {len(solved)}/{total} (avg {avg:.2f} guesses when solved)")
    print(f"Wrote: {csv_path}")


if __name__ == "__main__":
    main()
