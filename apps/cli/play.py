# apps/cli/play.py
"""
Interactive solver.

This script:
  1) Sets up logging at the requested level.
  2) Loads the dictionary (embedded default, or --dictionary FILE) and logs a
     one-line diagnostics summary.
  3) Reads guess/reply pairs from stdin and prints the best remaining words
     after every turn, starting a fresh round on win, exhaustion or after
     the guess budget.

Usage:
    python -m apps.cli.play
    python -m apps.cli.play --dictionary words.txt --frequencies --log-level debug
"""

from __future__ import annotations

import argparse
import logging
import sys

from packages.datasets import DEFAULT_DICTIONARY, load_dictionary, pretty_summary, validate_dictionary
from packages.shell import Engine, Parser

log = logging.getLogger(__name__)

LOG_LEVELS = {
    "off": logging.CRITICAL + 1,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=LOG_LEVELS[level],
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv=None):
    ap = argparse.ArgumentParser(description="Five-letter word puzzle solver")
    ap.add_argument("-d", "--dictionary", metavar="FILE",
                    help="word list, one word per line (default: embedded list)")
    ap.add_argument("-l", "--log-level", choices=sorted(LOG_LEVELS), default="warning",
                    help="logging verbosity on stderr")
    ap.add_argument("-f", "--frequencies", action="store_true",
                    help="after each turn, show how many remaining words contain each letter")
    args = ap.parse_args(argv)

    setup_logging(args.log_level)

    rep = validate_dictionary(args.dictionary or DEFAULT_DICTIONARY)
    log.info(pretty_summary(rep))
    for issue in rep["issues"]:
        log.warning(issue)

    words = load_dictionary(args.dictionary)

    engine = Engine(words, show_frequency=args.frequencies)
    engine.start(Parser(sys.stdin))


if __name__ == "__main__":
    main()
