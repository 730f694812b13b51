"""
Line-based input for the interactive solver.

Two mini-formats:
  - guess : five ASCII letters, any case ("Crane")
  - reply : five symbols, one per slot:
              '+'  exact   (green)
              '.'  absent  (gray)
              '-'  present (yellow)

At either prompt "exit", "quit" or "q" ends the session. A reply of all '+'
is a win; the shell starts a new round instead of pruning.
"""

from __future__ import annotations

import logging
import sys
from typing import Iterable, Iterator, List, TextIO

from packages.engine.feedback import NUM_LETTERS, Feedback, Turn
from packages.engine.validation import validate_guess

log = logging.getLogger(__name__)

REPLY_EXACT = "+"
REPLY_ABSENT = "."
REPLY_PRESENT = "-"

REPLY_SYMBOLS = {
    REPLY_EXACT: Feedback.EXACT,
    REPLY_ABSENT: Feedback.ABSENT,
    REPLY_PRESENT: Feedback.PRESENT,
}

EXIT_WORDS = frozenset({"exit", "quit", "q"})


class ExitRequested(Exception):
    """The player asked to quit, or input ran out."""


class InvalidInputError(ValueError):
    """A guess or reply line that does not follow its format."""


def _normalize(text: str, input_name: str) -> str:
    s = text.strip().lower()
    if s in EXIT_WORDS:
        raise ExitRequested(s)
    if len(s) != NUM_LETTERS:
        raise InvalidInputError(f"illegal {input_name}: expected {NUM_LETTERS} characters")
    return s


def parse_guess(text: str) -> str:
    s = _normalize(text, "input")
    if not validate_guess(s):
        raise InvalidInputError("illegal input: expected alphabetical characters")
    return s


def parse_reply(text: str) -> List[Feedback]:
    s = _normalize(text, "reply")
    try:
        return [REPLY_SYMBOLS[c] for c in s]
    except KeyError as e:
        raise InvalidInputError(
            f"illegal reply: expected only '{REPLY_EXACT}', '{REPLY_ABSENT}' or '{REPLY_PRESENT}'"
        ) from e


class Parser:
    """
    Prompt-and-read loop over any iterable of lines (stdin, a list in tests).
    Bad lines are reported on `err` and the prompt repeats.
    """

    def __init__(self, lines: Iterable[str], *, out: TextIO = sys.stdout, err: TextIO = sys.stderr):
        self._lines: Iterator[str] = iter(lines)
        self.out = out
        self.err = err

    def _read(self, prompt: str, parse):
        while True:
            self.out.write(f"{prompt}: ")
            self.out.flush()
            try:
                line = next(self._lines)
            except StopIteration:
                log.debug("input exhausted")
                raise ExitRequested("eof") from None
            try:
                return parse(line)
            except InvalidInputError as e:
                print(e, file=self.err)

    def read_guess(self) -> str:
        return self._read("input guess", parse_guess)

    def read_reply(self) -> List[Feedback]:
        prompt = (f"input reply (miss: '{REPLY_ABSENT}', hit: '{REPLY_EXACT}' "
                  f"partial: '{REPLY_PRESENT}')")
        return self._read(prompt, parse_reply)

    def read_turn(self) -> Turn:
        guess = self.read_guess()
        reply = self.read_reply()
        return Turn.from_pairs(guess, reply)
