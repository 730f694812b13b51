"""
Interactive round loop.

Each round gets a fresh WordPicker built from the (immutable) dictionary.
A round ends when:
  - the player reports a win (all '+'),
  - the candidate set runs empty (bad dictionary or a mistyped reply), or
  - MAX_GUESSES turns have been played.
The session ends when the parser raises ExitRequested.
"""

from __future__ import annotations

import logging
import sys
from typing import List, Sequence, TextIO

from packages.engine.feedback import MAX_GUESSES
from packages.engine.picker import BEST_WORDS_LEN, WordPicker
from .parser import ExitRequested, Parser

log = logging.getLogger(__name__)

BEST_GUESS_SEPARATOR = ", "


def format_best_guesses(picker: WordPicker, dictionary_size: int) -> str:
    remaining = picker.remaining()
    if remaining == 0:
        return f"0/{dictionary_size} Words remaining - Restarting"
    best = BEST_GUESS_SEPARATOR.join(picker.top_10_words())
    return f"{min(BEST_WORDS_LEN, remaining)}/{remaining} Best Guesses: {best}"


def format_letter_frequencies(picker: WordPicker) -> str:
    """Non-zero letters, most common first, e.g. 'Frequencies: E: 12 - A: 9'."""
    freqs = [(ch, n) for ch, n in picker.letter_frequencies().items() if n > 0]
    freqs.sort(key=lambda item: item[1], reverse=True)
    return "Frequencies: " + " - ".join(f"{ch.upper()}: {n}" for ch, n in freqs)


class Engine:
    def __init__(self, word_list: Sequence[str], *, show_frequency: bool = False,
                 out: TextIO = sys.stdout):
        self.word_list: List[str] = list(word_list)
        self.show_frequency = show_frequency
        self.out = out
        self.rounds_played = 0

    def _print(self, msg: str) -> None:
        print(msg, file=self.out)

    def play_round(self, parser: Parser) -> None:
        """One round; ExitRequested propagates to the caller."""
        picker = WordPicker(self.word_list)
        log.debug("created fresh word picker from dictionary")
        self.rounds_played += 1
        self._print(f"\nStarting new game - {len(self.word_list)} Potential Solutions")

        for turn_index in range(MAX_GUESSES):
            log.debug("starting turn %d", turn_index)
            turn = parser.read_turn()
            if turn.is_win:
                self._print(f"Solved in {turn_index + 1} guess(es): {turn.word}")
                return

            picker.take_turn(turn)
            self._print(format_best_guesses(picker, len(self.word_list)))

            if picker.remaining() == 0:
                log.info("no words left after %r; restarting round", turn.word)
                return

            if self.show_frequency:
                self._print(format_letter_frequencies(picker))

        log.info("guess budget of %d exhausted; restarting round", MAX_GUESSES)

    def start(self, parser: Parser) -> None:
        """Play rounds until the player exits or input runs out."""
        log.debug("starting engine")
        try:
            while True:
                self.play_round(parser)
        except ExitRequested as e:
            log.debug("exit requested (%s) after %d round(s)", e, self.rounds_played)
