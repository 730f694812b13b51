"""
Candidate picker: the shrinking set of dictionary words still consistent with
every turn seen in the current round.

Ranking heuristic:
  Words are stored in ascending order of DISTINCT letters, so the end of the
  list holds the words that probe the most of the alphabet. Suggestions are
  read from the end backwards.

Pruning rules per cell (letter L at slot P):
  - EXACT   : keep words with L at P.
  - PRESENT : keep words containing L, but not at P.
  - ABSENT  : if another cell of the same turn reports L as EXACT/PRESENT the
              letter is already accounted for, so only drop words with L at P.
              Otherwise L is a full miss: drop every word containing L.

One picker lives for one round; the shell builds a fresh one from the
(untouched) dictionary when the round ends.
"""

from __future__ import annotations

import logging
import string
from itertools import islice
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .feedback import NUM_LETTERS, Feedback, Turn

log = logging.getLogger(__name__)

ALPHABET = string.ascii_lowercase
ALPHA_LEN = len(ALPHABET)
# How many suggestions the shell shows after each turn.
BEST_WORDS_LEN = 10


def _is_dictionary_word(w) -> bool:
    # str.isalpha() accepts non-ASCII letters; the picker only deals in a-z
    return isinstance(w, str) and len(w) == NUM_LETTERS and w.isascii() and w.isalpha()


def unique_letters(word: str) -> int:
    """Number of distinct letters in a lowercase word (1..5 for dictionary words)."""
    return len(set(word))


class WordPicker:
    """Owns the candidate set for one round."""

    def __init__(self, dictionary: Iterable[str]):
        words = [w.lower() for w in dictionary if _is_dictionary_word(w)]
        # list.sort is stable: ties keep dictionary order
        words.sort(key=unique_letters)
        self._words: List[str] = words
        log.debug("picker initialized with %d words", len(self._words))

    # ---- queries ----

    @property
    def words(self) -> Tuple[str, ...]:
        """Remaining words in storage (ascending rank) order."""
        return tuple(self._words)

    def remaining(self) -> int:
        return len(self._words)

    def top_words(self, n: int) -> Iterator[str]:
        """Up to `n` best words, best first. Each call returns a fresh iterator."""
        return islice(reversed(self._words), max(n, 0))

    def top_10_words(self) -> Iterator[str]:
        return self.top_words(BEST_WORDS_LEN)

    def letter_frequencies(self) -> Dict[str, int]:
        """
        For every letter a..z, how many remaining words contain it at least once.
        Display only; pruning never looks at this.
        """
        if not self._words:
            return {ch: 0 for ch in ALPHABET}

        codes = np.frombuffer("".join(self._words).encode("ascii"), dtype=np.uint8)
        codes = codes.reshape(-1, NUM_LETTERS) - ord("a")

        presence = np.zeros((len(self._words), ALPHA_LEN), dtype=bool)
        presence[np.arange(len(self._words))[:, None], codes] = True
        counts = presence.sum(axis=0)
        return {ch: int(c) for ch, c in zip(ALPHABET, counts)}

    # ---- pruning ----

    def take_turn(self, turn: Turn) -> None:
        """Apply all cells of one turn, in slot order."""
        log.debug("taking turn %s %s", turn.word, [f.value for f in turn.feedbacks])
        cells = turn.cells
        for index, cell in enumerate(cells):
            letter = cell.letter
            if cell.feedback is Feedback.EXACT:
                self.remove_words_without_letter_in_position(letter, index)
            elif cell.feedback is Feedback.PRESENT:
                self.remove_words_not_containing(letter)
                self.remove_words_with_letter_in_position(letter, index)
            else:
                accounted = any(
                    other.letter == letter and other.feedback is not Feedback.ABSENT
                    for other in cells
                )
                if accounted:
                    self.remove_words_with_letter_in_position(letter, index)
                else:
                    self.remove_words_containing(letter)

    def _retain(self, keep, what: str) -> None:
        before = len(self._words)
        self._words = [w for w in self._words if keep(w)]
        log.debug("%s: %d -> %d words", what, before, len(self._words))

    def remove_words_containing(self, illegal_letter: str) -> None:
        self._retain(lambda w: illegal_letter not in w,
                     f"removing words containing {illegal_letter}")

    def remove_words_not_containing(self, required_letter: str) -> None:
        self._retain(lambda w: required_letter in w,
                     f"removing words without {required_letter}")

    def remove_words_without_letter_in_position(self, required_letter: str, position: int) -> None:
        self._retain(lambda w: w[position] == required_letter,
                     f"removing words without {required_letter} at {position}")

    def remove_words_with_letter_in_position(self, illegal_letter: str, position: int) -> None:
        self._retain(lambda w: w[position] != illegal_letter,
                     f"removing words with {illegal_letter} at {position}")

    def pick_best_word(self) -> Optional[str]:
        """Pop the current best word (None when exhausted)."""
        return self._words.pop() if self._words else None
