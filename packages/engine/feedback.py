"""
Feedback vocabulary consumed by the word picker.

A guess is answered one letter at a time:
  - EXACT   : letter sits in the right slot (green)
  - PRESENT : letter is in the solution, but not in this slot (yellow)
  - ABSENT  : no unaccounted occurrence of the letter is left in the solution (gray).
              When the same letter shows up elsewhere in the guess as EXACT/PRESENT,
              this only says "not here".

A Turn zips the guessed word with its replies, slot by slot. All values here are
immutable; nothing in this module has behavior beyond construction checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Tuple

# Word length for guesses and dictionary entries (slots per guess).
NUM_LETTERS = 5
# Guess budget for one round; the shell resets the picker after this many turns.
MAX_GUESSES = 6


class Feedback(Enum):
    EXACT = "exact"
    PRESENT = "present"
    ABSENT = "absent"


@dataclass(frozen=True)
class Cell:
    """A single letter of a guess together with the reply it received."""
    letter: str
    feedback: Feedback

    def __post_init__(self) -> None:
        letter = self.letter.lower() if isinstance(self.letter, str) else self.letter
        if not isinstance(letter, str) or len(letter) != 1 or not ("a" <= letter <= "z"):
            raise ValueError(f"cell letter must be a single ASCII letter; got {self.letter!r}")
        if not isinstance(self.feedback, Feedback):
            raise ValueError(f"cell feedback must be a Feedback; got {self.feedback!r}")
        # frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "letter", letter)


@dataclass(frozen=True)
class Turn:
    """One submitted guess and its full feedback, cells in slot order."""
    cells: Tuple[Cell, ...]

    def __post_init__(self) -> None:
        cells = tuple(self.cells)
        if len(cells) != NUM_LETTERS:
            raise ValueError(f"a turn needs exactly {NUM_LETTERS} cells; got {len(cells)}")
        if not all(isinstance(c, Cell) for c in cells):
            raise ValueError("a turn is made of Cell values only")
        object.__setattr__(self, "cells", cells)

    @classmethod
    def from_pairs(cls, letters: Iterable[str], feedbacks: Iterable[Feedback]) -> "Turn":
        """
        Zip a guessed word with its replies.

        Example:
          Turn.from_pairs("crane", [Feedback.EXACT] + [Feedback.ABSENT] * 4)
        """
        letters = list(letters)
        feedbacks = list(feedbacks)
        if len(letters) != len(feedbacks):
            raise ValueError(
                f"letters and feedbacks differ in length ({len(letters)} vs {len(feedbacks)})")
        return cls(tuple(Cell(l, f) for l, f in zip(letters, feedbacks)))

    @property
    def word(self) -> str:
        return "".join(c.letter for c in self.cells)

    @property
    def feedbacks(self) -> Tuple[Feedback, ...]:
        return tuple(c.feedback for c in self.cells)

    @property
    def is_win(self) -> bool:
        return all(c.feedback is Feedback.EXACT for c in self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)
