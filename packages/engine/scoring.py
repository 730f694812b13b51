"""
Reply generation for a (guess, answer) pair, as the puzzle itself would give it.

The interactive solver never needs this (the player types the reply), but
self-play and tests do.

Duplicate letters: a letter is marked EXACT/PRESENT at most as many times as
it occurs in the answer. Two passes:
  1) mark EXACT slots and count the answer's letters left unmatched;
  2) mark PRESENT left to right while unmatched copies remain, else ABSENT.
"""

from collections import Counter
from typing import List

from .feedback import Feedback, Turn


def score(guess: str, answer: str) -> List[Feedback]:
    """
    Examples:
      score("geese", "those") -> [ABSENT, ABSENT, ABSENT, EXACT, EXACT]
      score("crane", "crane") -> [EXACT] * 5
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    if len(guess) != len(answer):
        raise ValueError(f"guess and answer differ in length: {guess!r} vs {answer!r}")

    replies = [Feedback.ABSENT] * len(guess)

    unmatched = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            replies[i] = Feedback.EXACT
        else:
            unmatched[a] += 1

    for i, g in enumerate(guess):
        if replies[i] is Feedback.EXACT:
            continue
        if unmatched[g] > 0:
            replies[i] = Feedback.PRESENT
            unmatched[g] -= 1

    return replies


def score_turn(guess: str, answer: str) -> Turn:
    """Score and zip into a Turn ready for WordPicker.take_turn."""
    return Turn.from_pairs(guess.strip().lower(), score(guess, answer))
