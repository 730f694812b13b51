"""
Lightweight guess validation.

A guess is acceptable iff it is a string of exactly NUM_LETTERS ASCII letters
(after trimming, any case). Dictionary membership is not checked:
the player may try words the loaded dictionary does not know.
"""

from .feedback import NUM_LETTERS


def validate_guess(word, N: int = NUM_LETTERS) -> bool:
    if not isinstance(word, str):
        return False

    w = word.strip()
    return len(w) == N and w.isascii() and w.isalpha()
