from .parser import (
    Parser, parse_guess, parse_reply, ExitRequested, InvalidInputError,
    REPLY_EXACT, REPLY_ABSENT, REPLY_PRESENT,
)
from .engine import Engine, format_best_guesses, format_letter_frequencies

__all__ = [
    "Parser", "parse_guess", "parse_reply", "ExitRequested", "InvalidInputError",
    "REPLY_EXACT", "REPLY_ABSENT", "REPLY_PRESENT",
    "Engine", "format_best_guesses", "format_letter_frequencies",
]
