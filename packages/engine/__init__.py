from .feedback import Feedback, Cell, Turn, NUM_LETTERS, MAX_GUESSES
from .picker import WordPicker, unique_letters, ALPHABET, BEST_WORDS_LEN
from .scoring import score, score_turn
from .validation import validate_guess

__all__ = [
    "Feedback", "Cell", "Turn", "NUM_LETTERS", "MAX_GUESSES",
    "WordPicker", "unique_letters", "ALPHABET", "BEST_WORDS_LEN",
    "score", "score_turn", "validate_guess",
]
