"""
Self-play harness.

- run_case:  play one round against a hidden answer, always guessing the
             picker's current best word.
- run_batch: run many rounds in sequence (optionally a sample prefix).
- The turn budget is the same MAX_GUESSES the interactive shell uses.

Useful for sanity-checking a dictionary and the ranking heuristic without a
human typing replies.
"""

from __future__ import annotations
import time
from typing import Dict, Iterable, List, Tuple

from packages.engine import MAX_GUESSES, Turn, WordPicker, score_turn
from packages.shell.parser import REPLY_SYMBOLS

_SYMBOL_FOR = {fb: sym for sym, fb in REPLY_SYMBOLS.items()}


def run_case(answer: str, *, dictionary: Iterable[str], max_turns: int = MAX_GUESSES) -> Dict:
    """
    Play until the answer is guessed, the picker runs dry, or turns run out.

    Returns:
        dict with keys:
            answer (str), success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]) where pattern uses the shell's
            reply symbols ('+', '-', '.')
    """
    answer = answer.strip().lower()
    picker = WordPicker(dictionary)
    history: List[Tuple[str, str]] = []
    success = False

    t0 = time.perf_counter()
    for _ in range(max_turns):
        guess = picker.pick_best_word()
        if guess is None:
            break

        turn = score_turn(guess, answer)
        history.append((guess, _pattern(turn)))
        if turn.is_win:
            success = True
            break

        picker.take_turn(turn)

    return {
        "answer": answer,
        "success": success,
        "guesses": len(history),
        "time_ms": (time.perf_counter() - t0) * 1000.0,
        "history": history,
    }


def run_batch(
        answers: Iterable[str],
        *,
        dictionary: Iterable[str],
        max_turns: int = MAX_GUESSES,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run one case per answer. If `sample` is given only the first K answers are used.
    """
    dictionary = list(dictionary)
    pool = [w for w in answers]
    if sample is not None:
        pool = pool[:sample]
    return [run_case(ans, dictionary=dictionary, max_turns=max_turns) for ans in pool]


def _pattern(turn: Turn) -> str:
    return "".join(_SYMBOL_FOR[f] for f in turn.feedbacks)
