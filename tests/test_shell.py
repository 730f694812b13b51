import io

import pytest
from packages.engine import Feedback
from packages.shell import (
    Engine, ExitRequested, InvalidInputError, Parser, parse_guess, parse_reply,
)

E, P, A = Feedback.EXACT, Feedback.PRESENT, Feedback.ABSENT
WORDS = ["crane", "trace", "slate", "place", "grade"]


def _parser(lines):
    return Parser(lines, out=io.StringIO(), err=io.StringIO())


def test_parse_reply_symbols():
    assert parse_reply("+.-.+") == [E, A, P, A, E]
    assert parse_reply("  ..... \n") == [A] * 5


@pytest.mark.parametrize("text", ["+.-", "+.-.+.", "+.x.+"])
def test_parse_reply_rejects(text):
    with pytest.raises(InvalidInputError):
        parse_reply(text)


def test_parse_guess():
    assert parse_guess("CRANE\n") == "crane"
    for bad in ["cr4ne", "cranes", "c"]:
        with pytest.raises(InvalidInputError):
            parse_guess(bad)


@pytest.mark.parametrize("word", ["exit", "QUIT", " q "])
def test_exit_words(word):
    with pytest.raises(ExitRequested):
        parse_guess(word)
    with pytest.raises(ExitRequested):
        parse_reply(word)


def test_parser_reprompts_on_bad_input():
    p = _parser(["cr4ne", "crane", "+++", "+++++"])
    turn = p.read_turn()
    assert turn.word == "crane" and turn.is_win
    errors = p.err.getvalue()
    assert "illegal input" in errors and "illegal reply" in errors


def test_parser_eof_requests_exit():
    p = _parser(["crane"])
    with pytest.raises(ExitRequested):
        p.read_turn()


def test_engine_prints_best_guesses_and_frequencies():
    out = io.StringIO()
    engine = Engine(WORDS, show_frequency=True, out=out)
    engine.start(_parser(["slate", "..+.+", "q"]))
    text = out.getvalue()
    assert "Starting new game - 5 Potential Solutions" in text
    assert "2/2 Best Guesses: grade, crane" in text
    assert "Frequencies: A: 2 - E: 2 - R: 2 - C: 1 - D: 1 - G: 1 - N: 1" in text


def test_engine_restarts_when_exhausted():
    out = io.StringIO()
    engine = Engine(WORDS, out=out)
    engine.start(_parser(["crane", "+....", "exit"]))
    text = out.getvalue()
    assert "0/5 Words remaining - Restarting" in text
    assert text.count("Starting new game") == 2
    assert engine.rounds_played == 2


def test_engine_new_round_after_win():
    out = io.StringIO()
    engine = Engine(WORDS, out=out)
    engine.start(_parser(["slate", "+++++", "quit"]))
    assert "Solved in 1 guess(es): slate" in out.getvalue()
    assert engine.rounds_played == 2


def test_engine_new_round_after_guess_budget():
    out = io.StringIO()
    engine = Engine(WORDS, out=out)
    engine.start(_parser(["zzzzz", "....."] * 6 + ["q"]))
    text = out.getvalue()
    assert text.count("5/5 Best Guesses") == 6
    assert engine.rounds_played == 2
