import pytest
from packages.datasets import load_dictionary
from packages.engine import ALPHABET, Feedback, Turn, WordPicker, score_turn, unique_letters

E, P, A = Feedback.EXACT, Feedback.PRESENT, Feedback.ABSENT


def test_construction_filters_and_lowercases():
    picker = WordPicker(["ab", "ROBOT", "crane!", "toolong", "héllo", "12345", ""])
    assert picker.words == ("robot",)
    assert picker.remaining() == 1


def test_construction_sorts_by_unique_letters_stably():
    picker = WordPicker(["geese", "crane", "sassy", "level"])
    assert picker.words == ("geese", "sassy", "level", "crane")
    assert list(picker.top_10_words()) == ["crane", "level", "sassy", "geese"]


def test_dictionary_is_not_mutated():
    words = ["Crane", "slate", "nope"]
    picker = WordPicker(words)
    picker.take_turn(Turn.from_pairs("crane", [A] * 5))
    assert words == ["Crane", "slate", "nope"]


@pytest.mark.parametrize("word,expected", [
    ("crane", 5), ("geese", 3), ("sassy", 3), ("aaaaa", 1),
])
def test_unique_letters(word, expected):
    assert unique_letters(word) == expected


def test_top_10_caps_and_is_restartable():
    picker = WordPicker(load_dictionary())
    first = list(picker.top_10_words())
    second = list(picker.top_10_words())
    assert len(first) == 10
    assert first == second
    assert all(unique_letters(w) == 5 for w in first)


def test_top_words_on_small_set():
    picker = WordPicker(["crane", "slate"])
    assert list(picker.top_10_words()) == ["slate", "crane"]
    assert list(picker.top_words(1)) == ["slate"]
    assert list(picker.top_words(0)) == []


def test_end_to_end_scenario_empties():
    # c exact; r, a, n, e are full misses and every word holds a and e
    picker = WordPicker(["crane", "trace", "slate", "place", "grade"])
    picker.take_turn(Turn.from_pairs("crane", [E, A, A, A, A]))
    assert picker.remaining() == 0
    assert list(picker.top_10_words()) == []


def test_repeat_disambiguation_keeps_accounted_letter():
    picker = WordPicker(["sassy", "salsa", "spass", "sissy", "basis"])
    # first s exact, last s absent: that s only rules out slot 4
    picker.take_turn(Turn.from_pairs("spass", [E, A, P, E, A]))
    assert set(picker.words) == {"sassy", "salsa"}


def test_global_miss_removes_letter_everywhere():
    picker = WordPicker(["slate", "chase", "above", "haste", "reach"])
    picker.take_turn(Turn.from_pairs("crane", [A, A, P, A, E]))
    assert all("c" not in w for w in picker.words)
    assert set(picker.words) == {"above", "haste"}


def test_present_excludes_guessed_slot():
    picker = WordPicker(["slate", "haste", "about"])
    picker.take_turn(Turn.from_pairs("xxaxx", [A, A, P, A, A]))
    assert set(picker.words) == {"haste", "about"}


def test_exact_is_idempotent():
    turn = Turn.from_pairs("zzane", [A, A, E, A, A])
    once = WordPicker(load_dictionary())
    once.take_turn(turn)
    twice = WordPicker(load_dictionary())
    twice.take_turn(turn)
    twice.take_turn(turn)
    assert once.words == twice.words


def test_monotonic_shrink_and_answer_survives():
    answer = "those"
    picker = WordPicker(load_dictionary())
    sizes = [picker.remaining()]
    for guess in ["crane", "slate", "geese", "toast"]:
        picker.take_turn(score_turn(guess, answer))
        sizes.append(picker.remaining())
        assert answer in picker.words
    assert sizes == sorted(sizes, reverse=True)


def test_letter_frequencies():
    picker = WordPicker(["geese", "crane"])
    freqs = picker.letter_frequencies()
    assert list(freqs) == list(ALPHABET)
    assert freqs["e"] == 2
    assert freqs["g"] == 1 and freqs["c"] == 1 and freqs["s"] == 1
    assert freqs["z"] == 0


def test_letter_frequencies_when_empty():
    picker = WordPicker([])
    assert picker.letter_frequencies() == {ch: 0 for ch in ALPHABET}


def test_pick_best_word_pops_from_end():
    picker = WordPicker(["geese", "crane"])
    assert picker.pick_best_word() == "crane"
    assert picker.pick_best_word() == "geese"
    assert picker.pick_best_word() is None
    assert picker.remaining() == 0
