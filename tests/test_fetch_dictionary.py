from script.fetch_dictionary import clean_words, unique_preserve_order


def test_clean_words_keeps_five_letter_ascii_words():
    text = "Crane\nslate trace\nab\ncranes\nhéllo\ncrane\n12345\n"
    assert clean_words(text) == ["crane", "slate", "trace"]


def test_unique_preserve_order():
    assert unique_preserve_order(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
