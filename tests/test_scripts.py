from packages.engine import get_alphabet
from script.normalize_dictionary import normalize_words
from script.fetch_wordlist import extract_words


def test_normalize_words():
    lines = ["Tea", "tea", "", "  eat ", "d0g", "ate"]
    assert normalize_words(lines, strip_blanks=True) == ["Tea", "tea", "eat", "d0g", "ate"]
    assert normalize_words(lines, fold_case=True, strip_blanks=True,
                           alphabet=get_alphabet("lowercase"), sort=True) == ["ate", "eat", "tea"]


def test_extract_words():
    text = "Apple, banana; apple 42 b\ncherry_pie"
    assert extract_words(text) == ["Apple", "banana", "apple", "b", "cherry", "pie"]
    assert extract_words(text, lower=True, min_length=2) == ["apple", "banana", "cherry", "pie"]
