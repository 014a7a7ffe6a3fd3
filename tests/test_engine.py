import pytest
from packages.engine import (
    build_frequency_map, can_form, missing_letters, find_words,
    InvalidInputError, get_alphabet,
)

DICT_ATE = ["ate", "eat", "tea", "dog", "do", "god", "goo", "go", "good"]


# --- golden scenarios ---
@pytest.mark.parametrize("letters,dictionary,expected", [
    ("ate", DICT_ATE, ["ate", "eat", "tea"]),
    ("", DICT_ATE, []),
    ("", ["ate", "eat", "tea"], []),
    ("ate", [], []),
    ("example", ["map", "pam", "dog", "cat", "lax", "plea", "exams"], ["map", "pam", "lax", "plea"]),
    ("example", ["dog", "cat", "banana"], []),
    ("apple", ["apple"], ["apple"]),
    ("hello", ["oll", "hole", "hell", "llo"], ["oll", "hole", "hell", "llo"]),
])
def test_find_words_golden(letters, dictionary, expected):
    assert find_words(letters, dictionary) == expected


def test_build_frequency_map():
    assert build_frequency_map("hello") == {"h": 1, "e": 1, "l": 2, "o": 1}
    assert build_frequency_map("apple") == {"a": 1, "p": 2, "l": 1, "e": 1}
    assert build_frequency_map("a") == {"a": 1}
    assert dict(build_frequency_map("")) == {}


def test_build_frequency_map_is_repeatable_and_has_no_zero_counts():
    m1 = build_frequency_map("mississippi")
    m2 = build_frequency_map("mississippi")
    assert m1 == m2 and m1 is not m2
    assert all(c >= 1 for c in m1.values())


def test_build_frequency_map_case():
    assert build_frequency_map("Aa") == {"A": 1, "a": 1}
    assert build_frequency_map("Aa", case_sensitive=False) == {"a": 2}


@pytest.mark.parametrize("source,target,expected", [
    ("", "", True),
    ("", "apple", False),
    ("apple", "", True),
    ("example", "map", True),
    ("example", "maps", False),
    ("ate", "tea", True),
    ("hello", "hell", True),
    ("helo", "hell", False),
])
def test_can_form(source, target, expected):
    assert can_form(build_frequency_map(source), build_frequency_map(target)) is expected


def test_can_form_monotonic_in_source():
    # 'plea' formable from 'example' stays formable from a dominating pool
    target = build_frequency_map("plea")
    assert can_form(build_frequency_map("example"), target)
    assert can_form(build_frequency_map("examplezzpp"), target)


def test_missing_letters():
    src = build_frequency_map("example")
    assert missing_letters(src, build_frequency_map("exams")) == {"s": 1}
    assert missing_letters(src, build_frequency_map("eeep")) == {"e": 1}
    assert missing_letters(src, build_frequency_map("map")) == {}


def test_find_words_keeps_order_and_duplicates():
    dictionary = ["tea", "dog", "ate", "tea", "eat"]
    assert find_words("ate", dictionary) == ["tea", "ate", "tea", "eat"]


def test_find_words_empty_pool_matches_only_empty_words():
    assert find_words("", ["", "a", ""]) == ["", ""]


def test_find_words_is_deterministic_and_pure():
    dictionary = list(DICT_ATE)
    first = find_words("goodate", dictionary)
    assert find_words("goodate", dictionary) == first
    assert dictionary == DICT_ATE


def test_find_words_accepts_any_iterable():
    assert find_words("ate", (w for w in DICT_ATE)) == ["ate", "eat", "tea"]


def test_find_words_case_insensitive_returns_original_words():
    dictionary = ["Tea", "EAT", "dog"]
    assert find_words("ATE", dictionary) == []
    assert find_words("ATE", dictionary, case_sensitive=False) == ["Tea", "EAT"]


def test_find_words_alphabet_rejects_before_work():
    lower = get_alphabet("lowercase")
    assert find_words("ate", ["tea"], alphabet=lower) == ["tea"]
    with pytest.raises(InvalidInputError):
        find_words("at3", ["tea"], alphabet=lower)
    with pytest.raises(InvalidInputError, match="do-g"):
        find_words("ate", ["tea", "do-g"], alphabet=lower)
    # folded before the check
    assert find_words("ATE", ["Tea"], case_sensitive=False, alphabet=lower) == ["Tea"]


def test_find_words_without_alphabet_treats_symbols_as_letters():
    assert find_words("a-b", ["b-a", "a--b", "ab"]) == ["b-a", "ab"]


def test_get_alphabet_unknown():
    assert get_alphabet("any") is None
    with pytest.raises(ValueError, match="Unknown alphabet"):
        get_alphabet("klingon")
