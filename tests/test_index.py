import pytest
from packages.engine import DictionaryIndex, find_words, InvalidInputError, get_alphabet

DICTIONARY = ["ate", "eat", "tea", "dog", "do", "god", "goo", "go", "good",
              "map", "pam", "cat", "lax", "plea", "exams", "apple", "hell", "", "tea"]


@pytest.mark.parametrize("letters", ["ate", "", "example", "apple", "hello", "goodo", "zzz"])
def test_index_matches_find_words(letters):
    idx = DictionaryIndex(DICTIONARY)
    assert idx.find(letters) == find_words(letters, DICTIONARY)


def test_index_example():
    idx = DictionaryIndex(["map", "pam", "dog", "cat", "lax", "plea", "exams"])
    assert idx.find("example") == ["map", "pam", "lax", "plea"]
    assert len(idx) == 7


def test_index_empty_dictionary():
    idx = DictionaryIndex([])
    assert idx.find("ate") == []
    assert idx.find("") == []


def test_index_only_empty_words():
    idx = DictionaryIndex(["", ""])
    assert idx.find("") == ["", ""]
    assert idx.find("abc") == ["", ""]


def test_index_counts_are_read_only():
    idx = DictionaryIndex(["ab"])
    with pytest.raises(ValueError):
        idx.counts[0, 0] = 5


def test_index_case_and_alphabet():
    idx = DictionaryIndex(["Tea", "EAT"], case_sensitive=False)
    assert idx.find("ate") == ["Tea", "EAT"]

    lower = get_alphabet("lowercase")
    with pytest.raises(InvalidInputError):
        DictionaryIndex(["tea", "t3a"], alphabet=lower)
    idx = DictionaryIndex(["tea"], alphabet=lower)
    with pytest.raises(InvalidInputError):
        idx.find("ate!")
