"""
Find the dictionary words that can be built from a pool of letters.

Given:
  - an input string (the pool of available letters)
  - an ordered dictionary of candidate words

Return:
  - the words whose letters are covered, with multiplicity, by the pool.

Letters are not consumed across words: every word is checked against the full
pool. The result is a stable filter of the dictionary (original order kept,
duplicates kept at their own positions).
"""

from __future__ import annotations

from typing import AbstractSet, Iterable, List, Optional

from .formable import can_form
from .frequency import build_frequency_map
from .validation import normalize, validate_alphabet


def find_words(
        input_string: str,
        dictionary: Iterable[str],
        *,
        case_sensitive: bool = True,
        alphabet: Optional[AbstractSet[str]] = None,
) -> List[str]:
    """
    Return every word of `dictionary` formable from `input_string`.

    Args:
      input_string   : pool of letters (may be empty)
      dictionary     : ordered candidate words (may be empty)
      case_sensitive : False folds case of the pool AND every word
      alphabet       : optional set of permitted characters; when given, the
                       pool and all words (after case folding) are checked
                       up front and the first violation raises
                       InvalidInputError

    Examples:
      find_words("ate", ["ate", "eat", "tea", "dog"]) -> ["ate", "eat", "tea"]
      find_words("", ["ate", ""])                     -> [""]
    """
    words = list(dictionary)

    # Reject the whole call before doing any counting work.
    if alphabet is not None:
        validate_alphabet(normalize(input_string, case_sensitive), alphabet)
        for w in words:
            validate_alphabet(normalize(w, case_sensitive), alphabet)

    # Built once, outside the loop; each word only pays for its own map.
    pool = build_frequency_map(input_string, case_sensitive=case_sensitive)

    out: List[str] = []
    for w in words:
        if can_form(pool, build_frequency_map(w, case_sensitive=case_sensitive)):
            out.append(w)
    return out
