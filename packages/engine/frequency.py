"""
Character frequency maps.

A frequency map is a mapping from a single character (one code point, treated
as an opaque key) to the number of times it occurs in a string. Characters
that do not occur are simply absent; a count of 0 is never stored.

Examples:
  build_frequency_map("hello") -> {"h": 1, "e": 1, "l": 2, "o": 1}
  build_frequency_map("")      -> {}
"""

from __future__ import annotations

from collections import Counter
from typing import Dict

from .validation import normalize

# Type alias for clarity; a Counter satisfies it.
FrequencyMap = Dict[str, int]


def build_frequency_map(s: str, *, case_sensitive: bool = True) -> FrequencyMap:
    """
    Count each character of `s` in a single pass.

    Args:
      s              : any string (empty is fine)
      case_sensitive : when False, `s` is casefolded before counting so that
                       "A" and "a" share a key

    Returns:
      A fresh Counter; the caller owns it.
    """
    counts: Counter[str] = Counter()
    for ch in normalize(s, case_sensitive):
        counts[ch] += 1
    return counts
