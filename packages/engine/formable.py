"""
Multiset containment between two frequency maps.

`can_form(source, target)` answers: can the word behind `target` be spelled
using only the letters behind `source`, each used at most as often as it
occurs there?

  can_form({"a": 1, "t": 1, "e": 1}, {"a": 1, "t": 1}) -> True
  can_form({"a": 1}, {"a": 2})                          -> False
  can_form({}, {})                                      -> True
"""

from __future__ import annotations

from typing import Dict, Mapping


def can_form(source: Mapping[str, int], target: Mapping[str, int]) -> bool:
    """
    True iff every character of `target` appears in `source` with at least
    the same count. An empty `target` is always formable.
    """
    for ch, need in target.items():
        have = source.get(ch)
        # Stop at the first character that is missing or short.
        if have is None or have < need:
            return False
    return True


def missing_letters(source: Mapping[str, int], target: Mapping[str, int]) -> Dict[str, int]:
    """
    Per-character shortfall of `source` against `target`.

    Returns an empty dict exactly when `can_form(source, target)` is True.
    Example: missing_letters({"e": 1, "x": 1}, {"e": 2, "s": 1}) -> {"e": 1, "s": 1}
    """
    out: Dict[str, int] = {}
    for ch, need in target.items():
        short = need - source.get(ch, 0)
        if short > 0:
            out[ch] = short
    return out
