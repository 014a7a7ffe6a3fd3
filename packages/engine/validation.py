"""
Optional input hardening for word finding.

The core functions accept any string. Callers that want to restrict input to
a known alphabet (e.g. lowercase a–z) check it here, before any counting, and
get an InvalidInputError on the first violation.

Named alphabets:
  - "any"       : no restriction
  - "lowercase" : a–z
  - "letters"   : a–z and A–Z
"""

import string
from typing import AbstractSet, Dict, FrozenSet, List, Optional


class InvalidInputError(ValueError):
    """A pool or dictionary word contains characters outside the alphabet."""


ALPHABETS: Dict[str, Optional[FrozenSet[str]]] = {
    "any": None,
    "lowercase": frozenset(string.ascii_lowercase),
    "letters": frozenset(string.ascii_letters),
}


def get_alphabet(name: str) -> Optional[FrozenSet[str]]:
    """
    Look up a named alphabet. None means "no restriction".
    """
    try:
        return ALPHABETS[name]
    except KeyError as e:
        raise ValueError(
            f"Unknown alphabet: {name}. Available: {sorted(ALPHABETS.keys())}") from e


def get_alphabet_names() -> List[str]:
    return sorted(ALPHABETS.keys())


def normalize(text: str, case_sensitive: bool) -> str:
    # casefold() is the Unicode-aware lower(); applied uniformly by callers
    return text if case_sensitive else text.casefold()


def validate_alphabet(text: str, alphabet: Optional[AbstractSet[str]]) -> str:
    """
    Return `text` unchanged if every character is in `alphabet`.

    Raises:
      InvalidInputError naming the text and the offending characters.
    """
    if alphabet is None:
        return text

    bad = sorted({ch for ch in text if ch not in alphabet})
    if bad:
        raise InvalidInputError(f"{text!r} contains characters outside the alphabet: {bad}")
    return text
