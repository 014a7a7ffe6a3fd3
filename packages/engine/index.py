"""
Dictionary index for answering many pools against one dictionary.

`find_words` rebuilds a frequency map for every dictionary word on every call.
When the same dictionary is queried repeatedly (batch runs, an interactive
session) it is cheaper to count each word once and keep the counts as a
matrix:

  - one column per distinct character seen anywhere in the dictionary
  - one row per dictionary word (duplicates included, order kept)
  - cell = how many times that character occurs in that word

A query then projects the pool's frequency map onto the same columns and
keeps the rows that are elementwise <= the pool vector. Pool characters that
no dictionary word uses are irrelevant and dropped by the projection; word
characters the pool lacks show up as a 0 in the pool vector.

Results are identical to `find_words` for the same inputs.
"""

from __future__ import annotations

from typing import AbstractSet, Dict, Iterable, List, Optional

import numpy as np

from .frequency import build_frequency_map
from .validation import normalize, validate_alphabet


class DictionaryIndex:
    """
    Immutable count matrix over a dictionary.

    Example:
        idx = DictionaryIndex(["map", "pam", "exams"])
        idx.find("example")  # -> ["map", "pam"]
    """

    def __init__(
            self,
            dictionary: Iterable[str],
            *,
            case_sensitive: bool = True,
            alphabet: Optional[AbstractSet[str]] = None,
    ):
        self.words: List[str] = list(dictionary)
        self.case_sensitive = bool(case_sensitive)
        self.alphabet = alphabet

        if alphabet is not None:
            for w in self.words:
                validate_alphabet(normalize(w, self.case_sensitive), alphabet)

        maps = [build_frequency_map(w, case_sensitive=self.case_sensitive) for w in self.words]

        # Stable column order so two indexes over the same words are equal.
        chars = sorted({ch for m in maps for ch in m})
        self.columns: Dict[str, int] = {ch: j for j, ch in enumerate(chars)}

        counts = np.zeros((len(self.words), len(chars)), dtype=np.int64)
        for i, m in enumerate(maps):
            for ch, c in m.items():
                counts[i, self.columns[ch]] = c
        counts.setflags(write=False)
        self.counts = counts

    def __len__(self) -> int:
        return len(self.words)

    def pool_vector(self, input_string: str) -> np.ndarray:
        """
        Project the pool's frequency map onto the index columns.
        """
        pool = build_frequency_map(input_string, case_sensitive=self.case_sensitive)
        vec = np.zeros(len(self.columns), dtype=np.int64)
        for ch, c in pool.items():
            j = self.columns.get(ch)
            if j is not None:
                vec[j] = c
        return vec

    def mask(self, input_string: str) -> np.ndarray:
        """Boolean row mask of formable words."""
        if self.alphabet is not None:
            validate_alphabet(normalize(input_string, self.case_sensitive), self.alphabet)
        vec = self.pool_vector(input_string)
        # A row with no columns (empty word, or empty dictionary alphabet) is
        # vacuously formable; np.all over an empty axis gives True.
        return np.all(self.counts <= vec, axis=1)

    def find(self, input_string: str) -> List[str]:
        """
        Same contract as find_words(input_string, self.words, ...).
        """
        return [self.words[i] for i in np.flatnonzero(self.mask(input_string))]
