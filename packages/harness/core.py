"""
Batch harness primitives.

- run_query: find the formable words for one pool of letters, with timing.
- run_batch: run many pools against one dictionary (optionally a sample prefix).

Two engines produce identical matches:
  - "scan"  : find_words per query (no setup cost)
  - "index" : one DictionaryIndex built up front, then a matrix compare per query

These functions are UI-agnostic so a CLI, a notebook or a service can reuse them.
"""

from __future__ import annotations
import time
from typing import AbstractSet, Dict, List, Optional, Sequence
from packages.engine import DictionaryIndex, find_words

ENGINES = ("scan", "index")


def run_query(
        letters: str,
        dictionary: Sequence[str],
        *,
        index: Optional[DictionaryIndex] = None,
        case_sensitive: bool = True,
        alphabet: Optional[AbstractSet[str]] = None,
) -> Dict:
    """
    Find the words of `dictionary` formable from `letters`.

    When `index` is given it must have been built over `dictionary` (its own
    case and alphabet settings apply); otherwise find_words scans the list.

    Returns:
        dict with keys: letters (str), matches (list[str]),
        num_matches (int), time_ms (float)
    """
    t0 = time.perf_counter_ns()
    if index is not None:
        matches = index.find(letters)
    else:
        matches = find_words(letters, dictionary, case_sensitive=case_sensitive, alphabet=alphabet)
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0

    return {
        "letters": letters,
        "matches": matches,
        "num_matches": len(matches),
        "time_ms": dt,
    }


def run_batch(
        queries: Sequence[str],
        dictionary: Sequence[str],
        *,
        engine: str = "scan",
        case_sensitive: bool = True,
        alphabet: Optional[AbstractSet[str]] = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run every query in order. If `sample` is provided, only the first K
    queries are used to speed up quick experiments.
    """
    if engine not in ENGINES:
        raise ValueError(f"Unknown engine: {engine}. Available: {list(ENGINES)}")

    pool = list(queries)
    if sample is not None:
        pool = pool[:sample]

    index = None
    if engine == "index":
        index = DictionaryIndex(dictionary, case_sensitive=case_sensitive, alphabet=alphabet)

    out: List[Dict] = []
    for letters in pool:
        out.append(run_query(
            letters, dictionary, index=index,
            case_sensitive=case_sensitive, alphabet=alphabet,
        ))
    return out
