"""
Dictionary file validator.

What this module does:
- Check a dictionary file (one word per line) before it is used for queries.
- Count valid words, unique words and invalid lines; compute SHA-256 of the raw file.
- Optionally enforce an alphabet (e.g. lowercase a–z) on every word.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from packages.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("packages/datasets/data/words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import AbstractSet, Dict, List, Optional, Tuple
import hashlib

from packages.engine import normalize
from .io import read_lines


@dataclass
class DictionaryReport:
    """Diagnostics and metadata for one dictionary file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words (duplicates included)
    unique_count: int    # distinct valid words
    invalid_lines: int   # blank lines or words outside the alphabet
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, alphabet: Optional[AbstractSet[str]],
                    case_sensitive: bool) -> Tuple[List[str], int]:
    """
    Load words and count invalid lines.

    A line is invalid if it is empty/whitespace-only, or (with an alphabet)
    contains any character outside it once case is normalized the way the
    finder will normalize it.

    Lines are split by read_lines, the same as load_dictionary, so `count`
    matches the number of words a run actually loads.
    """
    valid: List[str] = []
    invalid = 0

    for raw in read_lines(path):
        w = raw.strip()
        if not w:
            invalid += 1
        elif alphabet is not None and any(ch not in alphabet for ch in normalize(w, case_sensitive)):
            invalid += 1
        else:
            valid.append(w)

    return valid, invalid


def validate_dictionary(
        path: str,
        alphabet: Optional[AbstractSet[str]] = None,
        *,
        case_sensitive: bool = True,
) -> Dict:
    """
    Validate a dictionary file.

    Parameters
    ----------
    path : str
        Dictionary file (one word per line).
    alphabet : set of str, optional
        Permitted characters; None accepts any non-blank word.
    case_sensitive : bool
        False casefolds each word before the alphabet test, matching
        find_words(..., case_sensitive=False).

    Returns
    -------
    Dict
        JSON-serializable DictionaryReport. `passed` is strict: the file must
        exist, be readable as UTF-8, hold at least one word and have no
        invalid lines. Duplicates are listed in `issues` but do not fail the
        check (the finder keeps them).
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"dictionary file not found: {path}")
        rep = DictionaryReport(path, False, 0, 0, 0, "", False, issues)
        return asdict(rep)

    # Unreadable files (a directory, bytes that are not UTF-8) are reported
    # like a missing file rather than raised.
    try:
        words, invalid = _load_and_check(p, alphabet, case_sensitive)
        sha = _sha256_file(p)
    except (OSError, UnicodeDecodeError) as e:
        issues.append(f"dictionary file unreadable: {path} ({e})")
        rep = DictionaryReport(path, True, 0, 0, 0, "", False, issues)
        return asdict(rep)

    unique_count = len(set(words))

    if not words:
        issues.append("dictionary contains 0 valid words")
    if invalid:
        issues.append(f"dictionary has {invalid} invalid line(s)")
    if unique_count != len(words):
        issues.append(f"dictionary contains {len(words) - unique_count} duplicate word(s)")

    rep = DictionaryReport(
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=unique_count,
        invalid_lines=invalid,
        sha256=sha,
        passed=bool(words) and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console.

    Example:
        dictionary=words.txt | words=9 (uniq=9, sha=abc123...) | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    name = Path(report["path"]).name
    return (
        f"dictionary={name} | words={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| invalid={report['invalid_lines']} | {status}"
    )
