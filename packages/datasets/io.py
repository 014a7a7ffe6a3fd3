from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file (one per line, trailing newline).
    Creates parent directories. Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_dictionary(p: Path | str, *, lowercase: bool = False) -> List[str]:
    """
    Load a one-word-per-line dictionary (`lowercase` casefolds each word).

    Surrounding whitespace is stripped and blank lines dropped; order and
    duplicates are kept, since the finder treats the list as ordered input.
    """
    words = [ln.strip() for ln in read_lines(p)]
    if lowercase:
        words = [w.casefold() for w in words]
    return [w for w in words if w]
