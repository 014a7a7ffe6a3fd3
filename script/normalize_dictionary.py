"""
Clean up a dictionary file before using it with wordfinder.

Features:
- Stable de-duplication (first occurrence wins, order kept).
- Optional case folding (treat 'Tea' == 'tea'; the folded form is written).
- Optional stripping of blank/whitespace-only lines.
- Optional alphabet filter (drop words with characters outside it).
- Optional sorting AFTER dedupe; otherwise keep input order.
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.normalize_dictionary --in packages/datasets/data/words.txt \
        --fold-case --strip-blanks --alphabet lowercase
"""

import argparse
from pathlib import Path

from packages.datasets import read_lines, write_lines
from packages.engine import get_alphabet, get_alphabet_names


def unique_preserve_order(lines: list[str]) -> list[str]:
    seen, out = set(), []
    for s in lines:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def normalize_words(lines: list[str], *, fold_case=False, strip_blanks=False,
                    alphabet=None, sort=False) -> list[str]:
    words = [s.strip() for s in lines]
    if strip_blanks:
        words = [w for w in words if w]
    if fold_case:
        words = [w.casefold() for w in words]
    if alphabet is not None:
        words = [w for w in words if all(ch in alphabet for ch in w)]
    out = unique_preserve_order(words)
    if sort:
        out = sorted(out)
    return out


def main():
    ap = argparse.ArgumentParser(description="Normalize a one-word-per-line dictionary file.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--fold-case", action="store_true", help="casefold every word")
    ap.add_argument("--strip-blanks", action="store_true", help="drop empty/whitespace-only lines")
    ap.add_argument("--alphabet", choices=get_alphabet_names(), default="any",
                    help="drop words with characters outside this alphabet")
    ap.add_argument("--sort", action="store_true", help="sort after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_lines(inp)
    out = normalize_words(
        lines,
        fold_case=args.fold_case,
        strip_blanks=args.strip_blanks,
        alphabet=get_alphabet(args.alphabet),
        sort=args.sort,
    )

    write_lines(out, outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} words)")


if __name__ == "__main__":
    main()
