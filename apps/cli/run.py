# apps/cli/run.py
"""
CLI entry point for wordfinder.

Single mode (--letters):
  1) Validates the dictionary (prints counts + SHA, flags invalid lines).
  2) Prints every dictionary word formable from the letters, one per line.
  3) With --explain, also lists each rejected word with the letters it lacks.

Batch mode (--queries):
  1) Validates the dictionary.
  2) Runs every pool of letters in the queries file with a live progress indicator.
  3) Writes:
       - CSV:  one row per query (letters, num_matches, time_ms, matches)
       - JSON: manifest with config, dictionary report, git commit, etc.

Exit status: 0 on success, 2 on invalid input or a missing or unreadable file.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List

from tqdm import tqdm

from packages.datasets import load_dictionary, read_lines, validate_dictionary, pretty_summary
from packages.engine import (
    DictionaryIndex,
    InvalidInputError,
    build_frequency_map,
    find_words,
    get_alphabet,
    get_alphabet_names,
    missing_letters,
)
from packages.harness import ENGINES, run_query, write_csv, write_manifest, timestamp_id, \
    git_commit_or_unknown

DEFAULT_DICTIONARY = "packages/datasets/data/words.txt"


def _non_negative_int(text: str) -> int:
    n = int(text)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordfinder: list dictionary words formable from a pool of letters")
    mode = ap.add_mutually_exclusive_group(required=True)
    mode.add_argument("--letters", help="pool of letters for a single query")
    mode.add_argument("--queries", help="file with one pool of letters per line (batch mode)")
    ap.add_argument("--dictionary", default=DEFAULT_DICTIONARY,
                    help="path to dictionary (one word per line)")
    ap.add_argument("--case-insensitive", action="store_true",
                    help="treat 'A' and 'a' as the same letter")
    ap.add_argument("--alphabet", choices=get_alphabet_names(), default="any",
                    help="reject input with characters outside this alphabet")
    ap.add_argument("--engine", choices=list(ENGINES), default="scan",
                    help="scan = per-query frequency maps; index = prebuilt count matrix")
    ap.add_argument("--sample", type=_non_negative_int, help="batch mode: run only the first K queries")
    ap.add_argument("--outdir", default="reports", help="batch mode: directory for output files")
    ap.add_argument("--explain", action="store_true",
                    help="single mode: also print rejected words and their missing letters")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="batch mode progress (auto=bar on a terminal, else plain text)."
    )
    return ap


def _explain(letters: str, dictionary: List[str], matches: List[str], case_sensitive: bool) -> None:
    pool = build_frequency_map(letters, case_sensitive=case_sensitive)
    matched = set(matches)
    for w in dictionary:
        if w in matched:
            continue
        short = missing_letters(pool, build_frequency_map(w, case_sensitive=case_sensitive))
        need = ", ".join(f"{ch}x{n}" for ch, n in sorted(short.items()))
        print(f"  - {w}: missing {need}")


def _run_single(args, dictionary: List[str], alphabet) -> None:
    case_sensitive = not args.case_insensitive
    matches = find_words(args.letters, dictionary, case_sensitive=case_sensitive, alphabet=alphabet)
    for w in matches:
        print(w)
    print(f"{len(matches)} of {len(dictionary)} words formable from {args.letters!r}", file=sys.stderr)
    if args.explain:
        _explain(args.letters, dictionary, matches, case_sensitive)


def _run_queries(args, dictionary: List[str], alphabet, rep: dict) -> None:
    queries = [q.strip() for q in read_lines(args.queries) if q.strip()]
    if args.sample is not None:
        queries = queries[: args.sample]
    total = len(queries)

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    case_sensitive = not args.case_insensitive
    # Built once for the whole batch; None means plain find_words scans.
    index = None
    if args.engine == "index":
        index = DictionaryIndex(dictionary, case_sensitive=case_sensitive, alphabet=alphabet)

    iterator = tqdm(queries, ncols=80, desc="Querying", unit="query") if mode == "bar" else queries

    results = []
    start = time.time()
    last_print = 0.0
    for idx, letters in enumerate(iterator, 1):
        results.append(run_query(
            letters, dictionary, index=index,
            case_sensitive=case_sensitive, alphabet=alphabet,
        ))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain" and total:
        sys.stderr.write("\n"); sys.stderr.flush()

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": rep,
        "num_queries": len(results),
    }, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, validate the dictionary, run the query (or batch) and report.
    """
    args = build_parser().parse_args(argv)
    alphabet = get_alphabet(args.alphabet)

    try:
        rep = validate_dictionary(args.dictionary, alphabet, case_sensitive=not args.case_insensitive)
        print(pretty_summary(rep), file=sys.stderr)

        dictionary = load_dictionary(args.dictionary)
        if args.letters is not None:
            _run_single(args, dictionary, alphabet)
        else:
            _run_queries(args, dictionary, alphabet, rep)
    except (InvalidInputError, OSError, UnicodeDecodeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
