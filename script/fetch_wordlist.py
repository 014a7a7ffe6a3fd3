"""
Download a word list and write a clean one-word-per-line dictionary.

What it does:
- Downloads the URL (plain text or an HTML page).
- HTML is reduced to its visible text with BeautifulSoup; plain text is used as-is.
- Extracts alphabetic tokens, optionally lowercases them and drops short ones.
- De-duplicates while preserving source order, and writes to file.

Usage:
    python -m script.fetch_wordlist --url https://example.org/words.txt \
        --lower --min-length 2 --out packages/datasets/data/words.txt
"""

import re
import argparse

import requests
from bs4 import BeautifulSoup

from packages.datasets import write_lines
from script.normalize_dictionary import unique_preserve_order

TOKEN_RE = re.compile(r"[^\W\d_]+")


def extract_words(text: str, *, lower: bool = False, min_length: int = 1) -> list[str]:
    words = TOKEN_RE.findall(text)
    if lower:
        words = [w.lower() for w in words]
    return unique_preserve_order([w for w in words if len(w) >= min_length])


def fetch_text(url: str) -> str:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    if "html" in r.headers.get("Content-Type", ""):
        soup = BeautifulSoup(r.text, "html.parser")
        return soup.get_text("\n", strip=True)
    return r.text


def main():
    ap = argparse.ArgumentParser(description="Fetch a word list into a dictionary file")
    ap.add_argument("--url", required=True)
    ap.add_argument("--out", default="packages/datasets/data/words.txt")
    ap.add_argument("--lower", action="store_true", help="lowercase every word")
    ap.add_argument("--min-length", type=int, default=1, help="drop words shorter than this")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    words = extract_words(fetch_text(args.url), lower=args.lower, min_length=args.min_length)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")


if __name__ == "__main__":
    main()
