"""
Download a plain-text word list and write a clean five-letter dictionary.

What it does:
- Downloads the list (one word per line, or whitespace separated).
- Keeps ASCII-alphabetic tokens of exactly 5 letters, lowercased.
- De-duplicates while preserving source order, and writes to file.

Usage:
    python -m script.fetch_dictionary --out packages/datasets/data/dictionary.txt
    python -m script.fetch_dictionary --url https://example.org/words.txt --sort
"""

import argparse

import requests

from packages.datasets.io import write_lines
from packages.engine.feedback import NUM_LETTERS

URL = "https://raw.githubusercontent.com/tabatkins/wordle-list/main/words"


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def clean_words(text: str) -> list[str]:
    tokens = (t.strip().lower() for t in text.split())
    return unique_preserve_order(
        t for t in tokens if len(t) == NUM_LETTERS and t.isascii() and t.isalpha()
    )


def fetch_words(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return clean_words(r.text)


def main():
    ap = argparse.ArgumentParser(description="Fetch and clean a five-letter dictionary")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="packages/datasets/data/dictionary.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    words = fetch_words(args.url)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} words -> {args.out}")

if __name__ == "__main__":
    main()
