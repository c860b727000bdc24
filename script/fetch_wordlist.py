"""
Download an English word list for the dictionary checker and write a clean copy.

What it does:
- Downloads a plain-text word list (one word per line).
- Keeps lowercase a–z tokens of at least --min-length letters.
- De-duplicates while preserving source order, and writes to file.

Usage:
    python -m script.fetch_wordlist --out packages/datasets/data/words_en.txt
    # or alphabetically sorted:
    python -m script.fetch_wordlist --sort --out packages/datasets/data/words_en.txt
"""

import re
import argparse

import requests

from packages.datasets.io import unique_preserve_order, write_lines

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"
WORD_RE = re.compile(r"^[a-z]+$")


def clean_words(lines, min_length: int = 3) -> list[str]:
    words = [ln.strip().lower() for ln in lines]
    words = [w for w in words if len(w) >= min_length and WORD_RE.match(w)]
    return unique_preserve_order(words)


def fetch_words(url: str = URL, min_length: int = 3) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return clean_words(r.text.splitlines(), min_length=min_length)


def main():
    ap = argparse.ArgumentParser(description="Download an English word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="packages/datasets/data/words_en.txt")
    ap.add_argument("--min-length", type=int, default=3, help="drop words shorter than this")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    words = fetch_words(args.url, min_length=args.min_length)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} words -> {args.out}")

if __name__ == "__main__":
    main()
