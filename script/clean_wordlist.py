"""
Normalize a word list file in place (or to --out).

Features:
- Lowercases and strips every line; drops blank lines.
- Optionally drops anything that isn't plain a–z (--alpha-only).
- Optionally drops words shorter than --min-length.
- De-duplicates preserving the original order; --sort to alphabetize.

Usage:
    python -m script.clean_wordlist --in packages/datasets/data/start.txt \
        --alpha-only --min-length 4
"""

import argparse
from pathlib import Path

from packages.datasets.io import load_words, unique_preserve_order, write_lines


def clean(words: list[str], *, alpha_only: bool = False, min_length: int = 0,
          sort: bool = False) -> list[str]:
    if alpha_only:
        words = [w for w in words if w.isascii() and w.isalpha()]
    if min_length:
        words = [w for w in words if len(w) >= min_length]
    out = unique_preserve_order(words)
    return sorted(out) if sort else out


def main():
    ap = argparse.ArgumentParser(description="Normalize and de-duplicate a word list.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--alpha-only", action="store_true", help="keep only a–z words")
    ap.add_argument("--min-length", type=int, default=0, help="drop words shorter than this")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    words = load_words(inp)
    out = clean(words, alpha_only=args.alpha_only, min_length=args.min_length, sort=args.sort)

    write_lines(out, outp)
    print(f"Input: {inp} ({len(words)} words) -> Output: {outp} ({len(out)} kept)")

if __name__ == "__main__":
    main()
