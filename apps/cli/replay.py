# apps/cli/replay.py
"""
CLI entry point for replaying a scripted round.

This script:
  1) Validates the root word list (prints counts + SHA).
  2) Picks a root word (--root, or a seeded pick from the list).
  3) Feeds every line of --words to the round and writes:
       - CSV:  one row per submission (outcome, reason, delta, running score)
       - JSON: manifest with config, word-list report, git commit, etc.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from packages.datasets import START_WORDS_PATH, WordListProvider, read_lines, load_words, \
    validate_root_words, pretty_summary
from packages.dictionary import create_dictionary, get_dictionary_ids
from packages.engine import DEFAULT_LANGUAGE, ValidationEngine
from packages.harness import play_round
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from packages.session import SessionController, RootWordError


def main():
    """
    Parse CLI args, validate the start list, replay the round, and write outputs.
    """
    ap = argparse.ArgumentParser(description="wordscramble — replay a scripted round")
    ap.add_argument("--words", required=True, help="submissions, one per line (blank lines kept)")
    ap.add_argument("--root", help="root word to play against (default: seeded pick from --start-words)")
    ap.add_argument("--start-words", default=str(START_WORDS_PATH),
                    help="path to root word list (one per line)")
    ap.add_argument("--dictionary", default="packages/datasets/data/words_en.txt",
                    help="path to dictionary word list")
    ap.add_argument("--dictionary-id", default="wordlist",
                    help=f"dictionary checker id (one of: {', '.join(get_dictionary_ids())})")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE, help="language tag for the dictionary")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    args = ap.parse_args()

    # 1) Validate start list and print a one-liner summary
    rep = validate_root_words(args.start_words)
    print(pretty_summary(rep))

    # 2) Load collaborators
    try:
        dictionary = create_dictionary(args.dictionary_id)
        dictionary.add_words(args.language, load_words(args.dictionary))
        submissions = read_lines(args.words)
        if args.root:
            root = args.root
        else:
            root = WordListProvider.from_file(args.start_words, seed=args.seed).pick_root_word()
    except FileNotFoundError as e:
        sys.stderr.write(f"Missing data file: {e}\n")
        sys.exit(2)

    controller = SessionController(ValidationEngine(dictionary, language=args.language))

    # 3) Replay
    try:
        result = play_round(controller, root, submissions)
    except RootWordError as e:
        sys.stderr.write(f"Cannot start round: {e}\n")
        sys.exit(2)

    accepted = sum(1 for t in result["turns"] if t["outcome"] == "accepted")
    print(f"root={result['root_word']} | submissions={len(result['turns'])} "
          f"| accepted={accepted} | score={result['score']}")

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"replay_{run_id}.csv"
    manifest_path = outdir / f"replay_{run_id}_manifest.json"

    write_csv(result, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "start_words": rep,
        "root_word": result["root_word"],
        "score": result["score"],
        "num_turns": len(result["turns"]),
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
