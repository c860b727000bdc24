# apps/cli/play.py
"""
Interactive word scramble in the terminal.

Each round shows a root word; type words spelled from its letters.
Commands:
  :new   start a new round with a different root word
  :quit  exit (Ctrl-D / Ctrl-C work too)

The dictionary word list is not bundled; download it once first:
    python -m script.fetch_wordlist --out packages/datasets/data/words_en.txt

Usage:
    python -m apps.cli.play --dictionary packages/datasets/data/words_en.txt
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from packages.datasets import START_WORDS_PATH, WordListProvider, load_words, validate_root_words, \
    pretty_summary
from packages.dictionary import create_dictionary, get_dictionary_ids
from packages.engine import DEFAULT_LANGUAGE, Accepted, ValidationEngine
from packages.session import SessionController, RootWordError, describe, history_label

DEFAULT_DICTIONARY = "packages/datasets/data/words_en.txt"


def _show_round(controller: SessionController) -> None:
    session = controller.session
    print()
    print(f"=== {session.root_word.upper()} ===")
    print(f"Score: {session.score}")


def _show_history(controller: SessionController) -> None:
    session = controller.session
    for w in session.accepted_words:
        print(f"  {history_label(w)}")
    print(f"Score: {session.score}")


def main():
    ap = argparse.ArgumentParser(description="wordscramble — spell words from a root word")
    ap.add_argument("--start-words", default=str(START_WORDS_PATH),
                    help="path to root word list (one per line)")
    ap.add_argument("--dictionary", default=DEFAULT_DICTIONARY,
                    help="path to dictionary word list (see script/fetch_wordlist.py)")
    ap.add_argument("--dictionary-id", default="wordlist",
                    help=f"dictionary checker id (one of: {', '.join(get_dictionary_ids())})")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE, help="language tag for the dictionary")
    ap.add_argument("--seed", type=int, help="RNG seed for root word selection")
    args = ap.parse_args()

    print(pretty_summary(validate_root_words(args.start_words)))

    try:
        provider = WordListProvider.from_file(args.start_words, seed=args.seed)
        dictionary = create_dictionary(args.dictionary_id)
        dictionary.add_words(args.language, load_words(args.dictionary))
    except FileNotFoundError as e:
        sys.stderr.write(f"Missing data file: {e}\n")
        if not Path(args.dictionary).exists():
            sys.stderr.write("Fetch the dictionary with: "
                             f"python -m script.fetch_wordlist --out {args.dictionary}\n")
        sys.exit(2)

    controller = SessionController(ValidationEngine(dictionary, language=args.language),
                                   provider.pick_root_word)
    try:
        controller.start_new_round()
    except RootWordError as e:
        sys.stderr.write(f"Cannot start game: {e}\n")
        sys.exit(2)
    _show_round(controller)

    while True:
        try:
            raw = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        cmd = raw.strip().lower()
        if cmd == ":quit":
            break
        if cmd == ":new":
            controller.start_new_round()
            _show_round(controller)
            continue

        verdict = controller.submit(raw)
        if verdict is None:
            continue

        title, message = describe(verdict, controller.session.root_word)
        if isinstance(verdict, Accepted):
            print(f"{title} {message}")
            _show_history(controller)
        else:
            print(f"{title}: {message}")

    print(f"Final score: {controller.session.score}")


if __name__ == "__main__":
    main()
