"""
Root-word provider.

Loads the bundled list of start words (one per line) and hands out a random
one per round. Construction fails with FileNotFoundError if the file is
missing; a bundle without its start words is broken, not something to play
around. A file that loads but contains no words yields DEFAULT_ROOT_WORD.
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import Iterable, List

from .io import load_words

DATA_DIR = Path(__file__).resolve().parent / "data"
START_WORDS_PATH = DATA_DIR / "start.txt"

# Used when the start list is present but empty.
DEFAULT_ROOT_WORD = "silkworm"


class WordListProvider:
    """
    Args:
      words : candidate root words (blank entries are dropped)
      seed  : RNG seed so a sequence of rounds is reproducible
    """

    def __init__(self, words: Iterable[str], *, seed: int | None = None):
        self.words: List[str] = [w.strip().lower() for w in words if w.strip()]
        self.rng = random.Random(seed)

    @classmethod
    def from_file(cls, path: Path | str = START_WORDS_PATH, *, seed: int | None = None) -> "WordListProvider":
        return cls(load_words(path), seed=seed)

    def pick_root_word(self) -> str:
        if not self.words:
            return DEFAULT_ROOT_WORD
        return self.rng.choice(self.words)
