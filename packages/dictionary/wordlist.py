"""
Word-list dictionary checker.

A word is "real" iff it appears in the word list loaded for the requested
language. Lists are lowercased on load; lookups are set membership.

The list is not bundled; create it with `python -m script.fetch_wordlist`.

Typical use:
    d = WordListDictionary.from_files({"en": "packages/datasets/data/words_en.txt"})
    d.is_real_word("worm", "en")  -> True
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, Mapping, Set

from packages.datasets.io import load_words
from .base import BaseDictionary, register


@register
class WordListDictionary(BaseDictionary):
    id = "wordlist"
    name = "Word list"

    def __init__(self, words: Mapping[str, Iterable[str]] | None = None):
        self._words: Dict[str, Set[str]] = {}
        for language, ws in (words or {}).items():
            self.add_words(language, ws)

    @classmethod
    def from_files(cls, paths: Mapping[str, Path | str]) -> "WordListDictionary":
        """Load one newline-separated word file per language tag."""
        return cls({language: load_words(p) for language, p in paths.items()})

    def add_words(self, language: str, words: Iterable[str]) -> None:
        bucket = self._words.setdefault(language, set())
        bucket.update(w.strip().lower() for w in words if w.strip())

    @property
    def languages(self) -> list[str]:
        return sorted(self._words)

    def is_real_word(self, word: str, language: str) -> bool:
        """
        Raises ValueError if no list is loaded for `language`; an unknown
        language is a configuration mistake, not a misspelling.
        """
        try:
            bucket = self._words[language]
        except KeyError as e:
            raise ValueError(
                f"No word list loaded for language {language!r}. Available: {self.languages}") from e
        return word in bucket
