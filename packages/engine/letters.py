"""
Letter-multiset helpers for the spellability rule.

A word is spellable from a root word iff every letter it uses appears in the
root at least as many times as the word uses it (anagram-subset test).

Examples (root "listen"):
  can_spell("line", "listen") -> True
  can_spell("lisp", "listen") -> False   # no 'p'
  can_spell("ll",   "listen") -> False   # only one 'l'

Word length relative to the root is not checked here; a word can only be
spellable if it is at most as long as the root anyway.
"""

from collections import Counter


def letter_counts(word: str) -> Counter:
    """Multiset of characters in `word`."""
    return Counter(word)


def can_spell(word: str, root: str) -> bool:
    """
    True if `word` can be spelled using the letters of `root`,
    each letter used no more times than it occurs in `root`.
    """
    available = letter_counts(root)
    for ch, need in letter_counts(word).items():
        if available[ch] < need:
            return False
    return True
