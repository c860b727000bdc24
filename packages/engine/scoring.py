"""
Points awarded for an accepted word.

The score is the number of root letters left over, plus one:

    score = len(root_word) - len(word) + 1

Shorter words earn more, which rewards finding the many small words hiding in
a long root. The value is not clamped.

Examples:
  score("silkworm", "silk") -> 5
  score("silkworm", "worm") -> 5
  score("silkworm", "milk") -> 5
"""


def score(root_word: str, word: str) -> int:
    """Return the score delta for accepting `word` against `root_word`."""
    return len(root_word) - len(word) + 1
