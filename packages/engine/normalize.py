"""
Candidate normalization.

Every submitted string is lowercased and stripped of surrounding whitespace
before any rule runs, so "  Worm\n" and "worm" are the same guess.
"""


def normalize(raw: str) -> str:
    """Return `raw` lowercased with leading/trailing whitespace removed."""
    return raw.lower().strip()
