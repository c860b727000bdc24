"""
Player-facing text for verdicts.

One fixed (title, message) pair per rejection reason; the "not possible"
message names the root word. Used by the terminal apps, not by the engine.
"""

from __future__ import annotations

from typing import Dict, Tuple

from packages.engine import Accepted, RejectReason, Verdict

ALERTS: Dict[RejectReason, Tuple[str, str]] = {
    RejectReason.SAME_AS_ROOT: (
        "Word is the same as root word",
        "You can't just copy it and consider as answer!",
    ),
    RejectReason.TOO_SHORT: (
        "Word is too small",
        "It's not possible to create a word with less than 3 letters!",
    ),
    RejectReason.ALREADY_USED: (
        "Word used already",
        "Be more original!",
    ),
    RejectReason.NOT_SPELLABLE_FROM_ROOT: (
        "Word not possible",
        "You can't spell that word from '{root}'!",
    ),
    RejectReason.NOT_A_REAL_WORD: (
        "Word not recognized",
        "You can't just make them up, you know!",
    ),
}


def describe(verdict: Verdict, root_word: str) -> Tuple[str, str]:
    """Return (title, message) for a verdict."""
    if isinstance(verdict, Accepted):
        return "Nice!", f"+{verdict.score_delta} points"
    title, message = ALERTS[verdict.reason]
    return title, message.format(root=root_word)


def history_label(word: str) -> str:
    """e.g. "worm, 4 letters" """
    return f"{word}, {len(word)} letters"
