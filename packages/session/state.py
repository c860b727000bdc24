from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class Session:
    """
    One round of play.

    root_word      : lowercase letters the round is built on (fixed per round)
    accepted_words : accepted guesses, most recent first
    score          : running total, never decreases within a round
    """
    root_word: str
    accepted_words: List[str] = field(default_factory=list)
    score: int = 0

    def copy(self) -> "Session":
        return Session(
            root_word=self.root_word,
            accepted_words=list(self.accepted_words),
            score=self.score,
        )
