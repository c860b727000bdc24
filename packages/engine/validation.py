"""
Guess validation pipeline.

This module answers the question: "Is this word acceptable right now, and if
so, how much is it worth?" Rules run in a fixed order and stop at the first
failure, so the reason reported is always the earliest failing rule:

  1) normalize      : lowercase + strip; empty input is ignored (None)
  2) identity       : must differ from the root word       -> SAME_AS_ROOT
  3) length         : at least MIN_WORD_LENGTH letters     -> TOO_SHORT
  4) originality    : not accepted earlier this round      -> ALREADY_USED
  5) spellability   : letters are a sub-multiset of root   -> NOT_SPELLABLE_FROM_ROOT
  6) realness       : dictionary checker says it's a word  -> NOT_A_REAL_WORD

If everything passes the verdict is Accepted(score(root, word)).

The engine never mutates the session it is given; it only reads
`root_word` and `accepted_words`.
"""

from __future__ import annotations

from typing import Optional

from .letters import can_spell
from .normalize import normalize
from .scoring import score
from .verdict import Accepted, Rejected, RejectReason, Verdict

# Shortest word the game accepts.
MIN_WORD_LENGTH = 3

# Language tag passed to the dictionary checker unless configured otherwise.
DEFAULT_LANGUAGE = "en"


class ValidationEngine:
    """
    Stateless rule pipeline.

    Args:
      dictionary : object with is_real_word(word, language) -> bool
      language   : language tag forwarded to the dictionary (default "en")
    """

    def __init__(self, dictionary, *, language: str = DEFAULT_LANGUAGE):
        self.dictionary = dictionary
        self.language = language

    def evaluate(self, session, raw: str) -> Optional[Verdict]:
        """
        Judge `raw` against `session` (anything with `root_word` and
        `accepted_words`). Returns None for blank input, otherwise a Verdict.
        """
        word = normalize(raw)
        if not word:
            return None

        if word == session.root_word:
            return Rejected(RejectReason.SAME_AS_ROOT)

        if len(word) < MIN_WORD_LENGTH:
            return Rejected(RejectReason.TOO_SHORT)

        if word in session.accepted_words:
            return Rejected(RejectReason.ALREADY_USED)

        if not can_spell(word, session.root_word):
            return Rejected(RejectReason.NOT_SPELLABLE_FROM_ROOT)

        # Dictionary last: it's the only rule that leaves the core.
        if not self.dictionary.is_real_word(word, self.language):
            return Rejected(RejectReason.NOT_A_REAL_WORD)

        return Accepted(score(session.root_word, word))
