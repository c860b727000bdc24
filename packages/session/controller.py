"""
Round controller.

Owns the single live Session and is the only thing that mutates it:

  - start_new_round(source): discard the old round, pick a root word,
    zero the score and history.
  - submit(raw): ask the ValidationEngine for a verdict; on Accepted,
    prepend the word and add the score delta. Rejections and blank input
    leave the session untouched.

Two states: NotStarted (no session yet) and InRound. start_new_round may be
called from either; submit only makes sense InRound.
"""

from __future__ import annotations

from typing import Callable, Optional

from packages.engine import Accepted, ValidationEngine, Verdict, normalize
from .state import Session

RootWordSource = Callable[[], str]


class RootWordError(RuntimeError):
    """The word-list provider could not produce a root word. Not recoverable."""


class RoundNotStartedError(RuntimeError):
    """submit() was called before start_new_round()."""


class SessionController:
    """
    Args:
      engine      : ValidationEngine used to judge every submission
      word_source : default zero-arg callable returning a root word
                    (e.g. WordListProvider.pick_root_word)
    """

    def __init__(self, engine: ValidationEngine, word_source: Optional[RootWordSource] = None):
        self.engine = engine
        self.word_source = word_source
        self._session: Optional[Session] = None

    @property
    def in_round(self) -> bool:
        return self._session is not None

    @property
    def session(self) -> Session:
        """Snapshot of the current round (mutating it does not affect play)."""
        if self._session is None:
            raise RoundNotStartedError("no round in progress; call start_new_round() first")
        return self._session.copy()

    def start_new_round(self, root_word_source: Optional[RootWordSource] = None) -> Session:
        """
        Begin a fresh round with a root word from `root_word_source`
        (falls back to the controller's `word_source`).

        Raises RootWordError if no source is configured or it yields nothing
        usable; the previous round (if any) is left as it was in that case.
        """
        source = root_word_source or self.word_source
        if source is None:
            raise RootWordError("no root word source configured")

        try:
            raw = source()
        except (OSError, IndexError) as e:
            raise RootWordError(f"root word source failed: {e}") from e

        root = normalize(raw) if isinstance(raw, str) else ""
        if not root:
            raise RootWordError(f"root word source returned no usable word: {raw!r}")

        self._session = Session(root_word=root)
        return self._session.copy()

    def submit(self, raw: str) -> Optional[Verdict]:
        """
        Judge `raw` in the current round and apply the verdict.

        Returns the Verdict (Accepted or Rejected), or None if the input was
        blank. Raises RoundNotStartedError before the first round.
        """
        if self._session is None:
            raise RoundNotStartedError("no round in progress; call start_new_round() first")

        verdict = self.engine.evaluate(self._session, raw)
        if isinstance(verdict, Accepted):
            self._session.accepted_words.insert(0, normalize(raw))
            self._session.score += verdict.score_delta
        return verdict
