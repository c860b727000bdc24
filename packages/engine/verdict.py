"""
Outcome types returned by the validation engine.

A verdict is either:
  - Accepted(score_delta)  : the word passed every rule
  - Rejected(reason)       : the first rule it failed, as a RejectReason

Verdicts are plain values; nothing stores them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class RejectReason(Enum):
    SAME_AS_ROOT = "same_as_root"
    TOO_SHORT = "too_short"
    ALREADY_USED = "already_used"
    NOT_SPELLABLE_FROM_ROOT = "not_spellable_from_root"
    NOT_A_REAL_WORD = "not_a_real_word"


@dataclass(frozen=True)
class Accepted:
    score_delta: int


@dataclass(frozen=True)
class Rejected:
    reason: RejectReason


Verdict = Union[Accepted, Rejected]
