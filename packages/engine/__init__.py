from .normalize import normalize
from .letters import can_spell, letter_counts
from .scoring import score
from .verdict import Accepted, Rejected, RejectReason, Verdict
from .validation import ValidationEngine, MIN_WORD_LENGTH, DEFAULT_LANGUAGE

__all__ = [
    "normalize",
    "can_spell",
    "letter_counts",
    "score",
    "Accepted",
    "Rejected",
    "RejectReason",
    "Verdict",
    "ValidationEngine",
    "MIN_WORD_LENGTH",
    "DEFAULT_LANGUAGE",
]
