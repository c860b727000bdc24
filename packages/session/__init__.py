from .state import Session
from .controller import SessionController, RootWordError, RoundNotStartedError
from .alerts import describe, history_label

__all__ = [
    "Session",
    "SessionController",
    "RootWordError",
    "RoundNotStartedError",
    "describe",
    "history_label",
]
