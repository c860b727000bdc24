"""
Scripted round replay.

- play_round: start one round on a fixed root word and feed it a sequence
  of submissions, recording what the controller decided for each.

This is UI-agnostic so it can back the replay CLI, tests, or a notebook.
"""

from __future__ import annotations

import time
from typing import Dict, Iterable, List

from packages.engine import Accepted, normalize
from packages.session import SessionController


def play_round(controller: SessionController, root_word: str, words: Iterable[str]) -> Dict:
    """
    Play `words` in order against `root_word`.

    Returns:
        dict with keys:
            root_word (str), score (int), accepted (list[str], most recent first),
            time_ms (float), turns (list[dict]) where each turn has
            word, outcome ('accepted' | 'rejected' | 'ignored'), reason,
            score_delta, score
    """
    controller.start_new_round(lambda: root_word)

    turns: List[Dict] = []
    t0 = time.perf_counter_ns()
    for raw in words:
        verdict = controller.submit(raw)
        score_now = controller.session.score

        if verdict is None:
            outcome, reason, delta = "ignored", "", 0
        elif isinstance(verdict, Accepted):
            outcome, reason, delta = "accepted", "", verdict.score_delta
        else:
            outcome, reason, delta = "rejected", verdict.reason.value, 0

        turns.append({
            "word": normalize(raw),
            "outcome": outcome,
            "reason": reason,
            "score_delta": delta,
            "score": score_now,
        })
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0

    session = controller.session
    return {
        "root_word": session.root_word,
        "score": session.score,
        "accepted": session.accepted_words,
        "time_ms": dt,
        "turns": turns,
    }
