"""
I/O utilities for replay runs.

Responsibilities:
- write_csv:     flatten one replayed round into a tidy CSV (one row per submission).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict
import csv
import json
import subprocess
import datetime as dt

FIELDS = ["turn", "root_word", "word", "outcome", "reason", "score_delta", "score"]


def write_csv(result: Dict, path: str) -> str:
    """
    Serialize a play_round() result to CSV.

    Schema (columns):
      turn, root_word, word, outcome, reason, score_delta, score

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for i, t in enumerate(result["turns"], start=1):
            w.writerow({"turn": i, "root_word": result["root_word"], **t})

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and word-list summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args
      - start_words: output of datasets.validate_root_words(...)
      - score, num_turns
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
