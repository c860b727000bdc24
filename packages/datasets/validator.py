"""
Start-word list validator.

What this module does:
- Validate the root-word list (start.txt) used to seed rounds.
- Enforce formatting rules (lowercase, a–z only, longer than
  MIN_WORD_LENGTH letters, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_root_words, pretty_summary
    rep = validate_root_words("packages/datasets/data/start.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from packages.engine import MIN_WORD_LENGTH


@dataclass
class ValidationReport:
    """Validation result for one root-word list."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines (blank lines are skipped, not invalid)
    min_length: int      # shortest valid word (0 if none)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Load words and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must be longer than MIN_WORD_LENGTH letters, otherwise no guess
        could be both shorter than the root and long enough

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                continue
            if w == w.lower() and w.isalpha() and len(w) > MIN_WORD_LENGTH:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_root_words(path: str) -> Dict:
    """
    Validate a root-word list.

    Returns a JSON-serializable dict (see ValidationReport). `passed` is
    strict: file exists, at least one valid word, no invalid lines, no
    duplicates.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"root word file not found: {path}")
        return asdict(ValidationReport(path, False, 0, "", 0, 0, 0, False, issues))

    words, invalid = _load_and_check(p)
    unique = set(words)

    if not words:
        issues.append("root word file contains 0 valid words")
    if invalid:
        issues.append(f"root word file has {invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append("root word file contains duplicate lines")

    rep = ValidationReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_lines=invalid,
        min_length=min((len(w) for w in words), default=0),
        passed=bool(words) and invalid == 0 and len(words) == len(unique),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        start.txt | words=40 (uniq=40, sha=abc123...) | min_len=8 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    name = Path(report["path"]).name
    return (
        f"{name} | words={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| min_len={report['min_length']} | {status}"
    )
