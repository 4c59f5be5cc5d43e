"""
Word list validator.

What this module does:
- Validate one dictionary file against a session word length N.
- Count lines that the loader keeps (alphabetic, exact length N) and the
  ones it drops; detect duplicates; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Unlike the loader, mixed case is accepted here because the loader lowercases
on read. A list with other lengths mixed in is normal (one dictionary serves
every N), so dropped lines are reported but do not fail validation.

Typical use:
    from wordlebot.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordlebot.engine import is_valid_word


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class ValidationReport:
    """Validation result for one word list at length N."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of usable words (length N, alphabetic)
    unique_count: int    # unique usable words (after lowercasing)
    skipped_lines: int   # non-blank lines dropped (wrong length or characters)
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Returns:
      (usable_words_lowercased, skipped_count); blank lines are ignored.
    """
    usable: List[str] = []
    skipped = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                continue
            if is_valid_word(w, N):
                usable.append(w.lower())
            else:
                skipped += 1

    return usable, skipped


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(N: int, path: str) -> Dict:
    """
    Validate a dictionary file for word length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema).
        `passed` requires the file to exist and hold at least one usable word.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"word list not found: {path}")
        rep = ValidationReport(N, str(path), False, 0, 0, 0, "", False, issues)
        return asdict(rep)

    try:
        words, skipped = _load_and_check(p, N)
        sha = _sha256_file(p)
    except (OSError, UnicodeDecodeError) as e:
        issues.append(f"word list unreadable: {e}")
        rep = ValidationReport(N, str(p), True, 0, 0, 0, "", False, issues)
        return asdict(rep)
    unique = set(words)

    if not words:
        issues.append(f"word list contains 0 words of length {N}")
    if len(words) != len(unique):
        issues.append(f"word list contains {len(words) - len(unique)} duplicate word(s)")

    rep = ValidationReport(
        N=N,
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=len(unique),
        skipped_lines=skipped,
        sha256=sha,
        passed=bool(words),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | words=2315 (uniq=2315, skipped=8123, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, "
        f"skipped={report['skipped_lines']}, sha={sha}) | {status}"
    )
