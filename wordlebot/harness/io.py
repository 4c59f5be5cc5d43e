"""
I/O utilities for solving runs.

Responsibilities:
- write_csv:     flatten per-session results into a tidy CSV (one row per session).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Patterns are prefixed with an apostrophe to keep Excel from interpreting
  strings like "-GYY-" as formulas (which would display as #NAME?).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

from wordlebot.engine import to_pattern


def _excel_safe_pattern(patt: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "-GYY-" -> "'-GYY-"
    """
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str, N: int) -> str:
    """
    Serialize a batch of session results to CSV.

    Schema (columns):
      strategy, N, seed, status, answer, guesses, time_ms, error,
      guess_1, patt_1, ..., guess_K, patt_K
    where K is the longest history in `results` (sessions have no turn cap).

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    max_rounds = max((len(r.get("history", [])) for r in results), default=0)
    fields = ["strategy", "N", "seed", "status", "answer", "guesses", "time_ms", "error"]
    for i in range(1, max_rounds + 1):
        fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "strategy": r.get("strategy_id", "?"),
                "N": N,
                "seed": r["seed"],
                "status": r["status"],
                "answer": r["answer"] or "",
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
                "error": r.get("error") or "",
            }

            # Expand history into fixed columns (Excel-safe patterns)
            hist = r.get("history", [])
            for i in range(1, max_rounds + 1):
                if i <= len(hist):
                    g, feedback = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"patt_{i}"] = _excel_safe_pattern(to_pattern(feedback))
                else:
                    row[f"guess_{i}"] = ""
                    row[f"patt_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and word list validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (strategy, N, seed(s), base_url, words, outdir)
      - wordlist: output of datasets.validate_wordlist(...)
      - num_sessions, num_solved
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
