"""
Per-letter feedback returned by the oracle for one guess.

Wire format (one JSON object per letter slot):
  {"slot": 0, "guess": "a", "result": "correct"}

Outcomes:
  - 'correct' : letter in the target, right position
  - 'present' : letter in the target, wrong position
  - 'absent'  : letter not in the target

A FeedbackSet is the tuple of LetterFeedback for one round, ordered by slot,
with exactly one entry per letter of the guess.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Tuple

from .validation import is_valid_word


class Outcome(str, Enum):
    ABSENT = "absent"
    PRESENT = "present"
    CORRECT = "correct"


# Compact one-char rendering used in logs and CSV reports
_PATTERN_CHARS = {
    Outcome.CORRECT: "G",
    Outcome.PRESENT: "Y",
    Outcome.ABSENT: "-",
}


@dataclass(frozen=True)
class LetterFeedback:
    """Feedback for a single letter slot of a guess."""
    slot: int
    letter: str
    outcome: Outcome


FeedbackSet = Tuple[LetterFeedback, ...]


def parse_feedback(payload: Any, size: int) -> FeedbackSet:
    """
    Decode an oracle payload into a FeedbackSet.

    Args:
      payload : decoded JSON (expected: list of {"slot", "guess", "result"})
      size    : word length of the session

    Returns:
      FeedbackSet sorted by slot, letters lowercased.

    Raises:
      ValueError if the payload does not describe exactly one valid entry
      per slot 0..size-1.
    """
    if not isinstance(payload, list):
        raise ValueError(f"feedback must be a list, got {type(payload).__name__}")
    if len(payload) != size:
        raise ValueError(f"feedback has {len(payload)} entries, expected {size}")

    out = []
    for item in payload:
        if not isinstance(item, dict):
            raise ValueError(f"feedback entry must be an object: {item!r}")
        try:
            slot, letter, result = item["slot"], item["guess"], item["result"]
        except KeyError as e:
            raise ValueError(f"feedback entry missing key {e}: {item!r}") from e

        # bool is an int subclass; reject it explicitly
        if isinstance(slot, bool) or not isinstance(slot, int) or not 0 <= slot < size:
            raise ValueError(f"invalid slot {slot!r} for size {size}")
        if not is_valid_word(letter, 1):
            raise ValueError(f"invalid letter {letter!r} at slot {slot}")
        try:
            outcome = Outcome(result)
        except ValueError as e:
            raise ValueError(f"unknown result {result!r} at slot {slot}") from e

        out.append(LetterFeedback(slot, letter.lower(), outcome))

    out.sort(key=lambda fb: fb.slot)
    if [fb.slot for fb in out] != list(range(size)):
        raise ValueError("feedback slots must cover each position exactly once")
    return tuple(out)


def is_solved(feedback: FeedbackSet) -> bool:
    """True iff every letter came back 'correct'."""
    return bool(feedback) and all(fb.outcome is Outcome.CORRECT for fb in feedback)


def to_pattern(feedback: FeedbackSet) -> str:
    """
    Render feedback as a 'G'/'Y'/'-' string.
    Example: "apple" scored against "angle" -> "G--GG"
    """
    return "".join(_PATTERN_CHARS[fb.outcome] for fb in feedback)
