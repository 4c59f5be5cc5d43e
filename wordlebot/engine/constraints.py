"""
Candidate filtering given the feedback of one guess.

Given:
  - the remaining candidate words (all of the session's word length)
  - the FeedbackSet returned for the latest guess

Return:
  - the words still consistent with that feedback, in input order.

Pruning rules (two passes):
  1) Correct-position pass: every 'correct' entry pins its letter to its slot.
     Skipped entirely when the feedback has no 'correct' entry.
  2) Absence pass: every 'absent' letter must not occur anywhere in the word.

'present' entries do not prune. An 'absent' letter is treated as missing from
the whole word even when the same letter is 'correct' in another slot, so a
target with repeated letters can be filtered out by its own feedback; the
solver loop reports that case as exhausted candidates.
"""

from typing import Iterable, List

from .feedback import FeedbackSet, Outcome


def filter_correct_positions(words: Iterable[str], feedback: FeedbackSet) -> List[str]:
    """
    Keep words that carry every 'correct' letter at its slot.
    Returns the input unchanged (as a list) if nothing came back 'correct'.
    """
    correct = [fb for fb in feedback if fb.outcome is Outcome.CORRECT]
    if not correct:
        return list(words)
    return [w for w in words if all(w[fb.slot] == fb.letter for fb in correct)]


def is_consistent(word: str, feedback: FeedbackSet) -> bool:
    """True if `word` contains none of the letters reported 'absent'."""
    for fb in feedback:
        if fb.outcome is Outcome.ABSENT and fb.letter in word:
            return False
    return True


def filter_candidates(words: Iterable[str], feedback: FeedbackSet) -> List[str]:
    """
    Apply both pruning passes to `words`.

    Args:
      words    : remaining candidates (same length as the feedback)
      feedback : FeedbackSet of the latest guess

    Returns:
      List[str] of surviving candidates (order preserved as in `words`).
    """
    survivors = filter_correct_positions(words, feedback)
    return [w for w in survivors if is_consistent(w, feedback)]
