"""
Wordle-style scoring for a single (guess, answer) pair.

Used by the offline oracle to answer guesses without the remote service.

This implementation is:
  - N-aware (any word length)
  - duplicate-safe (respects true letter multiplicities in the answer)
  - deterministic (same inputs -> same outputs)

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all correct letters and counts the remaining (unmatched)
     letters from the answer.
  2) Second pass marks present letters only if the letter still has
     remaining count.
"""

from collections import Counter

from .feedback import FeedbackSet, LetterFeedback, Outcome


def score(guess: str, answer: str) -> FeedbackSet:
    """
    Compute per-letter feedback for `guess` against `answer`.

    Preconditions:
      - len(guess) == len(answer)

    Examples (as patterns):
      score("belle", "level") -> "-GYYY"
      score("lemon", "level") -> "GG---"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    if len(guess) != len(answer):
        raise ValueError(f"guess length ({len(guess)}) != answer length ({len(answer)})")

    n = len(guess)
    outcomes = [Outcome.ABSENT] * n

    # Pass 1: mark correct slots and collect leftover counts from the answer.
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            outcomes[i] = Outcome.CORRECT
        else:
            remaining[a] += 1

    # Pass 2: mark present only while the letter still has availability.
    for i, g in enumerate(guess):
        if outcomes[i] is Outcome.CORRECT:
            continue
        if remaining[g] > 0:
            outcomes[i] = Outcome.PRESENT
            remaining[g] -= 1

    return tuple(LetterFeedback(i, ch, o) for i, (ch, o) in enumerate(zip(guess, outcomes)))
