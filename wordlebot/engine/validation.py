"""
Lightweight word validation.

A word is acceptable for a session of length N iff:
  - it is a string
  - it is alphabetic a-z only
  - it has exact length N

Dictionary loading normalizes case before calling this; guesses coming out of
a strategy are checked as-is.
"""

import re

_ALPHA_RE = re.compile(r"^[a-zA-Z]+$")


def is_valid_word(word, N: int) -> bool:
    """Return True if `word` is an N-letter ASCII alphabetic string."""
    if not isinstance(word, str):
        return False
    return len(word) == N and bool(_ALPHA_RE.match(word))
