"""
First Candidate strategy (default).

Strategy:
  - Guess the first word of the CURRENT candidate list. The list keeps
    dictionary order, so the session is fully determined by the word list,
    the word length and the oracle seed.
"""

from __future__ import annotations

from typing import List
from .base import BaseStrategy, register


@register
class FirstCandidateStrategy(BaseStrategy):
    id = "first"
    name = "First Candidate"
    version = "1.0.0"

    def select(self, candidates: List[str]) -> str:
        return candidates[0]
