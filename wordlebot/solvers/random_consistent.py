"""
Random Consistent strategy.

Strategy:
  - Choose uniformly at random from the CURRENT candidate list (words not yet
    ruled out by feedback).

Notes:
  - Deterministic across runs with the same seed (via BaseStrategy.rng).
  - A baseline to compare against dictionary order; it does not try to
    maximize information gain or positional coverage.
"""

from __future__ import annotations

from typing import List
from .base import BaseStrategy, register


@register
class RandomConsistentStrategy(BaseStrategy):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def select(self, candidates: List[str]) -> str:
        """
        Pick any candidate uniformly at random (seeded RNG).

        Args:
            candidates: current consistent words (non-empty, loop guarantees it)

        Returns:
            A single lowercase guess from `candidates`.
        """
        i = self.rng.randrange(len(candidates))
        return candidates[i]
