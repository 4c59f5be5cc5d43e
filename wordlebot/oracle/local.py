"""
Offline oracles: score guesses locally instead of calling the remote service.

- LocalOracle:  a fixed hidden word given at construction; the seed is
                accepted for interface compatibility and ignored.
- SeededOracle: the hidden word is drawn from a word pool by the seed, so a
                seed pins the target the same way it does on the server.

Used for tests, dry runs and benchmarking a strategy over a word list.
"""

from __future__ import annotations

import logging
import random
from typing import List

from wordlebot.engine import FeedbackSet, score, to_pattern
from .base import Oracle, OracleError

logger = logging.getLogger(__name__)


class LocalOracle(Oracle):
    def __init__(self, answer: str):
        self.answer = answer.strip().lower()
        self.calls = 0

    def answer_for(self, seed: int) -> str:
        return self.answer

    def submit(self, guess: str, size: int, seed: int) -> FeedbackSet:
        self.calls += 1
        answer = self.answer_for(seed)
        if len(answer) != size or len(guess) != size:
            raise OracleError(
                f"size mismatch: guess={len(guess)} answer={len(answer)} size={size}")
        fb = score(guess, answer)
        logger.debug("local oracle: %s -> %s", guess, to_pattern(fb))
        return fb


class SeededOracle(LocalOracle):
    def __init__(self, pool: List[str]):
        if not pool:
            raise ValueError("SeededOracle needs a non-empty word pool")
        super().__init__("")
        self.pool = list(pool)

    def answer_for(self, seed: int) -> str:
        # Same seed -> same hidden word, independent of call order
        return self.pool[random.Random(seed).randrange(len(self.pool))]
