"""
Solver loop: guess -> feedback -> prune, until solved or out of candidates.

- SolverLoop:  the state machine for one session (one hidden word / seed).
- run_session: run one session and return a flat result dict; the two
               session-ending errors are recorded as a status instead of raised.
- run_batch:   run one session per seed, in sequence.

Exactly one guess is in flight at a time: filtering for round n happens after
the oracle reply for round n and before the guess of round n+1. There is no
cap on the number of rounds; the candidate list strictly shrinks, so a session
always ends.
"""

from __future__ import annotations

import dataclasses
import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from wordlebot.engine import FeedbackSet, filter_candidates, is_solved, to_pattern
from wordlebot.oracle import Oracle, OracleError
from wordlebot.solvers import BaseStrategy, create_strategy
from .config import SessionConfig

logger = logging.getLogger(__name__)

Round = Tuple[str, FeedbackSet]  # (guess, feedback)


class SessionState(str, Enum):
    GUESSING = "guessing"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    ORACLE_ERROR = "oracle_error"


class CandidatesExhausted(Exception):
    """
    Feedback filtering left no candidate words. Either the dictionary lacks
    the hidden word or the pruning rules discarded it.
    """


@dataclass
class SessionResult:
    state: SessionState
    answer: Optional[str]
    history: List[Round] = field(default_factory=list)

    @property
    def guesses(self) -> int:
        return len(self.history)


class SolverLoop:
    """
    Drive one session against an oracle.

    Args:
        oracle:     anything implementing Oracle.submit(guess, size, seed)
        candidates: initial words (dictionary order, all of config.word_length)
        config:     SessionConfig (word length and oracle seed are read from it)
        strategy:   guess-selection strategy; defaults to config.strategy
    """

    def __init__(self, oracle: Oracle, candidates: Iterable[str], config: SessionConfig,
                 strategy: BaseStrategy | None = None):
        self.oracle = oracle
        self.config = config
        self.strategy = strategy or create_strategy(config.strategy)
        self.strategy.reset(seed=config.seed)

        self.candidates: List[str] = list(candidates)
        bad = [w for w in self.candidates if len(w) != config.word_length]
        if bad:
            raise ValueError(
                f"candidates must have length {config.word_length}; got e.g. {bad[:5]}")

        self.state = SessionState.GUESSING
        self.answer: Optional[str] = None
        self.history: List[Round] = []

    @property
    def done(self) -> bool:
        return self.state is not SessionState.GUESSING

    def step(self) -> SessionState:
        """
        Play one round and return the new state.

        Raises:
            OracleError:         the oracle call failed (state -> ORACLE_ERROR)
            CandidatesExhausted: nothing left to guess (state -> EXHAUSTED)
            RuntimeError:        the session has already finished
        """
        if self.done:
            raise RuntimeError(f"session already finished ({self.state.value})")

        if not self.candidates:
            self.state = SessionState.EXHAUSTED
            raise CandidatesExhausted("no candidate words to guess from")

        guess = self.strategy.select(self.candidates)
        if guess not in self.candidates:
            raise ValueError(f"strategy {self.strategy.id!r} picked a non-candidate: {guess!r}")

        n_round = len(self.history) + 1
        logger.info("round %d: guessing %s (%d candidates)", n_round, guess, len(self.candidates))

        try:
            feedback = self.oracle.submit(guess, self.config.word_length, self.config.seed)
            if len(feedback) != self.config.word_length:
                raise OracleError(
                    f"feedback has {len(feedback)} entries, expected {self.config.word_length}")
        except OracleError as e:
            self.state = SessionState.ORACLE_ERROR
            logger.error("round %d: oracle failed for %s: %s", n_round, guess, e)
            raise

        self.history.append((guess, feedback))
        logger.info("round %d: feedback %s", n_round, to_pattern(feedback))

        if is_solved(feedback):
            self.state = SessionState.SOLVED
            self.answer = guess
            logger.info("solved in %d guesses: %s", n_round, guess)
            return self.state

        # The guess is consumed; prune what is left with the new feedback.
        remaining = [w for w in self.candidates if w != guess]
        self.candidates = filter_candidates(remaining, feedback)
        logger.debug("round %d: %d -> %d candidates", n_round, len(remaining), len(self.candidates))

        if not self.candidates:
            self.state = SessionState.EXHAUSTED
            logger.warning("round %d: no candidates left after %s", n_round, to_pattern(feedback))
            raise CandidatesExhausted(
                f"no possible guesses left after {n_round} round(s) (last guess {guess!r})")

        return self.state

    def run(self) -> SessionResult:
        """Step until SOLVED; errors propagate after the state is recorded."""
        while not self.done:
            self.step()
        return self.result()

    def result(self) -> SessionResult:
        return SessionResult(self.state, self.answer, list(self.history))


def run_session(oracle: Oracle, words: Iterable[str], config: SessionConfig,
                strategy: BaseStrategy | None = None) -> Dict:
    """
    Execute one session to completion.

    Returns:
        dict with keys:
            status (str, a SessionState value), success (bool), answer (str|None),
            guesses (int), time_ms (float), seed (int), error (str|None),
            history (list[(guess, FeedbackSet)])
    """
    loop = SolverLoop(oracle, words, config, strategy)
    error = None

    t0 = time.time()
    try:
        loop.run()
    except (CandidatesExhausted, OracleError) as e:
        error = str(e)
    dt = (time.time() - t0) * 1000.0

    return {
        "status": loop.state.value,
        "success": loop.state is SessionState.SOLVED,
        "answer": loop.answer,
        "guesses": len(loop.history),
        "time_ms": dt,
        "seed": config.seed,
        "error": error,
        "history": list(loop.history),
    }


def run_batch(oracle: Oracle, words: List[str], *, config: SessionConfig,
              seeds: Iterable[int]) -> List[Dict]:
    """
    Run one session per seed back-to-back, each from the full word list.

    `seeds` may be any iterable (e.g. wrapped in a progress bar by the caller).
    A failed session is recorded in its result dict and the batch continues.
    """
    out: List[Dict] = []
    for seed in seeds:
        case_config = dataclasses.replace(config, seed=seed)
        out.append(run_session(oracle, words, case_config))
    return out
