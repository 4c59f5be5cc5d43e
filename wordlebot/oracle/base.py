from __future__ import annotations

from wordlebot.engine import FeedbackSet


class OracleError(Exception):
    """
    The oracle could not produce a FeedbackSet for a guess: transport failure,
    non-success status, or a body that does not decode into valid feedback.
    Fatal to the session; never retried.
    """

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class Oracle:
    """
    Source of truth for one hidden target word.

    `seed` pins the target for the whole session; `size` is the word length.
    Implementations return exactly one LetterFeedback per letter of `guess`
    or raise OracleError.
    """

    def submit(self, guess: str, size: int, seed: int) -> FeedbackSet:
        raise NotImplementedError("Override in subclass")
