"""
HTTP client for the remote Wordle oracle.

Endpoint:
  GET {base_url}/random?guess=<word>&size=<N>&seed=<int>

The seed pins the server to one hidden word, so every guess of a session must
carry the same seed. A 200 response carries a JSON list with one
{"slot", "guess", "result"} object per letter.

Every failure (transport, non-200 status, bad JSON, bad payload) is mapped to
OracleError so the solver loop only has one thing to handle.
"""

from __future__ import annotations

import logging

import requests

from wordlebot.engine import FeedbackSet, parse_feedback
from .base import Oracle, OracleError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://wordle.votee.dev:8000"
DEFAULT_TIMEOUT = 10.0


class HttpOracle(Oracle):
    def __init__(self, base_url: str = DEFAULT_BASE_URL, *, timeout: float = DEFAULT_TIMEOUT,
                 session: requests.Session | None = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = float(timeout)
        self.session = session or requests.Session()

    def submit(self, guess: str, size: int, seed: int) -> FeedbackSet:
        """
        Send one guess and return the decoded feedback.

        Raises:
            OracleError on any failure; the original exception is chained.
        """
        url = f"{self.base_url}/random"
        params = {"guess": guess, "size": size, "seed": seed}
        logger.debug("GET %s params=%s", url, params)

        try:
            r = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise OracleError(f"error making guess {guess!r}: {e}") from e

        if r.status_code != 200:
            raise OracleError(f"unexpected status code: {r.status_code}",
                              status_code=r.status_code)

        try:
            payload = r.json()
        except ValueError as e:
            raise OracleError(f"error decoding response: {e}",
                              status_code=r.status_code) from e

        try:
            return parse_feedback(payload, size)
        except ValueError as e:
            raise OracleError(f"malformed feedback: {e}", status_code=r.status_code) from e

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "HttpOracle":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
