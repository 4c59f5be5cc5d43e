"""Session configuration threaded through the solver loop."""

from __future__ import annotations

from dataclasses import dataclass

from wordlebot.oracle import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from wordlebot.solvers import DEFAULT_STRATEGY

DEFAULT_SEED = 1238


@dataclass(frozen=True)
class SessionConfig:
    """Everything that stays fixed for one solving session.

    Attributes
    ----------
    word_length : int
        Letters per word; every candidate and every guess has this length.
    seed : int
        Oracle seed; pins the hidden word for the whole session.
    base_url : str
        Root URL of the HTTP oracle.
    timeout : float
        Per-request timeout (seconds) for the HTTP oracle.
    strategy : str
        Registered guess-selection strategy id.
    """

    word_length: int = 5
    seed: int = DEFAULT_SEED
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    strategy: str = DEFAULT_STRATEGY

    def __post_init__(self) -> None:
        if self.word_length < 1:
            raise ValueError(f"word_length must be >= 1; got {self.word_length}")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be > 0; got {self.timeout}")
