from .config import SessionConfig, DEFAULT_SEED
from .core import (
    CandidatesExhausted,
    SessionResult,
    SessionState,
    SolverLoop,
    run_batch,
    run_session,
)
from .io import write_csv, write_manifest

__all__ = [
    "SessionConfig", "DEFAULT_SEED",
    "SolverLoop", "SessionState", "SessionResult", "CandidatesExhausted",
    "run_session", "run_batch",
    "write_csv", "write_manifest",
]
