from __future__ import annotations
import random
from typing import Dict, List, Type

# ---- Global strategy registry ----
REGISTRY: Dict[str, Type["BaseStrategy"]] = {}


def register(cls: Type["BaseStrategy"]) -> Type["BaseStrategy"]:
    """
    Decorator: @register on a strategy class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate strategy id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that guess-selection strategies inherit ----
class BaseStrategy:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.rng = random.Random()

    def reset(self, *, seed: int | None = None) -> None:
        if seed is not None:
            self.rng.seed(seed)

    def select(self, candidates: List[str]) -> str:
        """Return one word from the (non-empty) candidate list."""
        raise NotImplementedError("Override in subclass")
