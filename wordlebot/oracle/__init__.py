from .base import Oracle, OracleError
from .http import HttpOracle, DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from .local import LocalOracle, SeededOracle

__all__ = ["Oracle", "OracleError", "HttpOracle", "LocalOracle", "SeededOracle",
           "DEFAULT_BASE_URL", "DEFAULT_TIMEOUT"]
