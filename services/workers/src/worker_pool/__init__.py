"""
Worker pool for the chess harness.

Holds one result slot per concurrently running game and folds every
reported outcome into a global win/loss/draw tally.
"""

from common import PoolError, PoolShutdownError

from .config import PoolConfig
from .pool import Deadline, Outcome, Tally, Worker, WorkerPool

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Config
    "PoolConfig",
    # Pool
    "WorkerPool",
    "Worker",
    "Deadline",
    "Outcome",
    "Tally",
    # Errors
    "PoolError",
    "PoolShutdownError",
]
