"""
Mock UCI engine for the chess harness.

A random-mover engine that speaks enough UCI to drive harness tests and
benchmarks deterministically from a seed.
"""

from common import (
    IllegalMoveError,
    InvalidFenError,
    InvalidPositionCommandError,
    SessionError,
)

from .config import EngineConfig
from .prng import SplitMix64
from .session import RejectedCommand, Session, SessionSummary, replay_moves

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Config
    "EngineConfig",
    # Session
    "Session",
    "SessionSummary",
    "RejectedCommand",
    "replay_moves",
    "SplitMix64",
    # Errors
    "SessionError",
    "InvalidFenError",
    "IllegalMoveError",
    "InvalidPositionCommandError",
]
