"""Chess harness common utilities for Python services."""

from .exceptions import (
    HarnessError,
    IllegalMoveError,
    InvalidFenError,
    InvalidPositionCommandError,
    PoolError,
    PoolShutdownError,
    SessionError,
)

__all__ = [
    # Exceptions
    "HarnessError",
    "SessionError",
    "InvalidFenError",
    "IllegalMoveError",
    "InvalidPositionCommandError",
    "PoolError",
    "PoolShutdownError",
]
