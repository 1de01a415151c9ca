"""
Unified exception hierarchy for the chess harness services.

Shared by the mock engine session and the worker pool so that the harness
can tell rejected session input apart from pool lifecycle misuse.
"""

from __future__ import annotations


class HarnessError(Exception):
    """Base exception for all harness service errors."""


# =============================================================================
# Session Exceptions (mock engine)
# =============================================================================


class SessionError(HarnessError):
    """Base exception for input rejected by a protocol session."""


class InvalidFenError(SessionError):
    """Invalid FEN position provided."""


class IllegalMoveError(SessionError):
    """Malformed or illegal move in a position command."""


class InvalidPositionCommandError(SessionError):
    """Position command without a startpos or fen keyword."""


# =============================================================================
# Pool Exceptions (worker pool)
# =============================================================================


class PoolError(HarnessError):
    """Base exception for worker pool errors."""


class PoolShutdownError(PoolError):
    """Pool is not running (never started, or already shut down)."""
