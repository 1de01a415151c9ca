"""
Thread-safe worker pool that tallies game outcomes.

Each harness worker owns one slot and reports its finished games here.
Results from all workers are folded into a global win/loss/draw tally
under a single pool lock, so concurrent reports are never lost.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import NamedTuple

from common import PoolShutdownError

from .config import PoolConfig

logger = logging.getLogger(__name__)

__all__ = ["Deadline", "Outcome", "PoolShutdownError", "Tally", "Worker", "WorkerPool"]


def _monotonic_ms() -> int:
    return time.monotonic_ns() // 1_000_000


class Outcome(IntEnum):
    """Game outcome, from the first engine's point of view."""

    WIN = 0
    LOSS = 1
    DRAW = 2


class Tally(NamedTuple):
    """Win/loss/draw counts."""

    wins: int = 0
    losses: int = 0
    draws: int = 0

    @property
    def games(self) -> int:
        return self.wins + self.losses + self.draws


@dataclass
class Deadline:
    """
    Time-control watchdog state for one worker.

    The worker arms the deadline before waiting on an engine and clears it
    afterwards; a monitoring thread polls overdue(). Access is guarded by
    the deadline's own lock, never by the pool lock.
    """

    clock: Callable[[], int] = _monotonic_ms
    engine_name: str = ""
    description: str = ""
    time_limit: int = 0  # Absolute, in clock milliseconds
    armed: bool = False
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def set(self, engine_name: str, time_limit: int, description: str) -> None:
        """Arm the deadline for an engine operation."""
        with self._lock:
            self.armed = True
            self.engine_name = engine_name
            self.time_limit = time_limit
            self.description = description

    def clear(self) -> None:
        """Disarm the deadline."""
        with self._lock:
            self.armed = False

    def overdue(self, now: int | None = None) -> int:
        """Milliseconds past the armed deadline, or 0 if not overdue.

        Args:
            now: Current clock value in milliseconds (reads the clock if None).
        """
        with self._lock:
            if not self.armed:
                return 0
            now = self.clock() if now is None else now
            return max(0, now - self.time_limit)


@dataclass
class Worker:
    """One pool slot: outcome counters plus its deadline."""

    id: int
    wld: list[int] = field(default_factory=lambda: [0, 0, 0])
    deadline: Deadline = field(default_factory=Deadline)

    @property
    def tally(self) -> Tally:
        return Tally(*self.wld)


class WorkerPool:
    """
    Thread-safe pool of worker slots.

    All slots are allocated together on start() and released together on
    shutdown(). record() is the only way slots are mutated; it serializes
    every update behind one pool-wide lock.

    Usage:
        pool = WorkerPool(PoolConfig(size=4))
        pool.start()

        # From worker thread i, once per finished game
        wins, losses, draws = pool.record(i, Outcome.WIN)

        pool.shutdown()
    """

    def __init__(self, config: PoolConfig | None = None) -> None:
        """Initialize the worker pool.

        Args:
            config: Pool configuration (size).
        """
        self._config = config or PoolConfig()

        self._workers: list[Worker] = []
        self._lock = threading.Lock()
        self._shutdown = False
        self._started = False

    @property
    def size(self) -> int:
        """Get the configured pool size."""
        return self._config.size

    @property
    def is_started(self) -> bool:
        """Check if the pool has been started."""
        return self._started

    @property
    def is_shutdown(self) -> bool:
        """Check if the pool has been shut down."""
        return self._shutdown

    @property
    def workers(self) -> tuple[Worker, ...]:
        """Snapshot of the allocated workers (empty unless started)."""
        with self._lock:
            return tuple(self._workers)

    def worker(self, index: int) -> Worker:
        """Get the worker in slot `index`."""
        return self._workers[index]

    def start(self) -> None:
        """Allocate all worker slots with zeroed counters.

        Raises:
            PoolShutdownError: If the pool has already been shut down.
        """
        if self._started:
            logger.warning("Pool already started")
            return

        if self._shutdown:
            raise PoolShutdownError("Pool has been shut down")

        logger.info(f"Starting worker pool with {self._config.size} workers")

        with self._lock:
            self._workers = [Worker(id=i) for i in range(self._config.size)]
            self._started = True

    def shutdown(self) -> None:
        """Release all worker slots. Safe to call more than once."""
        if self._shutdown:
            return

        logger.info("Shutting down worker pool")
        self._shutdown = True

        with self._lock:
            final = self._totals()
            self._workers.clear()
            self._started = False

        logger.info(
            f"Worker pool shutdown complete: "
            f"+{final.wins} -{final.losses} ={final.draws}"
        )

    def record(self, index: int, outcome: Outcome | int) -> Tally:
        """Record one game outcome for a worker and return the global tally.

        Args:
            index: Slot index of the reporting worker.
            outcome: Outcome.WIN, Outcome.LOSS or Outcome.DRAW.

        Returns:
            Totals over all workers, including this result.

        Raises:
            PoolShutdownError: If the pool is not running.
            IndexError: If index does not name a slot.
        """
        outcome = Outcome(outcome)

        with self._lock:
            if not self._started:
                raise PoolShutdownError("Pool not started")
            if not 0 <= index < len(self._workers):
                raise IndexError(f"Worker index {index} out of range")
            self._workers[index].wld[outcome] += 1
            totals = self._totals()

        logger.debug(f"Worker {index} recorded {outcome.name}: {totals}")
        return totals

    def tally(self) -> Tally:
        """Get the global tally without recording anything."""
        with self._lock:
            return self._totals()

    def _totals(self) -> Tally:
        """Sum counters over all workers. Caller must hold the pool lock."""
        wld = [0, 0, 0]
        for worker in self._workers:
            for j in range(3):
                wld[j] += worker.wld[j]
        return Tally(*wld)
