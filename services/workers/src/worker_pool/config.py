"""
Configuration for the worker pool.

All configuration can be set via environment variables with sensible defaults.
"""

import os
from dataclasses import dataclass, field


@dataclass
class PoolConfig:
    """Configuration for the outcome-tallying worker pool."""

    size: int = field(default_factory=lambda: int(os.environ.get("WORKER_POOL_SIZE", "1")))
