"""
Configuration for the mock UCI engine.

All configuration can be set via environment variables with sensible defaults.
"""

import os
from dataclasses import dataclass, field


def _env_flag(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class EngineConfig:
    """Configuration for a single mock engine session."""

    name: str = field(default_factory=lambda: os.environ.get("MOCK_ENGINE_NAME", "engine"))
    seed: int = field(default_factory=lambda: int(os.environ.get("MOCK_ENGINE_SEED", "0")))
    # End the session on the first rejected position command
    strict: bool = field(default_factory=lambda: _env_flag("MOCK_ENGINE_STRICT"))
    log_level: str = field(
        default_factory=lambda: os.environ.get("MOCK_ENGINE_LOG_LEVEL", "WARNING")
    )
