"""Pytest configuration for worker pool tests."""

import sys
from pathlib import Path

import pytest

# Add the src directories to the Python path
services_path = Path(__file__).parent.parent.parent
sys.path.insert(0, str(services_path / "common" / "src"))
sys.path.insert(0, str(services_path / "engine" / "src"))
sys.path.insert(0, str(services_path / "workers" / "src"))


@pytest.fixture
def pool_config():
    """Create a test pool configuration."""
    from worker_pool.config import PoolConfig

    return PoolConfig(size=4)


@pytest.fixture
def pool(pool_config):
    """Create a started pool, shut down after the test."""
    from worker_pool.pool import WorkerPool

    pool = WorkerPool(pool_config)
    pool.start()
    yield pool
    pool.shutdown()
