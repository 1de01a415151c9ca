"""Pytest configuration for mock engine tests."""

import io
import sys
from pathlib import Path

import pytest

# Add the src directories to the Python path
services_path = Path(__file__).parent.parent.parent
sys.path.insert(0, str(services_path / "common" / "src"))
sys.path.insert(0, str(services_path / "engine" / "src"))


# Sample FEN positions for testing
STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
CHECKMATED_FEN = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"  # Fool's mate
STALEMATE_FEN = "7k/5Q2/6K1/8/8/8/8/8 b - - 0 1"
ITALIAN_FEN = "r1bqkb1r/pppp1ppp/2n2n2/4p3/2B1P3/5N2/PPPP1PPP/RNBQK2R w KQkq - 4 4"
MATE_IN_ONE_FEN = "k7/2K5/8/8/8/8/8/1R6 w - - 0 1"  # Rb1-a1#


@pytest.fixture
def starting_fen() -> str:
    return STARTING_FEN


@pytest.fixture
def checkmated_fen() -> str:
    return CHECKMATED_FEN


@pytest.fixture
def stalemate_fen() -> str:
    return STALEMATE_FEN


@pytest.fixture
def italian_fen() -> str:
    return ITALIAN_FEN


@pytest.fixture
def mate_in_one_fen() -> str:
    return MATE_IN_ONE_FEN


@pytest.fixture
def engine_config():
    """Create a test engine configuration."""
    from mock_engine.config import EngineConfig

    return EngineConfig(name="engine", seed=42, strict=False)


@pytest.fixture
def output() -> io.StringIO:
    """Capture protocol output."""
    return io.StringIO()


@pytest.fixture
def session(engine_config, output):
    """Create a session writing to the captured output."""
    from mock_engine.session import Session

    return Session(engine_config, output=output)
