"""Shared pytest configuration for the mock engine and worker pool tests.

Tests that spawn the mock engine as a separate process are marked
``integration`` and only run with ``--integration``; everything else drives
sessions and pools in-process.
"""

import pytest


def pytest_addoption(parser: pytest.Parser) -> None:
    """Add the flag enabling engine subprocess tests."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="also run tests that spawn `python -m mock_engine` over pipes",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register the subprocess marker."""
    config.addinivalue_line(
        "markers", "integration: drives a mock engine subprocess over stdin/stdout"
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Leave engine subprocess tests out of the default in-process run."""
    if config.getoption("--integration"):
        return

    skip_subprocess = pytest.mark.skip(reason="spawns an engine process; pass --integration")
    for item in items:
        if item.get_closest_marker("integration") is not None:
            item.add_marker(skip_subprocess)
