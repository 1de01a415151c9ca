"""
Mock UCI engine entry point.

Usage:
    mock-engine [seed]
    python -m mock_engine [seed]

Reads UCI commands from stdin and writes responses to stdout. Diagnostics
go to stderr; stdout carries protocol lines only.
"""

from __future__ import annotations

import logging
import sys

from common import SessionError

from .config import EngineConfig
from .session import Session

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Run one session over stdin/stdout.

    Args:
        argv: Command line arguments (without program name). The first one,
            if given, overrides the configured seed.

    Returns:
        Process exit code: 1 if a strict session hit a rejected command.
    """
    argv = sys.argv[1:] if argv is None else argv
    config = EngineConfig()
    if argv:
        config.seed = int(argv[0])

    logging.basicConfig(level=config.log_level.upper(), stream=sys.stderr)
    logger.info(f"Starting mock engine '{config.name}' with seed {config.seed}")

    session = Session(config, output=sys.stdout)
    try:
        summary = session.run(sys.stdin)
    except SessionError as e:
        logger.error(f"Session aborted: {e}")
        return 1

    logger.info(
        f"Session ended: {summary.commands} commands, {len(summary.rejected)} rejected"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
