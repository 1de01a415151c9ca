"""
UCI session interpreter for the mock engine.

The engine plays random legal moves: it performs no evaluation and exists to
generate realistic protocol traffic for harness tests and benchmarks. Given
the same seed and the same command stream, its output is byte-identical.

Supported commands:
    uci, isready, setoption, position, go, quit

Unknown commands, unknown options and malformed option values are ignored
without a response. Bad position input (unparseable FEN, illegal move,
missing startpos/fen keyword) raises a SessionError; run() rejects that
command and keeps the previous position unless the config is strict.
"""

from __future__ import annotations

import itertools
import logging
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TextIO

import chess

from common import (
    IllegalMoveError,
    InvalidFenError,
    InvalidPositionCommandError,
    SessionError,
)

from .config import EngineConfig
from .prng import SplitMix64

logger = logging.getLogger(__name__)

OPTION_CHESS960 = "UCI_Chess960"

# Scores are drawn uniformly over the signed 16-bit range
SCORE_SPAN = 65536
SCORE_OFFSET = 32768


@dataclass
class RejectedCommand:
    """A command the session refused, with the reason."""

    line: str
    reason: str


@dataclass
class SessionSummary:
    """Result of running a session to completion."""

    commands: int = 0  # Non-empty lines processed
    quit: bool = False  # True if ended by "quit" rather than end of input
    rejected: list[RejectedCommand] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True if no command was rejected."""
        return not self.rejected


def replay_moves(board: chess.Board, moves: Iterable[str]) -> chess.Board:
    """Apply LAN moves to a board in place and return it.

    Args:
        board: Scratch board to advance. Callers must not pass a board
            they still need on failure.
        moves: Moves in long algebraic (UCI) notation.

    Raises:
        IllegalMoveError: If a token is malformed, a null move, or illegal.
    """
    for token in moves:
        try:
            move = board.parse_uci(token)
        except ValueError as e:
            raise IllegalMoveError(f"Illegal move '{token}' in position {board.fen()}") from e
        if not move:
            raise IllegalMoveError(f"Null move '{token}' in position {board.fen()}")
        board.push(move)
    return board


class Session:
    """
    One UCI session: the current board, negotiated options and search depth.

    This class is NOT thread-safe. Each harness worker runs its own session.

    Usage:
        session = Session(EngineConfig(seed=42), output=sys.stdout)
        summary = session.run(sys.stdin)
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        output: TextIO | None = None,
        rng: SplitMix64 | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            config: Engine configuration. Uses defaults if not provided.
            output: Stream receiving protocol lines (defaults to stdout).
            rng: Generator for random variations (defaults to one seeded
                from config.seed).
        """
        self._config = config or EngineConfig()
        self._output = output if output is not None else sys.stdout
        self.rng = rng if rng is not None else SplitMix64(self._config.seed)

        # No position until the first "position" command
        self.board = chess.Board(None)
        self.chess960 = False
        self.depth = 0

    @property
    def config(self) -> EngineConfig:
        """Get the engine configuration."""
        return self._config

    def _send(self, line: str) -> None:
        """Write one protocol line and flush it immediately."""
        self._output.write(line + "\n")
        self._output.flush()

    # -----------------------------------------------------------------------
    # Loop
    # -----------------------------------------------------------------------

    def run(self, lines: Iterable[str]) -> SessionSummary:
        """Process commands until "quit" or end of input.

        Args:
            lines: Command lines, e.g. sys.stdin.

        Returns:
            SessionSummary with the rejected commands.

        Raises:
            SessionError: On the first rejected command if config.strict.
        """
        summary = SessionSummary()

        for raw_line in lines:
            line = raw_line.strip()
            if not line:
                continue

            summary.commands += 1
            try:
                if not self.execute(line):
                    summary.quit = True
                    break
            except SessionError as e:
                if self._config.strict:
                    raise
                logger.warning(f"Rejected command {line!r}: {e}")
                summary.rejected.append(RejectedCommand(line=line, reason=str(e)))

        return summary

    def execute(self, line: str) -> bool:
        """Dispatch a single command line.

        Returns:
            False if the command ends the session, True otherwise.

        Raises:
            SessionError: If a position command is rejected.
        """
        tokens = line.split()
        if not tokens:
            return True

        command, args = tokens[0], tokens[1:]
        logger.debug(f"Command: {line}")

        if command == "uci":
            self.handle_uci()
        elif command == "isready":
            self.handle_isready()
        elif command == "setoption":
            self.handle_setoption(args)
        elif command == "position":
            self.handle_position(args)
        elif command == "go":
            self.handle_go(args)
        elif command == "quit":
            return False

        return True

    # -----------------------------------------------------------------------
    # Command handlers
    # -----------------------------------------------------------------------

    def handle_uci(self) -> None:
        """Identify the engine and advertise its only option."""
        self._send(f"id name {self._config.name}")
        default = "true" if self.chess960 else "false"
        self._send(f"option name {OPTION_CHESS960} type check default {default}")
        self._send("uciok")

    def handle_isready(self) -> None:
        self._send("readyok")

    def handle_setoption(self, args: list[str]) -> None:
        """Apply "setoption name UCI_Chess960 value <v>"; ignore anything else."""
        if (
            len(args) >= 4
            and args[0] == "name"
            and args[1] == OPTION_CHESS960
            and args[2] == "value"
        ):
            self.chess960 = args[3] == "true"
            logger.debug(f"{OPTION_CHESS960} set to {self.chess960}")

    def handle_position(self, args: list[str]) -> None:
        """
        Parse and apply a "position" command.

        Command formats:
            position startpos [moves e2e4 e7e5 ...]
            position fen <FEN> [moves e2e4 e7e5 ...]

        The moves are replayed on a fresh board; the session's board is only
        replaced once the whole list has been applied.

        Raises:
            InvalidPositionCommandError: Neither startpos nor fen given.
            InvalidFenError: The FEN cannot be parsed or is not a legal setup.
            IllegalMoveError: A move token is malformed or illegal.
        """
        if not args:
            raise InvalidPositionCommandError("Position command needs 'startpos' or 'fen'")

        keyword, rest = args[0], args[1:]

        if keyword == "startpos":
            board = chess.Board(chess960=self.chess960)
        elif keyword == "fen":
            fen_tokens = list(itertools.takewhile(lambda t: t != "moves", rest))
            rest = rest[len(fen_tokens) :]
            board = self._parse_fen(" ".join(fen_tokens))
        else:
            raise InvalidPositionCommandError(f"Unknown position type: {keyword}")

        moves = rest[1:] if rest and rest[0] == "moves" else []
        self.board = replay_moves(board, moves)

    def _parse_fen(self, fen: str) -> chess.Board:
        try:
            board = chess.Board(fen, chess960=self.chess960)
        except ValueError as e:
            raise InvalidFenError(f"Illegal FEN '{fen}'") from e
        if not board.is_valid():
            raise InvalidFenError(f"Illegal FEN '{fen}': {board.status()!r}")
        return board

    def handle_go(self, args: list[str]) -> None:
        """Parse "go depth <N>" and run the random search.

        Any other form keeps the previously requested depth, and so does a
        non-integer depth (unlike atoi-style parsing, which would read 0).
        """
        if len(args) >= 2 and args[0] == "depth":
            try:
                self.depth = int(args[1])
            except ValueError:
                logger.debug(f"Ignoring non-integer depth: {args[1]!r}")

        self.search()

    # -----------------------------------------------------------------------
    # Random search
    # -----------------------------------------------------------------------

    def search(self) -> str:
        """
        Emit one "info" line per depth, then "bestmove".

        Each depth draws a fresh random variation from the current position.
        Deepening stops as soon as a variation hits a position without legal
        moves before reaching its full length; that variation is discarded.
        bestmove is the first move of the last printed variation, so a mated
        or stalemated root produces no info line and an empty bestmove.

        Returns:
            The best move in LAN, or "" if there is none.
        """
        pv: list[str] = []

        for depth in range(1, self.depth + 1):
            candidate = self.random_pv(depth)
            if len(candidate) < depth:
                break

            pv = candidate
            score = self.rng.below(SCORE_SPAN) - SCORE_OFFSET
            self._send(f"info depth {depth} score cp {score} pv {' '.join(pv)}")

        best = pv[0] if pv else ""
        self._send(f"bestmove {best}")
        return best

    def random_pv(self, length: int) -> list[str]:
        """Build a random line of up to `length` plies on a copy of the board.

        Returns:
            Moves in LAN; shorter than `length` if a position without legal
            moves is reached.
        """
        board = self.board.copy(stack=False)
        pv: list[str] = []

        for _ in range(length):
            moves = list(board.legal_moves)
            if not moves:
                break

            move = moves[self.rng.below(len(moves))]
            pv.append(board.uci(move))
            board.push(move)

        return pv
