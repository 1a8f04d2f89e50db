"""
Simulation driver.

Folds a sequence of command lines into a final robot state:

    state = None
    for line in lines:
        command, args = parse(line)
        state = COMMANDS.get(command, keep)(state, args)

Input is consumed lazily, one line at a time, so any iterable of
strings works: a list, an open file, ``sys.stdin``, ``io.StringIO``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import IO

from robot_sim.engine.commands import build_commands
from robot_sim.engine.parser import parse
from robot_sim.engine.protocols import Reporter
from robot_sim.models.robot import RobotState

logger = logging.getLogger(__name__)


class CommandEngine:
    """Owns the robot state for one simulation and dispatches commands.

    Attributes:
        commands: Command name -> handler table (PLACE, MOVE, LEFT,
            RIGHT, REPORT)

    Example:
        >>> engine = CommandEngine(reporter=CollectingReporter())
        >>> engine.execute("PLACE 0,0,NORTH")
        >>> engine.execute("MOVE")
        >>> engine.state
        RobotState(position=Position(x=0, y=1), heading=<Heading.NORTH: 'NORTH'>)
    """

    def __init__(self, reporter: Reporter | None = None):
        """Start with no robot placed.

        Args:
            reporter: Destination for REPORT lines (stdout if None)
        """
        self.commands = build_commands(reporter)
        self._state: RobotState | None = None
        self.lines_processed = 0

    @property
    def state(self) -> RobotState | None:
        """Current robot state, None until a valid PLACE."""
        return self._state

    def execute(self, line: str) -> None:
        """Parse one line and apply its command to the current state.

        Unknown command names (including blank lines) leave the state
        untouched.
        """
        self.lines_processed += 1
        command, args = parse(line)

        handler = self.commands.get(command)
        if handler is None:
            if command:
                logger.debug("Ignoring unknown command %r", command)
            return

        logger.debug("Line %d: %s %s", self.lines_processed, command, args)
        self._state = handler(self._state, args)

    def run(self, lines: Iterable[str]) -> RobotState | None:
        """Execute every line in order and return the resulting state.

        Continues from the engine's current state; use a fresh engine (or
        the module-level ``run``) for an independent simulation.
        """
        for line in lines:
            self.execute(line)

        logger.debug(
            "Simulation finished after %d lines: %s", self.lines_processed, self._state
        )
        return self._state


def run(lines: Iterable[str], reporter: Reporter | None = None) -> RobotState | None:
    """Run a fresh simulation over ``lines``.

    Args:
        lines: Command lines, consumed one at a time
        reporter: Destination for REPORT lines (stdout if None)

    Returns:
        The final state, or None if the robot never ended up placed
        (including for empty input)
    """
    return CommandEngine(reporter=reporter).run(lines)


def run_simulation(stream: IO[str], reporter: Reporter | None = None) -> RobotState | None:
    """Run a fresh simulation reading lines from a text stream.

    Example:
        >>> run_simulation(io.StringIO("PLACE 0,0,NORTH\\nMOVE\\nREPORT\\n"))
        x = 0, y = 1, direction = NORTH
        RobotState(position=Position(x=0, y=1), heading=<Heading.NORTH: 'NORTH'>)
    """
    return run(stream, reporter=reporter)
