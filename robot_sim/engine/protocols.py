"""
Protocol definitions for the command engine.

Component Flow:
    Input line -> parse -> ParsedLine(command, args)
                                 |
                                 v
                   CommandHandler(current, args) -> next state
                                 |
                                 v (REPORT only)
                          Reporter.report(line)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from robot_sim.models.robot import RobotState


@runtime_checkable
class CommandHandler(Protocol):
    """Pure state transition for one command.

    Handlers take the current state (None if the robot is not placed)
    and the command's arguments, and return the next state. They never
    raise: malformed arguments fall back to a defined state instead.
    """

    def __call__(
        self,
        current: "RobotState | None",
        args: Sequence[str],
    ) -> "RobotState | None":
        ...


@runtime_checkable
class Reporter(Protocol):
    """Destination for REPORT output lines.

    Example implementations:
        - EchoReporter: writes to stdout (or a given file)
        - CollectingReporter: keeps lines in memory
    """

    def report(self, line: str) -> None:
        """Emit one report line (without trailing newline)."""
        ...
