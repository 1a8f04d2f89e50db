"""
REPORT output: formatting and reporters.
"""

from __future__ import annotations

from typing import IO

import click

from robot_sim.config import NOT_PLACED_MESSAGE, REPORT_TEMPLATE
from robot_sim.models.robot import RobotState


def format_report(state: RobotState | None) -> str:
    """Render the REPORT line for a state.

    Example:
        >>> format_report(RobotState.at(0, 1, Heading.NORTH))
        'x = 0, y = 1, direction = NORTH'
        >>> format_report(None)
        'Robot has not been validly placed yet'
    """
    if state is None:
        return NOT_PLACED_MESSAGE
    return REPORT_TEMPLATE.format(x=state.x, y=state.y, heading=state.heading.value)


class EchoReporter:
    """Writes report lines with click.echo (stdout unless a file is given)."""

    def __init__(self, file: IO[str] | None = None):
        self.file = file

    def report(self, line: str) -> None:
        click.echo(line, file=self.file)


class CollectingReporter:
    """Keeps report lines in memory, in order."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def report(self, line: str) -> None:
        self.lines.append(line)
