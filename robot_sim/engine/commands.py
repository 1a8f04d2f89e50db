"""
Command handlers for the robot simulator.

Every handler is a pure transition ``(current, args) -> next`` where
either state may be None (robot not placed). Handlers never raise on
bad input; each falls back to one of two outcomes:

    keep    - return ``current`` unchanged (bad argument count, off-board
              placement, unknown heading, move blocked at an edge)
    clear   - return None (PLACE with a coordinate that is not an integer)

The command set is closed: PLACE, MOVE, LEFT, RIGHT, REPORT.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from robot_sim.engine.parser import parse_int
from robot_sim.engine.protocols import CommandHandler, Reporter
from robot_sim.engine.reporter import EchoReporter, format_report
from robot_sim.models.command import FallbackReason
from robot_sim.models.robot import RobotState, heading_from_str, is_valid_pos, step

logger = logging.getLogger(__name__)

PLACE_ARG_COUNT = 3


def place(current: RobotState | None, args: Sequence[str]) -> RobotState | None:
    """Place the robot at (x, y) facing a heading. Takes args (x, y, heading).

    A valid placement always replaces the current robot. Extra args are
    ignored.

    Falls back to:
        - ``current`` if fewer than 3 args, the position is off the board,
          or the heading is not NORTH/EAST/SOUTH/WEST
        - None if x or y is not an integer
    """
    if len(args) < PLACE_ARG_COUNT:
        logger.debug("PLACE ignored (%s): %r", FallbackReason.TOO_FEW_ARGS.value, args)
        return current

    x = parse_int(args[0])
    y = parse_int(args[1])
    if x is None or y is None:
        logger.debug(
            "PLACE cleared robot (%s): %r", FallbackReason.BAD_COORDINATE.value, args
        )
        return None

    if not is_valid_pos(x, y):
        logger.debug("PLACE ignored (%s): (%d, %d)", FallbackReason.OFF_BOARD.value, x, y)
        return current

    heading = heading_from_str(args[2])
    if heading is None:
        logger.debug(
            "PLACE ignored (%s): %r", FallbackReason.UNKNOWN_HEADING.value, args[2]
        )
        return current

    return RobotState.at(x, y, heading)


def move(current: RobotState | None, args: Sequence[str]) -> RobotState | None:
    """Move one step forward. A step off the board is a no-op."""
    if current is None:
        return None

    target = step(current)
    if not target.on_board:
        logger.debug(
            "MOVE ignored (%s): (%d, %d) facing %s",
            FallbackReason.EDGE_BLOCKED.value,
            current.x,
            current.y,
            current.heading.value,
        )
        return current

    return current.with_position(target)


def left(current: RobotState | None, args: Sequence[str]) -> RobotState | None:
    """Turn the robot 90 degrees counter-clockwise."""
    if current is None:
        return None
    return current.with_heading(current.heading.turned_left())


def right(current: RobotState | None, args: Sequence[str]) -> RobotState | None:
    """Turn the robot 90 degrees clockwise."""
    if current is None:
        return None
    return current.with_heading(current.heading.turned_right())


class ReportHandler:
    """REPORT: hands the formatted state to a reporter, state unchanged.

    Example:
        >>> reporter = CollectingReporter()
        >>> report = ReportHandler(reporter)
        >>> report(None, [])
        >>> reporter.lines
        ['Robot has not been validly placed yet']
    """

    def __init__(self, reporter: Reporter | None = None):
        self.reporter = reporter if reporter is not None else EchoReporter()

    def __call__(
        self, current: RobotState | None, args: Sequence[str]
    ) -> RobotState | None:
        self.reporter.report(format_report(current))
        return current


def build_commands(reporter: Reporter | None = None) -> dict[str, CommandHandler]:
    """Build the dispatch table, with REPORT writing to ``reporter``.

    Args:
        reporter: Where REPORT lines go (stdout if None)

    Returns:
        Mapping of command name to handler
    """
    return {
        "PLACE": place,
        "MOVE": move,
        "LEFT": left,
        "RIGHT": right,
        "REPORT": ReportHandler(reporter),
    }

