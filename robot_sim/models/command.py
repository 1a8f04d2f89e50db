"""
Command models.

ParsedLine is what the line parser hands to the engine: a command name
and its comma-separated arguments. FallbackReason names why a PLACE
(or a MOVE) fell back instead of producing a new state, for logging.

Example:
    >>> line = ParsedLine("PLACE", ["1", "2", "NORTH"])
    >>> command, args = line
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class ParsedLine(NamedTuple):
    """One input line split into command name and arguments.

    Attributes:
        command: Command name, empty for a blank line
        args: Trimmed arguments in order; empty strings are kept
    """

    command: str
    args: list[str]


class FallbackReason(str, Enum):
    """Reasons a command fell back instead of producing a new state."""

    # PLACE, keeps previous state
    TOO_FEW_ARGS = "too_few_args"
    OFF_BOARD = "off_board"
    UNKNOWN_HEADING = "unknown_heading"

    # PLACE, clears the robot
    BAD_COORDINATE = "bad_coordinate"

    # MOVE, keeps previous state
    EDGE_BLOCKED = "edge_blocked"
