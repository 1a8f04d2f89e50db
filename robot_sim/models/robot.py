"""
Robot state models.

The robot is either absent (None, not placed yet) or a RobotState:
a position on the board plus the heading it faces. States are frozen
values; every command produces a new one instead of mutating the old.

Example:
    >>> robot = RobotState.at(0, 0, Heading.NORTH)
    >>> robot.with_heading(robot.heading.turned_right()).heading
    <Heading.EAST: 'EAST'>
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator

from robot_sim.config import BOARD_SIZE


def is_valid_pos(x: int, y: int) -> bool:
    """Check if (x, y) lies on the board."""
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


class Heading(str, Enum):
    """Compass direction the robot faces.

    Members are declared in clockwise order; rotation walks this order.
    The value is the literal token used by PLACE and REPORT.
    """

    NORTH = "NORTH"
    EAST = "EAST"
    SOUTH = "SOUTH"
    WEST = "WEST"

    @property
    def delta(self) -> tuple[int, int]:
        """Unit displacement (dx, dy) for one step in this heading."""
        return _DELTAS[self]

    def turned_left(self) -> Heading:
        """Heading one step counter-clockwise."""
        order = list(Heading)
        return order[(order.index(self) - 1) % len(order)]

    def turned_right(self) -> Heading:
        """Heading one step clockwise."""
        order = list(Heading)
        return order[(order.index(self) + 1) % len(order)]


_DELTAS: dict[Heading, tuple[int, int]] = {
    Heading.NORTH: (0, 1),
    Heading.EAST: (1, 0),
    Heading.SOUTH: (0, -1),
    Heading.WEST: (-1, 0),
}


def heading_from_str(token: str) -> Heading | None:
    """Resolve an exact, case-sensitive heading token.

    Returns:
        The matching Heading, or None if the token names no heading
    """
    try:
        return Heading(token)
    except ValueError:
        return None


class Position(BaseModel):
    """Integer board coordinate.

    A Position may lie off the board (e.g. a candidate step past an edge);
    only RobotState enforces the board bounds.
    """

    model_config = ConfigDict(frozen=True)

    x: int
    y: int

    @property
    def on_board(self) -> bool:
        return is_valid_pos(self.x, self.y)

    def translated(self, dx: int, dy: int) -> Position:
        return Position(x=self.x + dx, y=self.y + dy)


class RobotState(BaseModel):
    """A placed robot: where it stands and which way it faces.

    Attributes:
        position: Board coordinate, always on the board
        heading: Direction the robot faces

    Raises:
        pydantic.ValidationError: If constructed with an off-board position
    """

    model_config = ConfigDict(frozen=True)

    position: Position
    heading: Heading

    @model_validator(mode="after")
    def check_on_board(self) -> "RobotState":
        """Ensure the robot never stands off the board."""
        if not self.position.on_board:
            raise ValueError(
                f"position ({self.position.x}, {self.position.y}) is off the "
                f"{BOARD_SIZE}x{BOARD_SIZE} board"
            )
        return self

    @classmethod
    def at(cls, x: int, y: int, heading: Heading) -> RobotState:
        return cls(position=Position(x=x, y=y), heading=heading)

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    def with_heading(self, heading: Heading) -> RobotState:
        return RobotState(position=self.position, heading=heading)

    def with_position(self, position: Position) -> RobotState:
        return RobotState(position=position, heading=self.heading)


def step(robot: RobotState) -> Position:
    """Position one step ahead of the robot, without checking the board.

    Example:
        >>> step(RobotState.at(0, 0, Heading.SOUTH))
        Position(x=0, y=-1)
    """
    dx, dy = robot.heading.delta
    return robot.position.translated(dx, dy)
