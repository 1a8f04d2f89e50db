"""
Data models for the robot simulator.
"""

from robot_sim.models.command import ParsedLine, FallbackReason
from robot_sim.models.robot import (
    Heading,
    Position,
    RobotState,
    heading_from_str,
    is_valid_pos,
    step,
)

__all__ = [
    "Heading",
    "ParsedLine",
    "FallbackReason",
    "Position",
    "RobotState",
    "heading_from_str",
    "is_valid_pos",
    "step",
]
