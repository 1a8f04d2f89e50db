"""
robot_sim - Toy robot on a square board, driven by text commands.

Import directly from submodules:
    from robot_sim.engine.parser import parse
    from robot_sim.engine.simulation import CommandEngine, run
    from robot_sim.models.robot import RobotState, Heading
"""

__version__ = "0.1.0"
