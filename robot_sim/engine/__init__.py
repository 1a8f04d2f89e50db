"""Command engine: line parsing, command handlers and the simulation driver.

Import directly from submodules:
    from robot_sim.engine.parser import parse
    from robot_sim.engine.commands import place, move, left, right
    from robot_sim.engine.simulation import CommandEngine, run, run_simulation
"""
