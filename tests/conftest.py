"""
Shared pytest fixtures for robot_sim tests.

This module provides:
- robot_at: factory for placed RobotState values
- reporter: in-memory reporter capturing REPORT lines
- engine: CommandEngine wired to that reporter
- Custom markers for test categorization
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from robot_sim.engine.reporter import CollectingReporter
from robot_sim.engine.simulation import CommandEngine
from robot_sim.models.robot import Heading, RobotState


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")


# =============================================================================
# State Fixtures
# =============================================================================


@pytest.fixture
def robot_at() -> Callable[[int, int, Heading], RobotState]:
    """Factory for placed robots."""

    def _create(x: int, y: int, heading: Heading = Heading.NORTH) -> RobotState:
        return RobotState.at(x, y, heading)

    return _create


@pytest.fixture
def reporter() -> CollectingReporter:
    """Reporter that keeps REPORT lines in memory."""
    return CollectingReporter()


@pytest.fixture
def engine(reporter: CollectingReporter) -> CommandEngine:
    """Fresh engine with no robot placed."""
    return CommandEngine(reporter=reporter)
