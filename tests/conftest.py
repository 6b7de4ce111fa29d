"""Pytest configuration and shared fixtures for trim planning tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from trimplan.application import OptimizeCutPlanCommand
from trimplan.domain import Measurement

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: tests that exercise the CLI or REST API end to end"
    )
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding the JSON configuration fixtures."""
    return FIXTURES_PATH


@pytest.fixture
def optimize_command() -> OptimizeCutPlanCommand:
    """Create an OptimizeCutPlanCommand with the default optimizer."""
    return OptimizeCutPlanCommand()


@pytest.fixture
def standard_lengths() -> list[float]:
    """The usual 8', 10' and 12' stock lengths."""
    return [96.0, 120.0, 144.0]


@pytest.fixture
def house_measurements() -> list[Measurement]:
    """A small house worth of measurements across three rooms."""
    return [
        Measurement("LR-N", 132.25, room="Living Room", wall="North"),
        Measurement("LR-E", 83.3125, room="Living Room", wall="East"),
        Measurement("HALL", 45.5, room="Hallway"),
        Measurement("BED-W", 60.0, room="Bedroom", wall="West"),
    ]
