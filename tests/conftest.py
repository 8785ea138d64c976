"""Pytest configuration and shared fixtures for cabinet layout tests."""

from __future__ import annotations

import pytest

from modcab.application.config import SolutionConfig, UnitConfig
from modcab.domain.value_objects import LayoutMode, UnitKind, UnitSpec


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: tests exercising bundled scenarios end to end"
    )


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def tv_wall_units() -> tuple[UnitSpec, ...]:
    """Elastic cabinets either side of a fixed TV space."""
    return (
        UnitSpec("left", UnitKind.CABINET_DOOR, width=450, is_elastic=True),
        UnitSpec("tv", UnitKind.TV_SPACE, width=1600),
        UnitSpec("right", UnitKind.CABINET_DOOR, width=450, is_elastic=True),
    )


# =============================================================================
# Configuration fixtures
# =============================================================================


@pytest.fixture
def linear_config() -> SolutionConfig:
    """Three-unit linear configuration, 3000 mm wide."""
    return SolutionConfig(
        name="TV wall",
        total_width=3000,
        height=2400,
        depth=450,
        units=(
            UnitConfig(id="u_1", type=UnitKind.CABINET_DOOR, width=450, is_elastic=True),
            UnitConfig(id="u_2", type=UnitKind.TV_SPACE, width=1600),
            UnitConfig(id="u_3", type=UnitKind.CABINET_DOOR, width=450, is_elastic=True),
        ),
    )


@pytest.fixture
def l_shape_config() -> SolutionConfig:
    """L-shaped configuration with a corner unit in the middle."""
    return SolutionConfig(
        layout_mode=LayoutMode.L_SHAPE,
        total_width=3600,
        height=2200,
        depth=580,
        units=(
            UnitConfig(id="a", type=UnitKind.DRAWERS, width=600),
            UnitConfig(id="b", width=600, is_elastic=True),
            UnitConfig(id="c", type=UnitKind.CORNER, width=900),
            UnitConfig(id="d", type=UnitKind.OPEN_SHELF, width=600, is_elastic=True),
        ),
    )
