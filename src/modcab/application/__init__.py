"""Application layer - configuration, presets, editing and layout planning."""

from modcab.application.config import ConfigError, SolutionConfig, UnitConfig
from modcab.application.editing import UnitNotFoundError
from modcab.application.scenarios import ScenarioManager, ScenarioNotFoundError
from modcab.application.services import LayoutPlan, LayoutPlanner

__all__ = [
    "ConfigError",
    "LayoutPlan",
    "LayoutPlanner",
    "ScenarioManager",
    "ScenarioNotFoundError",
    "SolutionConfig",
    "UnitConfig",
    "UnitNotFoundError",
]
