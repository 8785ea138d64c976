"""Bundled scenario presets and the ScenarioManager for accessing them."""

from modcab.application.scenarios.manager import (
    DEFAULT_SCENARIO_ID,
    SCENARIO_METADATA,
    Scenario,
    ScenarioManager,
    ScenarioNotFoundError,
)

__all__ = [
    "DEFAULT_SCENARIO_ID",
    "SCENARIO_METADATA",
    "Scenario",
    "ScenarioManager",
    "ScenarioNotFoundError",
]
