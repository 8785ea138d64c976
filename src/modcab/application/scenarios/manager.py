"""Scenario manager for bundled preset configurations.

This module provides the ScenarioManager class for listing presets and
loading them as validated SolutionConfig snapshots.
"""

import json
import logging
from importlib import resources

from pydantic import BaseModel, ConfigDict

from modcab.application.config.loader import load_config_from_dict
from modcab.application.config.schemas import SolutionConfig

logger = logging.getLogger(__name__)


class ScenarioNotFoundError(Exception):
    """Raised when a requested scenario does not exist."""

    def __init__(self, scenario_id: str) -> None:
        self.scenario_id = scenario_id
        super().__init__(f"Scenario not found: {scenario_id}")


# Scenario metadata: id -> display name. Order is presentation order.
SCENARIO_METADATA: dict[str, str] = {
    "s_ikea_pax": "IKEA PAX style (two columns)",
    "s_standard": "Standard TV wall (3 m)",
    "s_l_corner": "L-shaped corner storage",
}

DEFAULT_SCENARIO_ID = "s_ikea_pax"


class Scenario(BaseModel):
    """A named preset configuration."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    config: SolutionConfig


class ScenarioManager:
    """Manager for bundled scenario presets.

    Example:
        manager = ScenarioManager()
        for scenario_id, name in manager.list_scenarios():
            print(f"{scenario_id}: {name}")

        config = manager.get_scenario("s_standard").config
    """

    def __init__(self) -> None:
        self._data_package = "modcab.application.scenarios"

    def list_scenarios(self) -> list[tuple[str, str]]:
        """List all available scenarios as (id, name) tuples."""
        return [(sid, name) for sid, name in SCENARIO_METADATA.items()]

    def scenario_exists(self, scenario_id: str) -> bool:
        """Check if a scenario with the given id exists."""
        return scenario_id in SCENARIO_METADATA

    def get_scenario_json(self, scenario_id: str) -> str:
        """Get the raw JSON content of a scenario.

        Raises:
            ScenarioNotFoundError: If the scenario does not exist.
        """
        if scenario_id not in SCENARIO_METADATA:
            raise ScenarioNotFoundError(scenario_id)

        data_file = (
            resources.files(self._data_package)
            .joinpath("data")
            .joinpath(f"{scenario_id}.json")
        )
        try:
            return data_file.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ScenarioNotFoundError(scenario_id) from e

    def get_scenario(self, scenario_id: str) -> Scenario:
        """Load a scenario and validate its configuration.

        Raises:
            ScenarioNotFoundError: If the scenario does not exist.
            ConfigError: If the bundled configuration is invalid.
        """
        data = json.loads(self.get_scenario_json(scenario_id))
        config = load_config_from_dict(data)
        logger.debug(f"Loaded scenario {scenario_id} with {len(config.units)} units")
        return Scenario(
            id=scenario_id,
            name=SCENARIO_METADATA[scenario_id],
            config=config,
        )

    def default_scenario(self) -> Scenario:
        """Return the scenario shown when nothing else is selected."""
        return self.get_scenario(DEFAULT_SCENARIO_ID)
