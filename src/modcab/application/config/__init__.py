"""Configuration schema and loading for cabinet unit layouts.

Public API:
    - SolutionConfig: Root configuration model
    - UnitConfig: Single unit configuration model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - config_to_unit_specs: Convert configuration units to domain UnitSpecs
    - config_to_layout_request: Convert configuration to a domain LayoutRequest

Example:
    >>> from pathlib import Path
    >>> from modcab.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("living-room.json"))
    ...     print(f"{len(config.units)} units across {config.total_width} mm")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from modcab.application.config.adapter import (
    config_to_layout_request,
    config_to_unit_specs,
    unit_config_to_spec,
)
from modcab.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from modcab.application.config.schemas import (
    DEFAULT_TEXTURE_ID,
    DEFAULT_TOP_CABINET_HEIGHT,
    SolutionConfig,
    UnitConfig,
)

__all__ = [
    "ConfigError",
    "DEFAULT_TEXTURE_ID",
    "DEFAULT_TOP_CABINET_HEIGHT",
    "SolutionConfig",
    "UnitConfig",
    "config_to_layout_request",
    "config_to_unit_specs",
    "load_config",
    "load_config_from_dict",
    "unit_config_to_spec",
]
