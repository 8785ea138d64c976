"""Conversion from configuration models to domain value objects."""

from __future__ import annotations

from modcab.application.config.schemas import SolutionConfig, UnitConfig
from modcab.domain.value_objects import LayoutRequest, UnitSpec


def unit_config_to_spec(unit: UnitConfig) -> UnitSpec:
    """Convert a UnitConfig to the UnitSpec the layout functions consume."""
    return UnitSpec(
        id=unit.id,
        kind=unit.type,
        width=unit.width,
        is_elastic=unit.is_elastic,
    )


def config_to_unit_specs(config: SolutionConfig) -> tuple[UnitSpec, ...]:
    """Convert all units of a configuration, keeping their order."""
    return tuple(unit_config_to_spec(u) for u in config.units)


def config_to_layout_request(config: SolutionConfig) -> LayoutRequest:
    """Build a LayoutRequest from a configuration snapshot."""
    return LayoutRequest(
        total_width=config.total_width,
        units=config_to_unit_specs(config),
    )
