"""Immutable editing operations on a SolutionConfig.

Every function takes a configuration snapshot and returns a new one. The
input is never modified, so callers can keep the previous snapshot around
(e.g. to compare layouts before and after an edit).
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import ValidationError as PydanticValidationError

from modcab.application.config.loader import (
    ConfigError,
    extract_validation_errors,
    format_validation_error_message,
)
from modcab.application.config.schemas import (
    DEFAULT_TEXTURE_ID,
    SolutionConfig,
    UnitConfig,
)
from modcab.domain.value_objects import LayoutMode, UnitKind

# Defaults for a unit added without explicit configuration
NEW_UNIT_WIDTH = 450.0
NEW_UNIT_SHELF_COUNT = 3


class UnitNotFoundError(Exception):
    """Raised when an edit addresses a unit id that is not in the configuration."""

    def __init__(self, unit_id: str) -> None:
        self.unit_id = unit_id
        super().__init__(f"Unit not found: {unit_id}")


def _rebuild(config: SolutionConfig, **changes: Any) -> SolutionConfig:
    """Build a validated copy of config with the given top-level changes.

    model_copy(update=...) skips validation, so the merged data is
    validated explicitly.
    """
    data = config.model_dump()
    data.update(changes)
    try:
        return SolutionConfig.model_validate(data)
    except PydanticValidationError as e:
        details = extract_validation_errors(e)
        raise ConfigError(
            message=format_validation_error_message(details),
            error_type="validation",
            details=details,
        ) from e


def _require_index(config: SolutionConfig, unit_id: str) -> int:
    index = config.index_of(unit_id)
    if index is None:
        raise UnitNotFoundError(unit_id)
    return index


def next_unit_id(config: SolutionConfig, prefix: str = "u_") -> str:
    """Return the first id of the form <prefix><n> not used by any unit."""
    used = {u.id for u in config.units}
    n = 1
    while f"{prefix}{n}" in used:
        n += 1
    return f"{prefix}{n}"


def new_unit(unit_id: str) -> UnitConfig:
    """Create the default unit added by add_unit."""
    return UnitConfig(
        id=unit_id,
        name="New cabinet",
        type=UnitKind.CABINET_DOOR,
        width=NEW_UNIT_WIDTH,
        is_elastic=True,
        texture_id=DEFAULT_TEXTURE_ID,
        shelf_count=NEW_UNIT_SHELF_COUNT,
        has_door=False,
    )


def set_total_width(config: SolutionConfig, total_width: float) -> SolutionConfig:
    """Return a copy with a new overall width."""
    return _rebuild(config, total_width=total_width)


def set_dimensions(
    config: SolutionConfig,
    *,
    height: float | None = None,
    depth: float | None = None,
) -> SolutionConfig:
    """Return a copy with height and/or depth replaced.

    Only arguments that are not None are applied.
    """
    changes: dict[str, float] = {}
    if height is not None:
        changes["height"] = height
    if depth is not None:
        changes["depth"] = depth
    return _rebuild(config, **changes)


def set_layout_mode(config: SolutionConfig, mode: LayoutMode | str) -> SolutionConfig:
    """Return a copy with a different layout mode."""
    return _rebuild(config, layout_mode=mode)


def add_unit(config: SolutionConfig, unit: UnitConfig | None = None) -> SolutionConfig:
    """Append a unit to the right end of the run.

    Args:
        config: Current configuration.
        unit: Unit to append. If None, a default elastic door cabinet with
            the next free id is created.

    Raises:
        ConfigError: If the unit's id is already used.
    """
    if unit is None:
        unit = new_unit(next_unit_id(config))
    return _rebuild(config, units=[*config.model_dump()["units"], unit.model_dump()])


def remove_unit(config: SolutionConfig, unit_id: str) -> SolutionConfig:
    """Return a copy without the given unit.

    Raises:
        UnitNotFoundError: If no unit has the given id.
    """
    index = _require_index(config, unit_id)
    units = list(config.units)
    del units[index]
    return _rebuild(config, units=[u.model_dump() for u in units])


def update_unit(config: SolutionConfig, unit_id: str, **changes: Any) -> SolutionConfig:
    """Return a copy with fields of one unit replaced.

    Example:
        >>> config = update_unit(config, "u_2", width=1800, is_elastic=False)

    Raises:
        UnitNotFoundError: If no unit has the given id.
        ConfigError: If the changed unit or configuration is invalid.
    """
    index = _require_index(config, unit_id)
    units = [u.model_dump() for u in config.units]
    units[index].update(changes)
    return _rebuild(config, units=units)


def move_unit(
    config: SolutionConfig,
    unit_id: str,
    direction: Literal["left", "right"],
) -> SolutionConfig:
    """Swap a unit with its left or right neighbour.

    Moving the first unit left or the last unit right leaves the order
    unchanged.

    Raises:
        UnitNotFoundError: If no unit has the given id.
        ValueError: If direction is not "left" or "right".
    """
    if direction not in ("left", "right"):
        raise ValueError(f"direction must be 'left' or 'right', got '{direction}'")

    index = _require_index(config, unit_id)
    target = index - 1 if direction == "left" else index + 1
    if target < 0 or target >= len(config.units):
        return config

    units = list(config.units)
    units[index], units[target] = units[target], units[index]
    return _rebuild(config, units=[u.model_dump() for u in units])
