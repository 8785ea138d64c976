"""Pydantic models for cabinet configurator configuration.

A SolutionConfig is an immutable snapshot of everything the user has
configured: overall dimensions, layout mode and the ordered units. Editing
operations build new snapshots rather than mutating an existing one.
"""

from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from modcab.domain.value_objects import LayoutMode, UnitKind

# Height used for a top cabinet when none is given
DEFAULT_TOP_CABINET_HEIGHT = 500.0

DEFAULT_TEXTURE_ID = "walnut_dark"


class UnitConfig(BaseModel):
    """Configuration for a single cabinet unit.

    Attributes:
        id: Unique identifier within the configuration.
        name: Display name.
        type: Unit kind.
        width: Nominal width in millimeters (advisory when elastic).
        is_elastic: Fill leftover width equally with other elastic units.
        has_top_cabinet: Whether an upper cabinet sits above this unit.
        top_cabinet_height: Height of the upper cabinet in millimeters.
        texture_id: Identifier of the surface texture used by the renderer.
        shelf_count: Number of internal shelves.
        has_door: Whether the door is mounted.
        door_style: Door style for the renderer.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(..., min_length=1)
    name: str = ""
    type: UnitKind = UnitKind.CABINET_DOOR
    width: float = Field(..., ge=0)
    is_elastic: bool = False
    has_top_cabinet: bool = False
    top_cabinet_height: float | None = Field(default=None, gt=0)
    texture_id: str = DEFAULT_TEXTURE_ID
    shelf_count: int = Field(default=0, ge=0)
    has_door: bool = False
    door_style: Literal["flat", "shaker", "glass"] = "flat"

    @property
    def effective_top_cabinet_height(self) -> float:
        """Height of the top cabinet, 0 when the unit has none."""
        if not self.has_top_cabinet:
            return 0.0
        return self.top_cabinet_height or DEFAULT_TOP_CABINET_HEIGHT


class SolutionConfig(BaseModel):
    """Root configuration for a run of cabinet units.

    Attributes:
        name: Optional display name.
        layout_mode: Straight run or L-shape.
        total_width: Overall available width in millimeters.
        height: Overall height in millimeters.
        depth: Overall depth in millimeters.
        units: Units in left-to-right order.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str | None = None
    layout_mode: LayoutMode = LayoutMode.LINEAR
    total_width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    depth: float = Field(..., gt=0)
    units: tuple[UnitConfig, ...] = ()

    @field_validator("units")
    @classmethod
    def validate_unique_unit_ids(
        cls, v: tuple[UnitConfig, ...]
    ) -> tuple[UnitConfig, ...]:
        """Reject configurations where two units share an id."""
        seen: set[str] = set()
        duplicates: list[str] = []
        for unit in v:
            if unit.id in seen and unit.id not in duplicates:
                duplicates.append(unit.id)
            seen.add(unit.id)
        if duplicates:
            raise ValueError(f"Duplicate unit ids: {', '.join(duplicates)}")
        return v

    def find_unit(self, unit_id: str) -> UnitConfig | None:
        """Return the unit with the given id, or None."""
        for unit in self.units:
            if unit.id == unit_id:
                return unit
        return None

    def index_of(self, unit_id: str) -> int | None:
        """Return the position of the unit with the given id, or None."""
        for i, unit in enumerate(self.units):
            if unit.id == unit_id:
                return i
        return None
