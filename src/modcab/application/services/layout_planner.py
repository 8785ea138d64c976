"""Layout planning service.

Combines width allocation and corner splitting into a single LayoutPlan
that a renderer can consume directly. Unlike the domain functions, the
planner also reports conditions the allocator deliberately ignores, such
as overcommitted fixed widths, as LayoutWarnings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from modcab.application.config.adapter import config_to_unit_specs
from modcab.application.config.schemas import SolutionConfig
from modcab.domain.arrangement import split
from modcab.domain.value_objects import (
    Arrangement,
    LayoutMode,
    UnitSpec,
    WidthAllocation,
)
from modcab.domain.width_allocator import allocate, fixed_width_used

logger = logging.getLogger(__name__)

# Tolerance for float comparisons of summed widths (millimeters)
WIDTH_TOLERANCE = 1e-6


@dataclass(frozen=True)
class LayoutWarning:
    """Non-fatal issue found while planning a layout.

    Attributes:
        message: Description of the warning condition.
        suggestion: Optional suggestion for resolving the warning.
    """

    message: str
    suggestion: str | None = None


@dataclass(frozen=True)
class UnitPlacement:
    """Where a unit sits within its segment.

    Attributes:
        unit_id: Id of the placed unit.
        segment: "run" for linear layouts, otherwise "left", "corner" or "right".
        offset: Distance from the start of the segment in millimeters.
        width: Allocated width in millimeters.
    """

    unit_id: str
    segment: str
    offset: float
    width: float

    def __post_init__(self) -> None:
        valid_segments = {"run", "left", "corner", "right"}
        if self.segment not in valid_segments:
            raise ValueError(
                f"segment must be one of {valid_segments}, got '{self.segment}'"
            )

    @property
    def end(self) -> float:
        """Offset of the unit's right edge within its segment."""
        return self.offset + self.width


@dataclass(frozen=True)
class LayoutPlan:
    """Resolved layout for one configuration snapshot.

    Attributes:
        total_width: Overall width the units were allocated against.
        layout_mode: Layout mode of the configuration.
        units: Units in sequence order.
        widths: Allocated width per unit id.
        arrangement: Corner split for L-shaped layouts, None for linear.
        placements: Units with their segment and offset, in render order.
        warnings: Conditions worth showing to the user.
    """

    total_width: float
    layout_mode: LayoutMode
    units: tuple[UnitSpec, ...]
    widths: WidthAllocation
    arrangement: Arrangement | None = None
    placements: tuple[UnitPlacement, ...] = ()
    warnings: tuple[LayoutWarning, ...] = ()

    @property
    def allocated_width(self) -> float:
        """Sum of all allocated widths."""
        return sum(self.widths.values())

    @property
    def unallocated_width(self) -> float:
        """Part of the total width no unit was given."""
        return max(0.0, self.total_width - self.allocated_width)

    @property
    def overcommit(self) -> float:
        """Amount by which allocated widths exceed the total width."""
        return max(0.0, self.allocated_width - self.total_width)

    @property
    def is_overcommitted(self) -> bool:
        return self.overcommit > WIDTH_TOLERANCE

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    def width_of(self, unit_id: str) -> float:
        """Allocated width of a unit.

        Raises:
            KeyError: If the unit is not part of this plan.
        """
        return self.widths[unit_id]

    def segment(self, name: str) -> tuple[UnitPlacement, ...]:
        """Placements belonging to one segment, in order."""
        return tuple(p for p in self.placements if p.segment == name)


def _place(
    units: tuple[UnitSpec, ...], segment: str, widths: WidthAllocation
) -> list[UnitPlacement]:
    placements: list[UnitPlacement] = []
    offset = 0.0
    for unit in units:
        width = widths[unit.id]
        placements.append(UnitPlacement(unit.id, segment, offset, width))
        offset += width
    return placements


class LayoutPlanner:
    """Service that turns a configuration snapshot into a LayoutPlan.

    The planner holds no state between calls. Callers that re-plan on every
    edit and need stable results should memoize on the configuration,
    which is hashable.

    Example:
        planner = LayoutPlanner()
        plan = planner.plan(config)
        for placement in plan.placements:
            print(placement.unit_id, placement.width)
    """

    def plan(self, config: SolutionConfig) -> LayoutPlan:
        """Plan the layout for a configuration.

        Args:
            config: Configuration snapshot. It is not modified.

        Returns:
            LayoutPlan with widths, placements and warnings.
        """
        units = config_to_unit_specs(config)
        widths = allocate(config.total_width, units)

        arrangement: Arrangement | None = None
        if config.layout_mode == LayoutMode.L_SHAPE:
            arrangement = split(units)
            placements = _place(arrangement.left, "left", widths)
            if arrangement.corner is not None:
                placements += _place((arrangement.corner,), "corner", widths)
            placements += _place(arrangement.right, "right", widths)
        else:
            placements = _place(units, "run", widths)

        warnings = self.check(config.total_width, units, arrangement)

        logger.debug(
            f"Planned {config.layout_mode.value} layout: {len(units)} units, "
            f"total width {config.total_width}, {len(warnings)} warnings"
        )

        return LayoutPlan(
            total_width=config.total_width,
            layout_mode=config.layout_mode,
            units=units,
            widths=widths,
            arrangement=arrangement,
            placements=tuple(placements),
            warnings=tuple(warnings),
        )

    def check(
        self,
        total_width: float,
        units: tuple[UnitSpec, ...],
        arrangement: Arrangement | None = None,
    ) -> list[LayoutWarning]:
        """Collect warnings for a set of units.

        Args:
            total_width: Overall available width in millimeters.
            units: Units in sequence order.
            arrangement: Corner split when planning an L-shaped layout.

        Returns:
            List of warnings, empty if the layout has nothing to report.
        """
        warnings: list[LayoutWarning] = []

        fixed_used = fixed_width_used(units)
        has_elastic = any(u.is_elastic for u in units)

        if fixed_used - total_width > WIDTH_TOLERANCE:
            warnings.append(
                LayoutWarning(
                    message=(
                        f"Fixed unit widths ({fixed_used:g} mm) exceed total "
                        f"width ({total_width:g} mm) by {fixed_used - total_width:g} mm"
                    ),
                    suggestion="Reduce fixed widths or increase the total width",
                )
            )
        elif units and not has_elastic and total_width - fixed_used > WIDTH_TOLERANCE:
            warnings.append(
                LayoutWarning(
                    message=(
                        f"{total_width - fixed_used:g} mm of the total width "
                        "is not allocated to any unit"
                    ),
                    suggestion="Mark a unit as elastic to fill the remaining space",
                )
            )

        if arrangement is not None:
            if not arrangement.has_corner:
                warnings.append(
                    LayoutWarning(
                        message="L-shaped layout has no corner unit",
                        suggestion="Add a corner unit or switch to linear layout",
                    )
                )
            extra = [u.id for u in arrangement.right if u.is_corner]
            if extra:
                warnings.append(
                    LayoutWarning(
                        message=(
                            "Only the first corner unit is used as the corner; "
                            f"{', '.join(extra)} placed in the right run"
                        ),
                        suggestion="Remove the extra corner units",
                    )
                )

        return warnings
