"""Value objects for the cabinet unit domain.

All types here are immutable snapshots. They are built fresh from the
caller's configuration on every call and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# Unit id -> allocated width in millimeters
WidthAllocation = dict[str, float]


class UnitKind(str, Enum):
    """Kinds of cabinet unit.

    Only CORNER is meaningful to layout computation; the remaining kinds
    are carried through for the renderer.

    Attributes:
        CABINET_DOOR: Standard storage cabinet with optional door.
        DRAWERS: Drawer stack.
        OPEN_SHELF: Open display shelving.
        TV_SPACE: Open niche for a television.
        CORNER: Pivot unit of an L-shaped arrangement.
    """

    CABINET_DOOR = "cabinet_door"
    DRAWERS = "drawers"
    OPEN_SHELF = "open_shelf"
    TV_SPACE = "tv_space"
    CORNER = "corner"


class LayoutMode(str, Enum):
    """How the unit sequence is arranged.

    Attributes:
        LINEAR: Single straight run in sequence order.
        L_SHAPE: Two runs meeting at the first corner unit.
    """

    LINEAR = "linear"
    L_SHAPE = "l_shape"


@dataclass(frozen=True)
class UnitSpec:
    """One cabinet module in the horizontal sequence.

    Attributes:
        id: Stable identifier, unique within a configuration.
        kind: Unit kind.
        width: Nominal width in millimeters. Ignored when is_elastic is True.
        is_elastic: If True, the unit shares leftover width equally with
            the other elastic units instead of using its nominal width.
    """

    id: str
    kind: UnitKind = UnitKind.CABINET_DOOR
    width: float = 0.0
    is_elastic: bool = False

    @property
    def is_corner(self) -> bool:
        """Check if this unit is a corner piece."""
        return self.kind == UnitKind.CORNER


@dataclass(frozen=True)
class Arrangement:
    """A unit sequence split around its corner unit.

    Attributes:
        left: Units before the corner, in order.
        corner: The first corner unit, or None if the sequence has none.
        right: Units after the corner, in order.
    """

    left: tuple[UnitSpec, ...] = ()
    corner: UnitSpec | None = None
    right: tuple[UnitSpec, ...] = ()

    @property
    def has_corner(self) -> bool:
        """Check if a corner unit was found."""
        return self.corner is not None

    @property
    def units(self) -> tuple[UnitSpec, ...]:
        """Reassemble the original sequence."""
        middle = (self.corner,) if self.corner is not None else ()
        return self.left + middle + self.right


@dataclass(frozen=True)
class LayoutRequest:
    """Total available width plus the ordered units to lay out.

    total_width is expected to be positive. Negative values are not
    rejected; the resulting allocation is undefined.
    """

    total_width: float
    units: tuple[UnitSpec, ...] = field(default_factory=tuple)

    def allocate(self) -> WidthAllocation:
        """Allocate widths for this request."""
        from modcab.domain.width_allocator import allocate

        return allocate(self.total_width, self.units)

    def split(self) -> Arrangement:
        """Split this request's units around the first corner."""
        from modcab.domain.arrangement import split

        return split(self.units)
