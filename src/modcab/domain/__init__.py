"""Domain layer - width allocation and arrangement of cabinet units."""

from .arrangement import find_corner_index, split
from .value_objects import (
    Arrangement,
    LayoutMode,
    LayoutRequest,
    UnitKind,
    UnitSpec,
    WidthAllocation,
)
from .width_allocator import allocate, fixed_width_used, remaining_width

__all__ = [
    "Arrangement",
    "LayoutMode",
    "LayoutRequest",
    "UnitKind",
    "UnitSpec",
    "WidthAllocation",
    "allocate",
    "find_corner_index",
    "fixed_width_used",
    "remaining_width",
    "split",
]
