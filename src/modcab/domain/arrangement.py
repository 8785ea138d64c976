"""Splitting a unit sequence around its corner unit for L-shaped layouts."""

from __future__ import annotations

from collections.abc import Sequence

from modcab.domain.value_objects import Arrangement, UnitSpec


def find_corner_index(units: Sequence[UnitSpec]) -> int | None:
    """Return the index of the first corner unit, or None if there is none."""
    for i, unit in enumerate(units):
        if unit.is_corner:
            return i
    return None


def split(units: Sequence[UnitSpec]) -> Arrangement:
    """Split units into left run, corner unit and right run.

    Only the first corner unit is treated as the corner. Any later corner
    units are placed in the right run like any other unit.

    Args:
        units: Units in sequence order.

    Returns:
        Arrangement whose left + corner + right equals the input order.
        Without a corner unit, everything is in the left run.
    """
    index = find_corner_index(units)
    if index is None:
        return Arrangement(left=tuple(units))

    return Arrangement(
        left=tuple(units[:index]),
        corner=units[index],
        right=tuple(units[index + 1 :]),
    )
