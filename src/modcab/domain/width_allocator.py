"""Width allocation for a horizontal run of cabinet units.

Fixed units keep their nominal width. Whatever is left of the total width
is split equally among elastic units. The functions here never raise on
numeric input and never round: overcommitted or otherwise infeasible
configurations still produce an allocation, and it is up to the caller to
report them.
"""

from __future__ import annotations

from collections.abc import Sequence

from modcab.domain.value_objects import UnitSpec, WidthAllocation


def fixed_width_used(units: Sequence[UnitSpec]) -> float:
    """Sum the nominal widths of all fixed (non-elastic) units.

    Args:
        units: Units in sequence order.

    Returns:
        Total nominal width of fixed units in millimeters.
    """
    return sum(u.width for u in units if not u.is_elastic)


def remaining_width(total_width: float, units: Sequence[UnitSpec]) -> float:
    """Width left over for elastic units, clamped at zero."""
    return max(0, total_width - fixed_width_used(units))


def allocate(total_width: float, units: Sequence[UnitSpec]) -> WidthAllocation:
    """Allocate a width to every unit.

    Algorithm:
    1. Partition units into fixed and elastic, keeping sequence order
    2. Sum nominal widths of the fixed units
    3. remaining = max(0, total_width - fixed sum)
    4. Each fixed unit gets its nominal width, even if that overcommits
    5. Each elastic unit gets remaining / number of elastic units

    With no elastic units the remaining width is left unallocated.

    Duplicate ids are not detected. The result is keyed by id, so the last
    unit written wins, with fixed units written before elastic ones.

    Args:
        total_width: Total available width in millimeters. Expected to be
            positive; negative values give an undefined result.
        units: Units in sequence order.

    Returns:
        Mapping of unit id to allocated width in millimeters.

    Example:
        >>> units = [
        ...     UnitSpec("left", width=450, is_elastic=True),
        ...     UnitSpec("tv", UnitKind.TV_SPACE, width=1600),
        ...     UnitSpec("right", width=450, is_elastic=True),
        ... ]
        >>> allocate(3000, units)
        {'tv': 1600, 'left': 700.0, 'right': 700.0}
    """
    fixed = [u for u in units if not u.is_elastic]
    elastic = [u for u in units if u.is_elastic]

    widths: WidthAllocation = {u.id: u.width for u in fixed}

    if elastic:
        share = remaining_width(total_width, fixed) / len(elastic)
        for unit in elastic:
            widths[unit.id] = share

    return widths
