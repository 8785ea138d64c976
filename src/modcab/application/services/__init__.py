"""Application services."""

from modcab.application.services.layout_planner import (
    LayoutPlan,
    LayoutPlanner,
    LayoutWarning,
    UnitPlacement,
)

__all__ = [
    "LayoutPlan",
    "LayoutPlanner",
    "LayoutWarning",
    "UnitPlacement",
]
