"""Point-to-point radio link planning with First Fresnel Zone visualization."""

from link_planner.adapter import LinkPlannerAPI

__all__ = ["LinkPlannerAPI"]
