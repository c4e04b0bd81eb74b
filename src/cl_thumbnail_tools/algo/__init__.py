"""Dimension planning and source validation."""

from .dimension_planner import plan_dimensions, plan_dominant_side
from .validator import validate_source

__all__ = ["plan_dimensions", "plan_dominant_side", "validate_source"]
