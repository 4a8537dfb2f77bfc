# riversense/core/validate.py
"""
Validate that a label rectangle is inside the river polygon. Return (ok, min_clearance).
"""

from __future__ import annotations

from shapely.geometry.base import BaseGeometry

from riversense.core.config import CONTAINMENT_TOLERANCE
from riversense.core.geometry import polygon_contains_with_tol


def _min_distance_to_boundary(geom: BaseGeometry, rect: BaseGeometry) -> float:
    """Minimum distance from the rect outline (edges, not just corners) to geom's boundary."""
    if geom is None or geom.is_empty or rect is None or rect.is_empty:
        return 0.0
    return float(rect.exterior.distance(geom.boundary))


def validate_label_inside(
    river_poly: BaseGeometry,
    rect: BaseGeometry,
    tolerance: float = CONTAINMENT_TOLERANCE,
) -> tuple[bool, float]:
    """
    True if rect is fully inside river_poly (with tolerance).
    Also returns min clearance from the rect outline to the river boundary;
    0.0 when the label is not contained.
    """
    if river_poly is None or river_poly.is_empty or rect is None or rect.is_empty:
        return False, 0.0
    ok = polygon_contains_with_tol(river_poly, rect, tolerance=tolerance)
    if not ok:
        return False, 0.0
    return True, _min_distance_to_boundary(river_poly, rect)
