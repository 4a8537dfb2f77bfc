# riversense/core/geometry.py
"""
Geometry helpers: bounds, vertex centroid, shapely polygon normalization,
oriented label rectangle, containment.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from shapely.geometry import MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry

from riversense.core.config import CONTAINMENT_TOLERANCE
from riversense.core.types import Bounds, Point


def points_to_array(points: Sequence[Point]) -> np.ndarray:
    """(N, 2) float array of point coordinates."""
    if not points:
        return np.zeros((0, 2))
    return np.array([(p.x, p.y) for p in points], dtype=float)


def compute_bounds(points: Sequence[Point]) -> Bounds:
    """
    Axis-aligned bounds of a non-empty point sequence.
    Single-point or axis-collinear input gives zero width or height; callers reject it.
    """
    xy = points_to_array(points)
    if xy.shape[0] == 0:
        raise ValueError("Cannot compute bounds of an empty point sequence")
    mins = xy.min(axis=0)
    maxs = xy.max(axis=0)
    return Bounds(
        min_x=float(mins[0]),
        min_y=float(mins[1]),
        max_x=float(maxs[0]),
        max_y=float(maxs[1]),
    )


def vertex_centroid(points: Sequence[Point]) -> Point:
    """
    Unweighted arithmetic mean of all vertices, closing vertex included.
    Not the area centroid.
    """
    if not points:
        raise ValueError("Cannot compute centroid of an empty point sequence")
    n = len(points)
    return Point(
        math.fsum(p.x for p in points) / n,
        math.fsum(p.y for p in points) / n,
    )


def ensure_polygon(geom: BaseGeometry) -> Polygon | MultiPolygon:
    """Return geom as Polygon or MultiPolygon; fix invalid with buffer(0)."""
    if geom is None or geom.is_empty:
        return Polygon()
    if isinstance(geom, (Polygon, MultiPolygon)):
        if not geom.is_valid:
            geom = geom.buffer(0)
        return geom  # type: ignore[return-value]
    return Polygon()


def to_polygon(points: Sequence[Point]) -> Polygon | MultiPolygon:
    """Shapely polygon for a ring of points. Self-intersecting rings are repaired."""
    if len(points) < 3:
        return Polygon()
    return ensure_polygon(Polygon([(p.x, p.y) for p in points]))


def label_rectangle(
    cx: float, cy: float, width: float, height: float, angle_deg: float = 0.0
) -> Polygon:
    """
    Rectangle centered at (cx, cy) with the given width/height,
    rotated by angle_deg around its center.
    """
    hw = width / 2.0
    hh = height / 2.0
    rad = math.radians(angle_deg)
    cos_a = math.cos(rad)
    sin_a = math.sin(rad)
    corners = [
        (-hw, -hh),
        (hw, -hh),
        (hw, hh),
        (-hw, hh),
    ]
    rotated = [
        (cx + x * cos_a - y * sin_a, cy + x * sin_a + y * cos_a)
        for x, y in corners
    ]
    return Polygon(rotated)


def polygon_contains_with_tol(
    poly: BaseGeometry,
    rect: BaseGeometry,
    tolerance: float = CONTAINMENT_TOLERANCE,
) -> bool:
    """True if rect is fully inside poly (shrunk by tolerance)."""
    if poly is None or rect is None or poly.is_empty or rect.is_empty:
        return False
    if tolerance > 0:
        buffered = poly.buffer(-tolerance)
        if buffered.is_empty:
            return False
        return buffered.contains(rect) or buffered.covers(rect)
    return poly.contains(rect) or poly.covers(rect)
