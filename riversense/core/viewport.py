# riversense/core/viewport.py
"""
Uniform-scale projection of geometry bounds into a fixed viewport.
Geometry is Cartesian (y up); the viewport is screen space (y down).
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from riversense.core.config import (
    VIEWPORT_HEIGHT_PX,
    VIEWPORT_MARGIN_PX,
    VIEWPORT_WIDTH_PX,
)
from riversense.core.error_codes import DEGENERATE_GEOMETRY, GeometryInputError
from riversense.core.geometry import points_to_array
from riversense.core.types import Bounds, Point, ViewportTransform


def compute_viewport_transform(
    bounds: Bounds,
    width: float = VIEWPORT_WIDTH_PX,
    height: float = VIEWPORT_HEIGHT_PX,
    margin: float = VIEWPORT_MARGIN_PX,
) -> ViewportTransform:
    """
    Scale = min of horizontal and vertical fit ratios (aspect preserved);
    offsets center the scaled bounds in the viewport.
    """
    if bounds.is_degenerate:
        raise GeometryInputError(DEGENERATE_GEOMETRY)
    scale = min(
        (width - margin * 2) / bounds.width,
        (height - margin * 2) / bounds.height,
    )
    offset_x = (width - bounds.width * scale) / 2 - bounds.min_x * scale
    offset_y = (height - bounds.height * scale) / 2 - bounds.min_y * scale
    return ViewportTransform(
        scale=scale,
        offset_x=offset_x,
        offset_y=offset_y,
        width=float(width),
        height=float(height),
    )


def to_screen(p: Point, t: ViewportTransform) -> Point:
    """Geometry point to viewport pixels, flipping the vertical axis."""
    return Point(
        p.x * t.scale + t.offset_x,
        t.height - (p.y * t.scale + t.offset_y),
    )


def from_screen(p: Point, t: ViewportTransform) -> Point:
    """Inverse of to_screen."""
    return Point(
        (p.x - t.offset_x) / t.scale,
        (t.height - p.y - t.offset_y) / t.scale,
    )


def project_points(points: Sequence[Point], t: ViewportTransform) -> np.ndarray:
    """Vectorized to_screen: (N, 2) array of viewport coordinates."""
    xy = points_to_array(points)
    out = np.empty_like(xy)
    out[:, 0] = xy[:, 0] * t.scale + t.offset_x
    out[:, 1] = t.height - (xy[:, 1] * t.scale + t.offset_y)
    return out
