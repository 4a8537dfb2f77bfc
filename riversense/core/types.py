# riversense/core/types.py
"""
Dataclasses for points, bounds, parsed polygons, label placement and the
viewport transform. All records are immutable; recompute instead of mutating.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


PlacementMethod = Literal["flow_aligned", "centroid", "outside"]


@dataclass(frozen=True)
class Point:
    """A coordinate pair; no unit system implied."""
    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounds of a point sequence."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def is_degenerate(self) -> bool:
        """Zero width or height: a line or a point, not an area."""
        return self.width == 0 or self.height == 0


@dataclass(frozen=True)
class PolygonData:
    """
    One successfully parsed river ring.
    points is a closed ring; first and last point may coincide.
    """
    name: str
    points: tuple[Point, ...]
    bounds: Bounds


@dataclass(frozen=True)
class LabelPlacement:
    """Label anchor, orientation, text box and containment for one polygon + text + size."""
    position: Point
    rotation_deg: float
    method: PlacementMethod
    text_width: float
    text_height: float
    font_size: float
    is_inside: bool
    min_clearance: float = 0.0


@dataclass(frozen=True)
class ViewportTransform:
    """Uniform scale and offsets mapping geometry units into a width x height viewport."""
    scale: float
    offset_x: float
    offset_y: float
    width: float
    height: float
