# riversense/core/placement.py
"""
Centroid label placement. The anchor is the vertex mean, rotation is 0,
and the label box is checked for containment against the river polygon.
"""

from __future__ import annotations

import logging
from typing import Sequence

from riversense.core.config import FONT_SIZE_MAX, FONT_SIZE_MIN, TEXT_METRICS_MODE
from riversense.core.geometry import label_rectangle, to_polygon, vertex_centroid
from riversense.core.text_metrics import text_size
from riversense.core.types import LabelPlacement, Point, PolygonData
from riversense.core.validate import validate_label_inside

logger = logging.getLogger(__name__)


def normalize_label_text(text: str) -> str:
    """Labels are displayed upper-case."""
    return (text or "").upper()


def clamp_font_size(font_size: float) -> float:
    """Bound the target font size to [FONT_SIZE_MIN, FONT_SIZE_MAX]."""
    return max(FONT_SIZE_MIN, min(FONT_SIZE_MAX, float(font_size)))


def find_label_position(
    points: Sequence[Point],
    text: str,
    font_size: float,
    metrics: str = TEXT_METRICS_MODE,
) -> LabelPlacement:
    """
    Anchor the label at the vertex centroid with rotation 0.
    Text box is (font_size * CHAR_WIDTH_FACTOR) x font_size in heuristic mode.
    is_inside reports whether the whole text box lies inside the polygon.
    """
    anchor = vertex_centroid(points)
    width, height = text_size(text, font_size, metrics=metrics)
    rect = label_rectangle(anchor.x, anchor.y, width, height, 0.0)
    is_inside, min_clearance = validate_label_inside(to_polygon(points), rect)
    if not is_inside:
        logger.info(
            "Label box %.2f x %.2f at (%.3f, %.3f) is not inside the polygon",
            width, height, anchor.x, anchor.y,
        )
    return LabelPlacement(
        position=anchor,
        rotation_deg=0.0,
        method="centroid",
        text_width=width,
        text_height=height,
        font_size=float(font_size),
        is_inside=is_inside,
        min_clearance=min_clearance,
    )


def place_label(
    river: PolygonData,
    text: str,
    font_size: float,
    metrics: str = TEXT_METRICS_MODE,
) -> LabelPlacement:
    """Placement for a parsed river with normalized text and clamped size."""
    return find_label_position(
        river.points,
        normalize_label_text(text),
        clamp_font_size(font_size),
        metrics=metrics,
    )
