# tests/test_viewport.py
"""
Viewport projection: uniform fit scale, centering offsets, y-axis flip, inverse.
"""

from __future__ import annotations

import pytest

from riversense.core.error_codes import DEGENERATE_GEOMETRY, GeometryInputError
from riversense.core.geometry import compute_bounds
from riversense.core.types import Bounds, Point
from riversense.core.viewport import (
    compute_viewport_transform,
    from_screen,
    project_points,
    to_screen,
)

SQUARE = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10), Point(0, 0)]


def test_transform_square_default_viewport() -> None:
    t = compute_viewport_transform(compute_bounds(SQUARE))
    # min(640 / 10, 440 / 10)
    assert t.scale == pytest.approx(44.0)
    assert t.offset_x == pytest.approx(180.0)
    assert t.offset_y == pytest.approx(80.0)
    assert (t.width, t.height) == (800.0, 600.0)


def test_to_screen_flips_y_and_centers() -> None:
    t = compute_viewport_transform(compute_bounds(SQUARE))
    origin = to_screen(Point(0, 0), t)
    assert origin.x == pytest.approx(180.0)
    assert origin.y == pytest.approx(520.0)
    top_right = to_screen(Point(10, 10), t)
    assert top_right.x == pytest.approx(620.0)
    assert top_right.y == pytest.approx(80.0)


def test_wide_bounds_limited_by_width() -> None:
    t = compute_viewport_transform(Bounds(80, 80, 780, 180))
    assert t.scale == pytest.approx(640 / 700)
    left = to_screen(Point(80, 130), t)
    right = to_screen(Point(780, 130), t)
    assert left.x == pytest.approx(80.0)
    assert right.x == pytest.approx(720.0)
    assert left.y == pytest.approx(300.0)


def test_round_trip_recovers_point() -> None:
    t = compute_viewport_transform(Bounds(-12.5, 3.0, 47.25, 91.0), width=640, height=480, margin=20)
    for p in (Point(-12.5, 3.0), Point(1.1, 77.7), Point(47.25, 91.0), Point(100.0, -50.0)):
        back = from_screen(to_screen(p, t), t)
        assert back.x == pytest.approx(p.x, abs=1e-9)
        assert back.y == pytest.approx(p.y, abs=1e-9)


def test_project_points_matches_to_screen() -> None:
    t = compute_viewport_transform(compute_bounds(SQUARE))
    xy = project_points(SQUARE, t)
    assert xy.shape == (5, 2)
    for (x, y), p in zip(xy, SQUARE):
        s = to_screen(p, t)
        assert x == pytest.approx(s.x) and y == pytest.approx(s.y)


def test_degenerate_bounds_rejected() -> None:
    with pytest.raises(GeometryInputError) as exc:
        compute_viewport_transform(Bounds(0, 5, 10, 5))
    assert exc.value.error_key == DEGENERATE_GEOMETRY
