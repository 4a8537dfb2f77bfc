# tests/test_geometry.py
"""
Deterministic tests for geometry: bounds, vertex centroid, label rectangle,
polygon_contains_with_tol.
"""

from __future__ import annotations

import pytest
from shapely.geometry import Polygon

from riversense.core.geometry import (
    compute_bounds,
    label_rectangle,
    polygon_contains_with_tol,
    to_polygon,
    vertex_centroid,
)
from riversense.core.types import Point

SQUARE = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10), Point(0, 0)]


def test_compute_bounds_square() -> None:
    b = compute_bounds(SQUARE)
    assert (b.min_x, b.min_y, b.max_x, b.max_y) == (0, 0, 10, 10)
    assert b.width == 10 and b.height == 10
    assert not b.is_degenerate


def test_compute_bounds_encloses_all_points() -> None:
    pts = [Point(3.5, -2), Point(-7, 4.25), Point(1, 9), Point(12.75, 0.5)]
    b = compute_bounds(pts)
    for p in pts:
        assert b.min_x <= p.x <= b.max_x
        assert b.min_y <= p.y <= b.max_y
    assert b.width == b.max_x - b.min_x == 19.75
    assert b.height == b.max_y - b.min_y == 11


def test_compute_bounds_single_point_degenerate() -> None:
    b = compute_bounds([Point(2, 3)])
    assert b.width == 0 and b.height == 0
    assert b.is_degenerate


def test_compute_bounds_empty_raises() -> None:
    with pytest.raises(ValueError):
        compute_bounds([])


def test_vertex_centroid_includes_closing_vertex() -> None:
    c = vertex_centroid(SQUARE)
    assert c == Point(4, 4)


def test_vertex_centroid_open_ring() -> None:
    c = vertex_centroid(SQUARE[:-1])
    assert c == Point(5, 5)


def test_vertex_centroid_is_exact_mean() -> None:
    pts = [Point(0.1, 0.2), Point(0.7, 0.3), Point(0.2, 0.9)]
    c = vertex_centroid(pts)
    assert c.x == pytest.approx((0.1 + 0.7 + 0.2) / 3)
    assert c.y == pytest.approx((0.2 + 0.3 + 0.9) / 3)


def test_to_polygon_repairs_bowtie() -> None:
    bowtie = [Point(0, 0), Point(2, 2), Point(2, 0), Point(0, 2), Point(0, 0)]
    poly = to_polygon(bowtie)
    assert poly.is_valid


def test_label_rectangle() -> None:
    rect = label_rectangle(5, 5, 4, 2, 0)
    assert rect.is_valid
    assert rect.centroid.x == pytest.approx(5) and rect.centroid.y == pytest.approx(5)
    rect90 = label_rectangle(5, 5, 4, 2, 90)
    minx, miny, maxx, maxy = rect90.bounds
    assert maxx - minx == pytest.approx(2) and maxy - miny == pytest.approx(4)


def test_polygon_contains_with_tol() -> None:
    poly = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)])
    inside = Polygon([(2, 2), (4, 2), (4, 4), (2, 4)])
    assert polygon_contains_with_tol(poly, inside) is True
    outside = Polygon([(8, 8), (12, 8), (12, 12), (8, 12)])
    assert polygon_contains_with_tol(poly, outside) is False
