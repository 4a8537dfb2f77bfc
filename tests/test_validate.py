# tests/test_validate.py
"""
Deterministic tests for validate_label_inside.
"""

from __future__ import annotations

import pytest
from shapely.geometry import Polygon

from riversense.core.geometry import label_rectangle
from riversense.core.validate import validate_label_inside


def test_validate_label_inside_contained() -> None:
    river = Polygon([(0, 0), (20, 0), (20, 20), (0, 20)])
    rect = label_rectangle(10, 10, 4, 2, 0)
    ok, min_cl = validate_label_inside(river, rect)
    assert ok is True
    assert min_cl == pytest.approx(8.0)


def test_validate_label_inside_not_contained() -> None:
    river = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)])
    rect = label_rectangle(15, 5, 4, 2, 0)
    ok, min_cl = validate_label_inside(river, rect)
    assert ok is False
    assert min_cl == 0.0


def test_validate_label_inside_partial() -> None:
    river = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)])
    rect = label_rectangle(8, 5, 6, 2, 0)
    ok, _ = validate_label_inside(river, rect)
    assert ok is False


def test_validate_label_inside_empty_river() -> None:
    ok, min_cl = validate_label_inside(Polygon(), label_rectangle(0, 0, 1, 1))
    assert ok is False and min_cl == 0.0


def test_validate_label_inside_clearance_counts_edges() -> None:
    # spike from the bottom bank reaches up to the middle of the label's lower edge
    river = Polygon([(0, 0), (19, 0), (20, 8), (21, 0), (40, 0), (40, 20), (0, 20)])
    rect = label_rectangle(20, 12, 20, 4, 0)
    ok, min_cl = validate_label_inside(river, rect)
    assert ok is True
    # corners alone are 6 from the top bank; the spike tip is 2 below the lower edge
    assert min_cl == pytest.approx(2.0)
