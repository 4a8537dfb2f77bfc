# tests/test_text_metrics.py
"""
Text size: fixed heuristic is text-independent; measured mode uses Pillow.
"""

from __future__ import annotations

import pytest

from riversense.core.text_metrics import estimate_text_size, measure_text, text_size


def test_estimate_text_size_heuristic() -> None:
    assert estimate_text_size(24) == (144.0, 24.0)
    assert text_size("A", 24) == text_size("A MUCH LONGER LABEL", 24)


def test_measure_text_positive_and_grows_with_length() -> None:
    w1, h1 = measure_text("AB", 24)
    w2, _ = measure_text("ABABABAB", 24)
    assert w1 > 0 and h1 > 0
    assert w2 > w1


def test_text_size_unknown_mode() -> None:
    with pytest.raises(ValueError):
        text_size("X", 12, metrics="exact")
