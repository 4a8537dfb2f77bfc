# riversense/core/text_metrics.py
"""
Label text size: fixed per-character heuristic (default) or measured with Pillow.
Sizes are in geometry units (1 pt = 1 unit).
"""

from __future__ import annotations

import warnings

from riversense.core.config import CHAR_WIDTH_FACTOR, DEFAULT_FONT_FAMILY

_font_warning_emitted: set[str] = set()


def estimate_text_size(font_size: float) -> tuple[float, float]:
    """Return (font_size * CHAR_WIDTH_FACTOR, font_size). Independent of the text."""
    return (font_size * CHAR_WIDTH_FACTOR, float(font_size))


def _load_font(font_family: str, font_size: float):
    """Load PIL ImageFont; fallback with warning if font not found."""
    from PIL import ImageFont

    size = max(1, int(round(font_size)))
    candidates = [
        font_family + ".ttf",
        font_family.replace(" ", "") + ".ttf",
        "DejaVuSans.ttf",
        "arial.ttf",
        "Arial.ttf",
    ]
    for name in candidates:
        try:
            return ImageFont.truetype(name, size=size)
        except OSError:
            continue
    if font_family not in _font_warning_emitted:
        _font_warning_emitted.add(font_family)
        warnings.warn(f"Font not found: {font_family!r}; using default.", UserWarning)
    return ImageFont.load_default()


def measure_text(
    text: str, font_size: float, font_family: str = DEFAULT_FONT_FAMILY
) -> tuple[float, float]:
    """
    Return (width, height) of text rendered with Pillow.
    Falls back to the heuristic for empty text.
    """
    if not text:
        return estimate_text_size(font_size)
    from PIL import Image, ImageDraw

    font = _load_font(font_family, font_size)
    img = Image.new("RGB", (1, 1))
    draw = ImageDraw.Draw(img)
    bbox = draw.textbbox((0, 0), text, font=font)
    w = float(bbox[2] - bbox[0])
    h = float(bbox[3] - bbox[1])
    size_used = getattr(font, "size", font_size)
    scale = font_size / max(1.0, float(size_used))
    return (w * scale, h * scale)


def text_size(
    text: str,
    font_size: float,
    metrics: str = "heuristic",
    font_family: str = DEFAULT_FONT_FAMILY,
) -> tuple[float, float]:
    """Dispatch on metrics mode: 'heuristic' or 'measured'."""
    if metrics == "heuristic":
        return estimate_text_size(font_size)
    if metrics == "measured":
        return measure_text(text, font_size, font_family)
    raise ValueError(f"Unknown text metrics mode: {metrics!r}")
