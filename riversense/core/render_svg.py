# riversense/core/render_svg.py
"""
Export the labelled river as a self-contained SVG: polygon outline, label text with
halo, optional dashed safety (collision) box. Coordinates are viewport pixels.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

import numpy as np

from riversense.core.config import (
    DEFAULT_FONT_FAMILY,
    HALO_WIDTH_PX,
    OUTLINE_WIDTH_PX,
)
from riversense.core.types import LabelPlacement, PolygonData, ViewportTransform
from riversense.core.viewport import compute_viewport_transform, project_points, to_screen

SVG_NS = "http://www.w3.org/2000/svg"


def _ring_to_svg_d(xy: np.ndarray) -> str:
    """Screen-space ring as SVG path d (M L ... Z)."""
    if len(xy) == 0:
        return ""
    parts = [f"M {xy[0][0]:.4f} {xy[0][1]:.4f}"]
    for x, y in xy[1:]:
        parts.append(f"L {x:.4f} {y:.4f}")
    parts.append("Z")
    return " ".join(parts)


def _add_label(
    root: ET.Element,
    placement: LabelPlacement,
    text: str,
    transform: ViewportTransform,
    show_safety: bool,
) -> None:
    anchor = to_screen(placement.position, transform)
    g = ET.SubElement(
        root,
        "g",
        {
            "id": "label",
            "transform": f"translate({anchor.x:.4f}, {anchor.y:.4f}) rotate({placement.rotation_deg:.2f})",
        },
    )
    if show_safety:
        w = placement.text_width * transform.scale
        h = placement.text_height * transform.scale
        ET.SubElement(
            g,
            "rect",
            {
                "id": "safety-box",
                "x": f"{-w / 2:.4f}",
                "y": f"{-h / 2:.4f}",
                "width": f"{w:.4f}",
                "height": f"{h:.4f}",
                "fill": "rgba(239, 68, 68, 0.05)",
                "stroke": "#ef4444",
                "stroke-width": "1",
                "stroke-dasharray": "4,2",
            },
        )
    label = ET.SubElement(
        g,
        "text",
        {
            "font-family": DEFAULT_FONT_FAMILY,
            "font-size": f"{placement.font_size * transform.scale:.2f}",
            "font-weight": "900",
            "text-anchor": "middle",
            "dominant-baseline": "middle",
            "fill": "#1e3a8a",
            "stroke": "#ffffff",
            "stroke-width": f"{HALO_WIDTH_PX}",
            "paint-order": "stroke",
            "stroke-linejoin": "round",
        },
    )
    label.text = text


def render_svg(
    river: PolygonData,
    placement: LabelPlacement | None,
    text: str,
    show_safety: bool = False,
    transform: ViewportTransform | None = None,
) -> str:
    """
    SVG document for the river and (optionally) its label.
    transform defaults to the fixed viewport fit of river.bounds.
    """
    t = transform if transform is not None else compute_viewport_transform(river.bounds)
    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "width": f"{t.width:g}",
            "height": f"{t.height:g}",
            "viewBox": f"0 0 {t.width:g} {t.height:g}",
        },
    )
    ET.SubElement(root, "title").text = river.name
    ET.SubElement(
        root,
        "path",
        {
            "id": "river",
            "d": _ring_to_svg_d(project_points(river.points, t)),
            "fill": "#3b82f6",
            "fill-opacity": "0.15",
            "stroke": "#1e3a8a",
            "stroke-width": f"{OUTLINE_WIDTH_PX}",
            "stroke-linejoin": "round",
        },
    )
    if placement is not None:
        _add_label(root, placement, text, t, show_safety)
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + ET.tostring(root, encoding="unicode", method="xml")


def export_svg(
    river: PolygonData,
    placement: LabelPlacement | None,
    text: str,
    out_path: str | Path,
    show_safety: bool = False,
) -> Path:
    """Write render_svg output to out_path; returns the path."""
    path = Path(out_path)
    path.write_text(render_svg(river, placement, text, show_safety=show_safety), encoding="utf-8")
    return path
