# riversense/core/render.py
"""
Matplotlib PNG rendering of the river and its label.
Drawn in geometry coordinates (y up) with equal aspect; companion to render_svg.
"""

from __future__ import annotations

import warnings
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib import patheffects
from matplotlib.patches import Rectangle

from riversense.core.config import (
    DEFAULT_FONT_FAMILY,
    VIEWPORT_HEIGHT_PX,
    VIEWPORT_MARGIN_PX,
    VIEWPORT_WIDTH_PX,
)
from riversense.core.geometry import points_to_array
from riversense.core.types import LabelPlacement, PolygonData


def set_axes_to_bounds(ax: plt.Axes, river: PolygonData, width_px: int, height_px: int) -> None:
    """Limits from bounds plus the viewport margin (in geometry units); equal aspect; hide axes."""
    b = river.bounds
    scale = min(
        (width_px - 2 * VIEWPORT_MARGIN_PX) / b.width,
        (height_px - 2 * VIEWPORT_MARGIN_PX) / b.height,
    )
    pad = VIEWPORT_MARGIN_PX / scale
    ax.set_xlim(b.min_x - pad, b.max_x + pad)
    ax.set_ylim(b.min_y - pad, b.max_y + pad)
    ax.set_aspect("equal", adjustable="datalim")
    ax.axis("off")


def _new_fig(width_px: int, height_px: int) -> tuple[plt.Figure, plt.Axes]:
    fig = plt.figure(
        figsize=(width_px / 100.0, height_px / 100.0),
        dpi=100,
        constrained_layout=False,
    )
    ax = fig.add_axes([0, 0, 1, 1])  # full-canvas axes
    ax.axis("off")
    return fig, ax


def _data_to_points(ax: plt.Axes, fig: plt.Figure, size: float) -> float:
    """Convert a length in data units to typographic points for the current axes."""
    x0, _ = ax.transData.transform((0.0, 0.0))
    x1, _ = ax.transData.transform((size, 0.0))
    return abs(x1 - x0) * 72.0 / fig.dpi


def render_png(
    river: PolygonData,
    placement: LabelPlacement | None,
    text: str,
    output_path: str | Path,
    show_safety: bool = False,
    width_px: int = VIEWPORT_WIDTH_PX,
    height_px: int = VIEWPORT_HEIGHT_PX,
    scale: int = 1,
) -> Path:
    """Render river outline with label. scale multiplies output resolution (1x, 2x, 4x)."""
    w, h = width_px * scale, height_px * scale
    fig, ax = _new_fig(w, h)
    xy = points_to_array(river.points)
    ax.fill(xy[:, 0], xy[:, 1], facecolor="#dbeafe", edgecolor="#1e3a8a", linewidth=3.5 * scale)
    set_axes_to_bounds(ax, river, width_px, height_px)

    if placement is not None:
        cx, cy = placement.position.x, placement.position.y
        if show_safety:
            ax.add_patch(
                Rectangle(
                    (cx - placement.text_width / 2, cy - placement.text_height / 2),
                    placement.text_width,
                    placement.text_height,
                    angle=placement.rotation_deg,
                    rotation_point="center",
                    facecolor=(0.937, 0.267, 0.267, 0.05),
                    edgecolor="#ef4444",
                    linestyle="--",
                    linewidth=1,
                    zorder=4,
                )
            )
        fontsize = _data_to_points(ax, fig, placement.font_size)
        label = ax.text(
            cx, cy, text,
            fontsize=fontsize,
            fontfamily=DEFAULT_FONT_FAMILY,
            fontweight="bold",
            ha="center", va="center",
            color="#1e3a8a",
            rotation=placement.rotation_deg,
            zorder=6,
        )
        label.set_path_effects([patheffects.withStroke(linewidth=2.5 * scale, foreground="white")])

    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", message=".*constrained_layout.*", category=UserWarning)
        fig.savefig(output_path, dpi=100, facecolor="white")
    plt.close(fig)
    return Path(output_path)
