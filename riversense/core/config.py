# riversense/core/config.py
"""
Central configuration for river label placement and rendering.
All tunable values live here; no magic numbers in other modules.
"""

from __future__ import annotations
import os

# ----- Paths (repo-relative) -----
REPORTS_DIR: str = "reports"

# ----- Parsing -----
MIN_POLYGON_POINTS: int = 3
"""Fewer points after parsing is reported as invalid WKT."""

DEFAULT_SOURCE_NAME: str = "Manual Entry"
"""Provenance name for pasted WKT."""

# ----- Label -----
DEFAULT_LABEL_TEXT: str = "COLORADO RIVER"

DEFAULT_FONT_SIZE: float = 24.0

FONT_SIZE_MIN: float = 12.0
FONT_SIZE_MAX: float = 80.0

CHAR_WIDTH_FACTOR: float = 6.0
"""Heuristic label width = font_size * CHAR_WIDTH_FACTOR (not a glyph metric)."""

DEFAULT_FONT_FAMILY: str = "DejaVu Sans"

TEXT_METRICS_MODE: str = "heuristic"
"""'heuristic' (fixed width factor) or 'measured' (Pillow)."""

# ----- Containment -----
CONTAINMENT_TOLERANCE: float = 1e-9
"""Tolerance (geometry units) for label-box-in-polygon containment."""

# ----- Viewport / rendering -----
VIEWPORT_WIDTH_PX: int = 800
VIEWPORT_HEIGHT_PX: int = 600
VIEWPORT_MARGIN_PX: float = 80.0

HALO_WIDTH_PX: float = 2.5
OUTLINE_WIDTH_PX: float = 3.5

# ----- Session -----
PARSE_DELAY_S: float = float(os.environ.get("RIVERSENSE_PARSE_DELAY_S", "0.2"))
"""Cancellable delay before a parse runs, so a loading state can be shown."""

# ----- Sample geometry -----
SAMPLE_NAME: str = "Sample_River.wkt"
SAMPLE_WKT: str = (
    "POLYGON((100 100, 250 80, 400 120, 550 90, 700 130, 750 110, 780 160, "
    "700 180, 550 140, 400 170, 250 130, 100 150, 80 120, 100 100))"
)

# ----- Logging -----
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
"""Log level for entry points, e.g. LOG_LEVEL=DEBUG for development."""
