# riversense/core/reporting.py
"""
Containment analytics and JSON reports: create reports/<run_name>/ and write
placement.json and run_metadata.json.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from riversense.core.config import (
    CHAR_WIDTH_FACTOR,
    CONTAINMENT_TOLERANCE,
    REPORTS_DIR,
    VIEWPORT_HEIGHT_PX,
    VIEWPORT_MARGIN_PX,
    VIEWPORT_WIDTH_PX,
)
from riversense.core.types import LabelPlacement, PolygonData

SCHEMA_VERSION = "1.0"


def containment_status(placement: LabelPlacement) -> str:
    return "STRICTLY INSIDE" if placement.is_inside else "OUTSIDE BOUNDARY"


def analytics_dict(placement: LabelPlacement) -> dict:
    """Values shown in the analytics panel: orientation, fitted size, boundary integrity."""
    return {
        "rotation_deg": round(placement.rotation_deg, 1),
        "fitted_font_size": round(placement.font_size, 1),
        "is_inside": placement.is_inside,
        "boundary_integrity": containment_status(placement),
        "method": placement.method,
        "text_box": {"width": placement.text_width, "height": placement.text_height},
        "min_clearance": placement.min_clearance,
    }


def placement_to_dict(river: PolygonData, placement: LabelPlacement, text: str) -> dict:
    """Structure of placement.json."""
    b = river.bounds
    return {
        "schema_version": SCHEMA_VERSION,
        "label": {
            "text": text,
            "font_size": placement.font_size,
        },
        "input": {
            "name": river.name,
            "point_count": len(river.points),
            "bounds": {
                "min_x": b.min_x,
                "min_y": b.min_y,
                "max_x": b.max_x,
                "max_y": b.max_y,
                "width": b.width,
                "height": b.height,
            },
        },
        "result": {
            "method": placement.method,
            "position": {"x": placement.position.x, "y": placement.position.y},
            "rotation_deg": placement.rotation_deg,
            "text_width": placement.text_width,
            "text_height": placement.text_height,
            "is_inside": placement.is_inside,
        },
        "analytics": analytics_dict(placement),
    }


def run_metadata_dict(
    run_name: str,
    geometry_source: str,
    label_text: str,
    font_size: float,
    show_safety: bool,
    metrics: str,
) -> dict:
    """Timestamp and config snapshot for run_metadata.json."""
    return {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "geometry_source": geometry_source,
        "label_text": label_text,
        "font_size": font_size,
        "show_safety": show_safety,
        "text_metrics": metrics,
        "config": {
            "VIEWPORT_WIDTH_PX": VIEWPORT_WIDTH_PX,
            "VIEWPORT_HEIGHT_PX": VIEWPORT_HEIGHT_PX,
            "VIEWPORT_MARGIN_PX": VIEWPORT_MARGIN_PX,
            "CHAR_WIDTH_FACTOR": CHAR_WIDTH_FACTOR,
            "CONTAINMENT_TOLERANCE": CONTAINMENT_TOLERANCE,
        },
    }


def ensure_report_dir(
    repo_root: Path,
    run_name: str,
    output_dir: str | None = None,
) -> Path:
    """Create output_dir/<run_name>/ under repo_root; return path. Default output_dir from config."""
    base = output_dir if output_dir is not None else REPORTS_DIR
    out = (repo_root / base).resolve() / run_name
    out.mkdir(parents=True, exist_ok=True)
    return out


def write_placement_json(
    report_dir: Path, river: PolygonData, placement: LabelPlacement, text: str
) -> Path:
    """Write placement.json to report_dir. Returns path to file."""
    path = report_dir / "placement.json"
    data = placement_to_dict(river, placement, text)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


def write_run_metadata_json(
    report_dir: Path,
    run_name: str,
    geometry_source: str,
    label_text: str,
    font_size: float,
    show_safety: bool = False,
    metrics: str = "heuristic",
) -> Path:
    """Write run_metadata.json to report_dir."""
    path = report_dir / "run_metadata.json"
    data = run_metadata_dict(run_name, geometry_source, label_text, font_size, show_safety, metrics)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path
