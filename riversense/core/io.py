# riversense/core/io.py
"""
Load and validate river geometry from WKT.
Supports a single POLYGON((x y, x y, ...)) ring; every coordinate token is validated.
Raises GeometryInputError (a ValueError) with a structured error key on bad input.
"""

from __future__ import annotations

import logging
import math
import re
from pathlib import Path

from riversense.core.config import DEFAULT_SOURCE_NAME, MIN_POLYGON_POINTS
from riversense.core.error_codes import (
    DEGENERATE_GEOMETRY,
    EMPTY_INPUT,
    INVALID_WKT,
    MALFORMED_COORDINATE,
    GeometryInputError,
)
from riversense.core.geometry import compute_bounds
from riversense.core.types import Point, PolygonData

logger = logging.getLogger(__name__)

_PREFIX_RE = re.compile(r"^POLYGON\s*\(\s*\(", re.IGNORECASE)
_SUFFIX_RE = re.compile(r"\)\s*\)$")
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def _resolve_path(path: str | Path, repo_root: Path | None) -> Path:
    """Resolve path; if relative, against repo_root (or cwd if repo_root is None)."""
    p = Path(path)
    if not p.is_absolute() and repo_root is not None:
        p = repo_root / p
    return p.resolve()


def load_wkt(path: str | Path, repo_root: Path | None = None) -> str:
    """
    Read WKT string from a file.
    repo_root is used for repo-relative paths.
    """
    resolved = _resolve_path(path, repo_root)
    if not resolved.exists():
        raise FileNotFoundError(f"Geometry file not found: {resolved}")
    return resolved.read_text(encoding="utf-8-sig").strip()


def _parse_coordinate(token: str, fragment: str, index: int) -> float:
    if not _NUMBER_RE.fullmatch(token):
        raise GeometryInputError(
            MALFORMED_COORDINATE,
            f"Point {index}: {fragment.strip()!r} has non-numeric value {token!r}.",
        )
    value = float(token)
    if not math.isfinite(value):
        raise GeometryInputError(
            MALFORMED_COORDINATE,
            f"Point {index}: {fragment.strip()!r} is out of range.",
        )
    return value


def parse_wkt_polygon(wkt_string: str) -> list[Point]:
    """
    Parse POLYGON((x1 y1, ..., xn yn)) into points in input order.
    The POLYGON keyword is case-insensitive. Each comma-separated fragment must hold
    exactly two numeric tokens; anything else raises MALFORMED_COORDINATE.
    """
    s = (wkt_string or "").strip()
    if not s:
        raise GeometryInputError(EMPTY_INPUT)
    prefix = _PREFIX_RE.match(s)
    suffix = _SUFFIX_RE.search(s)
    if prefix is None or suffix is None or suffix.start() < prefix.end():
        raise GeometryInputError(INVALID_WKT)
    body = s[prefix.end():suffix.start()]

    points: list[Point] = []
    for i, fragment in enumerate(body.split(","), start=1):
        tokens = fragment.split()
        if len(tokens) != 2:
            raise GeometryInputError(
                MALFORMED_COORDINATE,
                f"Point {i}: expected 'x y', got {fragment.strip()!r}.",
            )
        x = _parse_coordinate(tokens[0], fragment, i)
        y = _parse_coordinate(tokens[1], fragment, i)
        points.append(Point(x, y))
    return points


def load_polygon(wkt_string: str, name: str = DEFAULT_SOURCE_NAME) -> PolygonData:
    """
    Parse WKT and validate it as a river polygon.
    Raises GeometryInputError: INVALID_WKT for fewer than MIN_POLYGON_POINTS points,
    DEGENERATE_GEOMETRY for zero width or height.
    """
    points = parse_wkt_polygon(wkt_string)
    if len(points) < MIN_POLYGON_POINTS:
        raise GeometryInputError(INVALID_WKT)
    bounds = compute_bounds(points)
    if bounds.is_degenerate:
        raise GeometryInputError(DEGENERATE_GEOMETRY)
    logger.debug("Parsed %s: %d points, bounds %s", name, len(points), bounds)
    return PolygonData(name=name, points=tuple(points), bounds=bounds)


def load_polygon_file(path: str | Path, repo_root: Path | None = None) -> PolygonData:
    """
    Load river WKT from file; the polygon is named after the file.
    Raises FileNotFoundError if path is missing, GeometryInputError if geometry is invalid.
    """
    wkt_string = load_wkt(path, repo_root)
    return load_polygon(wkt_string, name=Path(path).name)
