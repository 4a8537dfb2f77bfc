# riversense/core/runner.py
"""
CLI entrypoint: load WKT (inline, file, or the sample river), place the label,
render SVG + PNG, write placement.json and run_metadata.json.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from riversense.core.config import (
    DEFAULT_FONT_SIZE,
    DEFAULT_LABEL_TEXT,
    LOG_LEVEL,
    REPORTS_DIR,
    TEXT_METRICS_MODE,
)
from riversense.core.render import render_png
from riversense.core.render_svg import export_svg
from riversense.core.reporting import (
    analytics_dict,
    ensure_report_dir,
    write_placement_json,
    write_run_metadata_json,
)
from riversense.core.session import AppState, LabelSession

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Centroid river label placement.")
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--wkt", type=str, default=None, help="Inline WKT POLYGON((x y, ...))")
    src.add_argument("--geometry", type=str, default=None, help="River WKT file path (repo-relative)")
    src.add_argument("--sample", action="store_true", help="Use the built-in sample river")
    p.add_argument("--text", type=str, default=DEFAULT_LABEL_TEXT, help="Label text (upper-cased)")
    p.add_argument("--font-size", type=float, default=DEFAULT_FONT_SIZE, dest="font_size", help="Font size (12-80)")
    p.add_argument("--show-safety", action="store_true", dest="show_safety", help="Draw the label collision box")
    p.add_argument("--metrics", choices=("heuristic", "measured"), default=TEXT_METRICS_MODE, help="Text size mode")
    p.add_argument("--run-name", type=str, default="run", dest="run_name", help="Reports subdir name")
    p.add_argument("--output-dir", type=str, default=REPORTS_DIR, dest="output_dir", help="Output directory (repo-relative)")
    p.add_argument("--repo-root", type=str, default=None, dest="repo_root", help="Repo root (default: cwd)")
    return p.parse_args(argv)


async def _load(session: LabelSession, args: argparse.Namespace, repo_root: Path) -> AppState:
    if args.sample:
        return await session.load_sample()
    if args.geometry:
        return await session.load_file(args.geometry, repo_root=repo_root)
    return await session.submit(args.wkt)


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
    args = _parse_args(argv)
    repo_root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()

    session = LabelSession(parse_delay_s=0.0)
    session.set_text(args.text)
    session.set_font_size(args.font_size)
    session.set_metrics(args.metrics)
    if args.show_safety:
        session.toggle_safety()

    state = asyncio.run(_load(session, args, repo_root))
    if state.error is not None or state.river is None or state.placement is None:
        print(state.error or "No geometry.", file=sys.stderr)
        return 2

    report_dir = ensure_report_dir(repo_root, args.run_name, output_dir=args.output_dir)
    svg_path = export_svg(
        state.river, state.placement, state.label_text,
        report_dir / "after.svg", show_safety=state.show_safety,
    )
    png_path = render_png(
        state.river, state.placement, state.label_text,
        report_dir / "after.png", show_safety=state.show_safety,
    )
    placement_path = write_placement_json(report_dir, state.river, state.placement, state.label_text)
    metadata_path = write_run_metadata_json(
        report_dir,
        args.run_name,
        state.river.name,
        state.label_text,
        state.font_size,
        show_safety=state.show_safety,
        metrics=state.metrics,
    )

    for p in (svg_path, png_path, placement_path, metadata_path):
        print(p)
    analytics = analytics_dict(state.placement)
    print("Boundary integrity:", analytics["boundary_integrity"])
    logger.debug("Analytics: %s", analytics)
    return 0


if __name__ == "__main__":
    sys.exit(main())
