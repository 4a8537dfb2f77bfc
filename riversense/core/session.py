# riversense/core/session.py
"""
Application state and the parse/placement session.

State contract:
- AppState is the single mutable record; apply_event is the only way parse requests, parse
  outcomes and rejected input reach it.
- Every parse request gets a new request_id. A ParseSucceeded/ParseFailed whose request_id
  is not the current one is stale and dropped, so an older request can never overwrite newer input.
- LabelSession runs each parse as an asyncio task; a new request cancels the in-flight one.
- A failed parse clears the previous river and placement; the session stays usable.
- Label text, font size and the safety toggle recompute the placement for the current river.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from riversense.core.config import (
    DEFAULT_FONT_SIZE,
    DEFAULT_LABEL_TEXT,
    DEFAULT_SOURCE_NAME,
    PARSE_DELAY_S,
    SAMPLE_NAME,
    SAMPLE_WKT,
    TEXT_METRICS_MODE,
)
from riversense.core.error_codes import (
    EMPTY_INPUT,
    FILE_NOT_FOUND,
    FILE_UNREADABLE,
    PARSE_FAILED,
    GeometryInputError,
    user_message,
)
from riversense.core.io import load_polygon, load_wkt
from riversense.core.placement import clamp_font_size, normalize_label_text, place_label
from riversense.core.reporting import analytics_dict
from riversense.core.render_svg import render_svg
from riversense.core.types import LabelPlacement, PolygonData

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseRequested:
    request_id: int
    wkt: str
    source_name: str


@dataclass(frozen=True)
class ParseSucceeded:
    request_id: int
    river: PolygonData


@dataclass(frozen=True)
class ParseFailed:
    request_id: int
    error_key: str
    message: str


@dataclass(frozen=True)
class InputRejected:
    """Input refused before any parse ran (e.g. empty text). The current river is kept."""
    request_id: int
    error_key: str
    message: str


SessionEvent = Union[ParseRequested, ParseSucceeded, ParseFailed, InputRejected]


@dataclass
class AppState:
    wkt_input: str = ""
    label_text: str = DEFAULT_LABEL_TEXT
    font_size: float = DEFAULT_FONT_SIZE
    show_safety: bool = False
    metrics: str = TEXT_METRICS_MODE
    river: PolygonData | None = None
    placement: LabelPlacement | None = None
    error: str | None = None
    error_key: str | None = None
    is_processing: bool = False
    request_id: int = 0


def refresh_placement(state: AppState) -> None:
    """Recompute the placement for the current river, text and size."""
    if state.river is None:
        state.placement = None
        return
    state.placement = place_label(state.river, state.label_text, state.font_size, metrics=state.metrics)


def apply_event(state: AppState, event: SessionEvent) -> bool:
    """Apply one transition. Returns False when the event is stale and was ignored."""
    if isinstance(event, ParseRequested):
        state.request_id = event.request_id
        state.wkt_input = event.wkt
        state.is_processing = True
        state.error = None
        state.error_key = None
        state.placement = None
        return True
    if isinstance(event, InputRejected):
        state.request_id = event.request_id
        state.is_processing = False
        state.error = event.message
        state.error_key = event.error_key
        return True
    if event.request_id != state.request_id:
        logger.debug("Dropping stale %s for request %d (current %d)",
                     type(event).__name__, event.request_id, state.request_id)
        return False
    state.is_processing = False
    if isinstance(event, ParseSucceeded):
        state.river = event.river
        refresh_placement(state)
        return True
    state.river = None
    state.placement = None
    state.error = event.message
    state.error_key = event.error_key
    return True


def parse_event(request_id: int, wkt: str, source_name: str) -> ParseSucceeded | ParseFailed:
    """Run the parse and wrap the outcome as an event. Never raises for bad input."""
    try:
        river = load_polygon(wkt, name=source_name)
    except GeometryInputError as e:
        logger.warning("Rejected WKT from %s: %s", source_name, e)
        return ParseFailed(request_id, e.error_key, str(e))
    except Exception:
        logger.warning("Failed to parse WKT from %s", source_name, exc_info=True)
        return ParseFailed(request_id, PARSE_FAILED, user_message(PARSE_FAILED))
    return ParseSucceeded(request_id, river)


class LabelSession:
    """Drives AppState from user actions on a single asyncio event loop."""

    def __init__(
        self,
        state: AppState | None = None,
        parse_delay_s: float = PARSE_DELAY_S,
    ) -> None:
        self.state = state if state is not None else AppState()
        self.parse_delay_s = parse_delay_s
        self._task: asyncio.Task | None = None
        self._next_request_id = self.state.request_id

    def _new_request_id(self) -> int:
        self._next_request_id += 1
        return self._next_request_id

    def cancel(self) -> None:
        """Cancel the in-flight parse, if any."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    def dispatch(self, event: SessionEvent) -> bool:
        return apply_event(self.state, event)

    def _fail_without_parse(self, error_key: str, message: str) -> None:
        self.cancel()
        request_id = self._new_request_id()
        self.dispatch(ParseRequested(request_id, self.state.wkt_input, ""))
        self.dispatch(ParseFailed(request_id, error_key, message))

    def request_parse(self, wkt: str, source_name: str = DEFAULT_SOURCE_NAME) -> asyncio.Task | None:
        """
        Start a parse of wkt, invalidating any earlier request.
        Must be called with a running event loop. Returns the task, or None for empty input.
        """
        if not (wkt or "").strip():
            self.cancel()
            self.dispatch(InputRejected(self._new_request_id(), EMPTY_INPUT, user_message(EMPTY_INPUT)))
            return None
        self.cancel()
        request_id = self._new_request_id()
        self.dispatch(ParseRequested(request_id, wkt, source_name))
        self._task = asyncio.get_running_loop().create_task(
            self._run_parse(request_id, wkt, source_name)
        )
        return self._task

    async def _run_parse(self, request_id: int, wkt: str, source_name: str) -> None:
        if self.parse_delay_s > 0:
            await asyncio.sleep(self.parse_delay_s)
        self.dispatch(parse_event(request_id, wkt, source_name))

    async def submit(self, wkt: str, source_name: str = DEFAULT_SOURCE_NAME) -> AppState:
        """Request a parse and wait for it (or for its cancellation by a newer request)."""
        task = self.request_parse(wkt, source_name)
        if task is not None:
            await asyncio.wait({task})
        return self.state

    async def load_file(self, path: str | Path, repo_root: Path | None = None) -> AppState:
        """Read WKT from a file and parse it, naming the river after the file."""
        try:
            content = load_wkt(path, repo_root)
        except FileNotFoundError as e:
            logger.warning("%s", e)
            self._fail_without_parse(FILE_NOT_FOUND, user_message(FILE_NOT_FOUND))
            return self.state
        except UnicodeDecodeError as e:
            logger.warning("Geometry file %s is not UTF-8 text: %s", path, e)
            self._fail_without_parse(PARSE_FAILED, user_message(PARSE_FAILED))
            return self.state
        except OSError as e:
            logger.warning("Cannot read geometry file %s: %s", path, e)
            self._fail_without_parse(FILE_UNREADABLE, user_message(FILE_UNREADABLE))
            return self.state
        return await self.submit(content, Path(path).name)

    async def load_sample(self) -> AppState:
        return await self.submit(SAMPLE_WKT, SAMPLE_NAME)

    def set_text(self, text: str) -> None:
        self.state.label_text = normalize_label_text(text)
        refresh_placement(self.state)

    def set_font_size(self, font_size: float) -> None:
        self.state.font_size = clamp_font_size(font_size)
        refresh_placement(self.state)

    def set_metrics(self, metrics: str) -> None:
        self.state.metrics = metrics
        refresh_placement(self.state)

    def toggle_safety(self) -> bool:
        self.state.show_safety = not self.state.show_safety
        return self.state.show_safety

    def analytics(self) -> dict | None:
        if self.state.placement is None:
            return None
        return analytics_dict(self.state.placement)

    def render(self) -> str | None:
        """SVG for the current state, or None when there is nothing to draw."""
        if self.state.river is None or self.state.is_processing:
            return None
        return render_svg(
            self.state.river,
            self.state.placement,
            self.state.label_text,
            show_safety=self.state.show_safety,
        )
