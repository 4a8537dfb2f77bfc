"""
Structured error codes for WKT input and placement failures.
Raise GeometryInputError with one of these keys; map to user-facing messages in the session/CLI.
"""

from __future__ import annotations

# Known error keys
EMPTY_INPUT = "empty_input"
INVALID_WKT = "invalid_wkt"
DEGENERATE_GEOMETRY = "degenerate_geometry"
MALFORMED_COORDINATE = "malformed_coordinate"
PARSE_FAILED = "parse_failed"
FILE_NOT_FOUND = "file_not_found"
FILE_UNREADABLE = "file_unreadable"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    FILE_NOT_FOUND: "Geometry file not found.",
    FILE_UNREADABLE: "Geometry file could not be read.",
    EMPTY_INPUT: "Please paste WKT or upload a file.",
    INVALID_WKT: "WKT must be a valid POLYGON format.",
    DEGENERATE_GEOMETRY: "Polygon has zero area or height.",
    MALFORMED_COORDINATE: "WKT contains a malformed coordinate.",
    PARSE_FAILED: "Failed to parse WKT string.",
}


class GeometryInputError(ValueError):
    """Input geometry rejected; error_key is one of the keys above."""

    def __init__(self, error_key: str, detail: str | None = None) -> None:
        self.error_key = error_key
        self.detail = detail
        message = USER_MESSAGES.get(error_key, USER_MESSAGES[PARSE_FAILED])
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)


def user_message(error_key: str | None, fallback: str = "Something went wrong.") -> str:
    """Return a user-facing message for the given error key."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)
