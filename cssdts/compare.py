"""Line-ending-insensitive comparison and diff rendering for declaration text."""

from __future__ import annotations

import difflib
from typing import Optional


def normalize_line_endings(text: Optional[str]) -> Optional[str]:
    """Replace every CRLF with LF; ``None`` is returned unchanged."""
    if text is None:
        return None
    return text.replace("\r\n", "\n")


def texts_equal(first: Optional[str], second: Optional[str]) -> bool:
    return normalize_line_endings(first) == normalize_line_endings(second)


def render_diff(actual: Optional[str], expected: str, *, label: str = "declaration") -> str:
    """Render a unified diff from the existing content to the expected content."""
    existing = normalize_line_endings(actual) or ""
    diff = difflib.unified_diff(
        existing.splitlines(keepends=True),
        (normalize_line_endings(expected) or "").splitlines(keepends=True),
        fromfile=f"{label} (existing)",
        tofile=f"{label} (expected)",
    )
    return "".join(diff)


__all__ = ["normalize_line_endings", "render_diff", "texts_equal"]
