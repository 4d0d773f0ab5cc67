"""Rendering of TypeScript declaration documents for CSS module exports."""

from __future__ import annotations

from typing import Iterable

BANNER = "// This file is automatically generated.\n// Please do not change this file!"

DEFAULT_EXPORT = "export const cssExports: CssExports;\nexport default cssExports;\n"
NAMED_EXPORT = "export const cssExports: CssExports;\nexport = cssExports;\n"


def render_interface(keys: Iterable[str]) -> str:
    """Render the ``CssExports`` interface with one string field per key."""
    # Keys are embedded verbatim; a quote inside a key is not escaped.
    fields = "\n".join(f"  '{key}': string;" for key in sorted(keys))
    return f"interface CssExports {{\n{fields}\n}}"


def render_declaration(keys: Iterable[str], *, named_exports: bool = False) -> str:
    """Return the full declaration document for ``keys``."""
    export_block = NAMED_EXPORT if named_exports else DEFAULT_EXPORT
    return f"{BANNER}\n{render_interface(keys)}\n{export_block}"


__all__ = [
    "BANNER",
    "DEFAULT_EXPORT",
    "NAMED_EXPORT",
    "render_declaration",
    "render_interface",
]
