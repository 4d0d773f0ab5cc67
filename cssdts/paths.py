"""Declaration path resolution."""

from __future__ import annotations

from pathlib import Path

DECLARATION_SUFFIX = ".d.ts"


def declaration_path_for(resource_path: str | Path) -> Path:
    """Return the companion declaration path beside ``resource_path``.

    The suffix is appended to the full filename, so ``button.module.css``
    maps to ``button.module.css.d.ts``.
    """
    path = Path(resource_path)
    return path.with_name(f"{path.name}{DECLARATION_SUFFIX}")


__all__ = ["DECLARATION_SUFFIX", "declaration_path_for"]
