"""Error types raised while reconciling declaration files."""

from __future__ import annotations

from pathlib import Path


class CssDtsError(RuntimeError):
    """Base class for cssdts failures surfaced to the build host."""


class ConfigurationError(CssDtsError):
    """Raised when loader options or the config file are invalid."""


class DeclarationMissingError(CssDtsError):
    """Raised in verify mode when the declaration file does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            "Generated type declaration does not exist. "
            f"Run the build and commit the type declaration for '{path}'"
        )
        self.path = path


class DeclarationOutdatedError(CssDtsError):
    """Raised in verify mode when the declaration file differs from the rendered one."""

    def __init__(self, path: Path, diff: str) -> None:
        super().__init__(
            "Generated type declaration file is outdated. "
            f"Run the build and commit the updated type declaration for '{path}'\n\n{diff}"
        )
        self.path = path
        self.diff = diff


__all__ = [
    "ConfigurationError",
    "CssDtsError",
    "DeclarationMissingError",
    "DeclarationOutdatedError",
]
