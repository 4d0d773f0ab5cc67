"""Reconciliation of rendered declarations against files on disk."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, List, Mapping, Optional, Sequence, Tuple, Union

from .compare import render_diff, texts_equal
from .config import LoaderOptions, validate_mode
from .errors import DeclarationMissingError, DeclarationOutdatedError
from .extractors import DEFAULT_STRATEGIES, ExtractionStrategy, collect_keys, select_extraction
from .logging import get_logger
from .paths import declaration_path_for
from .render import render_declaration


class DeclarationFile:
    """UTF-8 file handle for a single declaration path."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def read(self) -> str:
        # newline="" keeps CRLF intact so comparison sees the bytes on disk.
        with self.path.open("r", encoding="utf-8", newline="") as handle:
            return handle.read()

    def write(self, text: str) -> None:
        with self.path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(text)


@dataclass
class ReconcileOutcome:
    """Result of reconciling one compiled module."""

    content: str
    declaration_path: Path
    keys: List[str]
    written: bool
    passthrough: Tuple[Any, ...] = field(default_factory=tuple)


class Reconciler:
    """Keeps ``<resource>.d.ts`` in step with a compiled CSS module."""

    def __init__(
        self,
        file_factory: Callable[[Path], DeclarationFile] = DeclarationFile,
        strategies: Sequence[ExtractionStrategy] = DEFAULT_STRATEGIES,
    ) -> None:
        self.file_factory = file_factory
        self.strategies = strategies
        self.logger = get_logger("reconciler")

    def reconcile(
        self,
        content: str,
        resource_path: Union[str, Path],
        *passthrough: Any,
        options: Union[LoaderOptions, Mapping[str, Any], None] = None,
    ) -> ReconcileOutcome:
        """Render the declaration for ``content`` and apply the configured mode."""
        if not isinstance(options, LoaderOptions):
            options = LoaderOptions.from_mapping(options)
        mode = validate_mode(options.mode)

        declaration_path = declaration_path_for(resource_path)
        extraction = select_extraction(content, self.strategies)
        keys = collect_keys(extraction.keys)
        self.logger.debug(
            "Extracted %d key(s) from %s using %s", len(keys), resource_path, extraction.strategy
        )
        expected = render_declaration(keys, named_exports=options.named_exports)
        handle = self.file_factory(declaration_path)

        if mode == "verify":
            written = self._verify(handle, expected)
        else:
            written = self._emit(handle, expected)

        return ReconcileOutcome(
            content=content,
            declaration_path=declaration_path,
            keys=keys,
            written=written,
            passthrough=tuple(passthrough),
        )

    def _verify(self, handle: DeclarationFile, expected: str) -> bool:
        try:
            existing = handle.read()
        except FileNotFoundError as exc:
            raise DeclarationMissingError(handle.path) from exc

        if not texts_equal(expected, existing):
            diff = render_diff(existing, expected, label=handle.path.name)
            raise DeclarationOutdatedError(handle.path, diff)

        self.logger.debug("Declaration %s is up to date", handle.path)
        return False

    def _emit(self, handle: DeclarationFile, expected: str) -> bool:
        existing: Optional[str]
        try:
            existing = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            # Emit treats any unreadable file as absent and regenerates it.
            self.logger.debug("Treating %s as absent: %s", handle.path, exc)
            existing = None

        if texts_equal(expected, existing):
            self.logger.debug("Declaration %s unchanged; skipping write", handle.path)
            return False

        handle.write(expected)
        self.logger.debug("Declaration written to %s", handle.path)
        return True


__all__ = ["DeclarationFile", "ReconcileOutcome", "Reconciler"]
