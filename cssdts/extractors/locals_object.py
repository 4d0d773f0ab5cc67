"""Extraction for modules that assign a locals object literal."""

from __future__ import annotations

import re
from typing import Iterator, Sequence

from .base import Extraction, ExtractionStrategy

# // Exports
# ___CSS_LOADER_EXPORT___.locals = {
#   "class": `class__file`,
LOCALS_MARKERS: Sequence[str] = (
    "exports.locals = {",
    "___CSS_LOADER_EXPORT___.locals = {",
)

_KEY_PATTERN = re.compile(r'"([^\\"]+)":')


class LocalsObjectStrategy(ExtractionStrategy):
    """Reads quoted keys following the first locals marker found in the text."""

    name = "locals"

    def __init__(self, markers: Sequence[str] = LOCALS_MARKERS) -> None:
        self.markers = tuple(markers)

    def extract(self, text: str) -> Extraction:
        for marker in self.markers:
            _, found, tail = text.partition(marker)
            if found:
                return Extraction(strategy=self.name, matched=True, keys=_iter_keys(tail))
        return Extraction(strategy=self.name, matched=False, keys=iter(()))


def _iter_keys(tail: str) -> Iterator[str]:
    for match in _KEY_PATTERN.finditer(tail):
        yield match.group(1)
