"""Extraction for modules that re-export each class as a named export."""

from __future__ import annotations

import json
import re
from typing import Iterator

from .base import Extraction, ExtractionStrategy

# export { _1 as "class" };
_EXPORT_PATTERN = re.compile(r'export { [_a-z0-9]+ as ("[^\\"]+") }')


class NamedExportStrategy(ExtractionStrategy):
    """Reads ``export { local as "key" }`` statements anywhere in the text.

    This is the terminal fallback, so it always reports a match.
    """

    name = "named-exports"

    def extract(self, text: str) -> Extraction:
        return Extraction(strategy=self.name, matched=True, keys=_iter_keys(text))


def _iter_keys(text: str) -> Iterator[str]:
    for match in _EXPORT_PATTERN.finditer(text):
        # strict=False admits raw control characters inside the quoted key.
        yield json.loads(match.group(1), strict=False)
