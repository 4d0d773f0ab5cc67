"""Export key extraction from compiled style modules."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence

from .base import Extraction, ExtractionStrategy
from .locals_object import LOCALS_MARKERS, LocalsObjectStrategy
from .named_exports import NamedExportStrategy

DEFAULT_STRATEGIES: Sequence[ExtractionStrategy] = (
    LocalsObjectStrategy(),
    NamedExportStrategy(),
)


def select_extraction(
    text: str, strategies: Sequence[ExtractionStrategy] = DEFAULT_STRATEGIES
) -> Extraction:
    """Return the extraction from the first strategy that recognises ``text``."""
    for strategy in strategies:
        extraction = strategy.extract(text)
        if extraction.matched:
            return extraction
    return Extraction(strategy="none", matched=False, keys=iter(()))


def extract_keys(
    text: str, strategies: Sequence[ExtractionStrategy] = DEFAULT_STRATEGIES
) -> Iterator[str]:
    """Yield export keys in source order, duplicates included."""
    return select_extraction(text, strategies).keys


def collect_keys(keys: Iterable[str]) -> List[str]:
    """Drain ``keys`` into a sorted list without duplicates."""
    return sorted(set(keys))


__all__ = [
    "DEFAULT_STRATEGIES",
    "Extraction",
    "ExtractionStrategy",
    "LOCALS_MARKERS",
    "LocalsObjectStrategy",
    "NamedExportStrategy",
    "collect_keys",
    "extract_keys",
    "select_extraction",
]
