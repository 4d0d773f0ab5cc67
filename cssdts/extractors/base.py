"""Base classes for export key extraction strategies."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator


@dataclass
class Extraction:
    """Outcome of running one strategy against compiled module text.

    ``keys`` is a one-shot iterator in source order and may repeat keys.
    ``matched`` reports whether the strategy recognised its convention, even
    when that convention declares no keys.
    """

    strategy: str
    matched: bool
    keys: Iterator[str]


class ExtractionStrategy(ABC):
    """Contract for strategies that read export keys from compiled module text."""

    name: str

    @abstractmethod
    def extract(self, text: str) -> Extraction:
        """Scan ``text`` and report the keys exported under this convention."""
