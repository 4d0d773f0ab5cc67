"""Typed declarations for compiled CSS modules."""

from .errors import (
    ConfigurationError,
    CssDtsError,
    DeclarationMissingError,
    DeclarationOutdatedError,
)
from .hook import load, load_async
from .reconciler import Reconciler, ReconcileOutcome

__all__ = [
    "ConfigurationError",
    "CssDtsError",
    "DeclarationMissingError",
    "DeclarationOutdatedError",
    "Reconciler",
    "ReconcileOutcome",
    "load",
    "load_async",
]
