"""Build-hook entry points that wrap the reconciler for a host pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Tuple, Union

from .reconciler import Reconciler

Callback = Callable[..., None]


def load(
    content: str,
    *rest: Any,
    resource_path: Union[str, Path],
    options: Optional[Mapping[str, Any]] = None,
    reconciler: Optional[Reconciler] = None,
) -> Tuple[Any, ...]:
    """Reconcile the declaration for ``content`` and hand the inputs back unchanged."""
    outcome = (reconciler or Reconciler()).reconcile(
        content, resource_path, *rest, options=options
    )
    return (outcome.content, *outcome.passthrough)


def load_async(
    callback: Callback,
    content: str,
    *rest: Any,
    resource_path: Union[str, Path],
    options: Optional[Mapping[str, Any]] = None,
    reconciler: Optional[Reconciler] = None,
) -> None:
    """Callback-style variant: ``callback(error)`` or ``callback(None, content, *rest)``."""
    try:
        result = load(
            content, *rest, resource_path=resource_path, options=options, reconciler=reconciler
        )
    except Exception as exc:
        callback(exc)
        return
    callback(None, *result)


__all__ = ["load", "load_async"]
