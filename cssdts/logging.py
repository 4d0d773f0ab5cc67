"""Logger setup shared by the cssdts CLI, hook and service."""

from __future__ import annotations

import logging
from pathlib import Path

ROOT_LOGGER = "cssdts"
CONSOLE_FORMAT = "[cssdts] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``cssdts.<name>``, or the package logger when ``name`` is empty."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def resolve_level(*, verbose: bool = False, quiet: bool = False) -> int:
    """DEBUG when verbose, WARNING when quiet, INFO otherwise; verbose wins."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(
    *, verbose: bool = False, quiet: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Attach console (and optionally file) handlers to the package logger.

    Existing handlers are replaced so repeated calls in one process do not
    duplicate output.
    """
    level = resolve_level(verbose=verbose, quiet=quiet)
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    formats = [CONSOLE_FORMAT]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
        formats.append(FILE_FORMAT)

    for handler, fmt in zip(handlers, formats):
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)

    return logger


__all__ = ["configure_logging", "get_logger", "resolve_level"]
