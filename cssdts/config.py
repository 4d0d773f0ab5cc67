"""Loader options and configuration loading for cssdts (.cssdts.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .errors import ConfigurationError

MODES = ("emit", "verify")
DEFAULT_MODE = "emit"

CONFIG_FILENAME = ".cssdts.yml"
MODE_ENV_VAR = "CSSDTS_MODE"


@dataclass(frozen=True)
class LoaderOptions:
    """Options recognised by the build hook for a single invocation."""

    mode: str = DEFAULT_MODE
    named_exports: bool = False

    @classmethod
    def from_mapping(cls, raw: Optional[Mapping[str, Any]]) -> "LoaderOptions":
        """Coerce host-supplied options (``mode``, ``namedExports``) into LoaderOptions.

        The mode is carried through as given; callers validate it with
        :func:`validate_mode` before doing any work.
        """
        if raw is None:
            return cls()
        mode = raw.get("mode")
        named = raw.get("namedExports", raw.get("named_exports"))
        return cls(
            mode=DEFAULT_MODE if mode is None else str(mode),
            named_exports=_as_bool(named) or False,
        )


@dataclass
class CssDtsConfig:
    """Represents the settings defined in .cssdts.yml."""

    root: Path
    options: LoaderOptions = field(default_factory=LoaderOptions)


def validate_mode(mode: str) -> str:
    """Return ``mode`` when it is a known reconciliation mode."""
    if mode not in MODES:
        raise ConfigurationError(f"Invalid mode option: {mode}")
    return mode


def load_config(config_path: Path) -> CssDtsConfig:
    """Load configuration from disk, applying the CSSDTS_MODE override.

    The mode is not validated here; the reconciler rejects unknown modes
    before touching the filesystem, so an unused value never fails a run.
    """
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    data: Dict[str, Any] = {}
    if config_file.exists():
        data = _read_config(config_file)

    env_mode = os.environ.get(MODE_ENV_VAR)
    if env_mode:
        data = {**data, "mode": env_mode.strip()}

    return CssDtsConfig(root=root, options=LoaderOptions.from_mapping(data))


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse {path.name}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigurationError(f"{path.name} must contain a mapping at the root")
    return loaded


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = [
    "CONFIG_FILENAME",
    "CssDtsConfig",
    "DEFAULT_MODE",
    "LoaderOptions",
    "MODES",
    "load_config",
    "validate_mode",
]
