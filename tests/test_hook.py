"""Tests for the build-hook entry points."""

from __future__ import annotations

from pathlib import Path

import pytest

from cssdts.errors import ConfigurationError, DeclarationMissingError
from cssdts.hook import load, load_async
from tests._fixtures.module_builder import NAMED_EXPORTS_MODULE


def test_load_returns_content_and_passthrough(tmp_path: Path) -> None:
    resource = tmp_path / "card.css"
    source_map = {"mappings": ""}

    result = load(NAMED_EXPORTS_MODULE, source_map, resource_path=resource)

    assert result == (NAMED_EXPORTS_MODULE, source_map)
    declaration = tmp_path / "card.css.d.ts"
    assert "'my-class': string;" in declaration.read_text(encoding="utf-8")


def test_load_raises_configuration_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        load("", resource_path=tmp_path / "a.css", options={"mode": "bogus"})


def test_load_async_reports_success_through_callback(tmp_path: Path) -> None:
    calls: list[tuple[object, ...]] = []

    load_async(
        lambda *args: calls.append(args),
        NAMED_EXPORTS_MODULE,
        "extra",
        resource_path=str(tmp_path / "card.css"),
    )

    assert calls == [(None, NAMED_EXPORTS_MODULE, "extra")]


def test_load_async_reports_failure_through_callback(tmp_path: Path) -> None:
    calls: list[tuple[object, ...]] = []

    load_async(
        lambda *args: calls.append(args),
        NAMED_EXPORTS_MODULE,
        resource_path=tmp_path / "card.css",
        options={"mode": "verify"},
    )

    assert len(calls) == 1
    assert isinstance(calls[0][0], DeclarationMissingError)
