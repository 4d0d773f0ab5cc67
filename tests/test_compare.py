"""Tests for line-ending-insensitive comparison."""

from __future__ import annotations

from cssdts.compare import normalize_line_endings, render_diff, texts_equal


def test_normalize_replaces_crlf_only() -> None:
    assert normalize_line_endings("a\r\nb\r\n") == "a\nb\n"
    assert normalize_line_endings("a\rb") == "a\rb"
    assert normalize_line_endings(None) is None


def test_texts_equal_ignores_crlf_but_nothing_else() -> None:
    assert texts_equal("a\r\nb\n", "a\nb\r\n")
    assert not texts_equal("a\nb\n", "a\nb \n")
    assert not texts_equal("A\n", "a\n")


def test_texts_equal_with_missing_text() -> None:
    assert texts_equal(None, None)
    assert not texts_equal("", None)
    assert not texts_equal("text", None)


def test_render_diff_shows_changed_lines() -> None:
    diff = render_diff("a\r\nb\r\nc\r\n", "a\nc\n", label="x.d.ts")
    lines = diff.splitlines()
    assert lines[0] == "--- x.d.ts (existing)"
    assert lines[1] == "+++ x.d.ts (expected)"
    assert "-b" in lines
    assert not any(line.startswith("+") and not line.startswith("+++") for line in lines)


def test_render_diff_against_missing_content() -> None:
    diff = render_diff(None, "a\n")
    assert "+a" in diff.splitlines()
