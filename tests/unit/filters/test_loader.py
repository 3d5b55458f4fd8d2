"""Tests for layered loading of filter modules."""
from __future__ import annotations

import logging
import textwrap
from pathlib import Path

import pytest

from mustache_filters.core.filters import FilterRegistry, StringFilter, ValueFilter, load_filters


def _write_module(path: Path, body: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(body), encoding="utf-8")


def test_load_filters_registers_functions_and_filter_objects(tmp_path: Path) -> None:
    """Public functions and Filter objects are registered; helpers are not."""
    _write_module(
        tmp_path / "shared" / "text.py",
        """
        from mustache_filters.core.filters import string_filter
        from os.path import basename

        shout = string_filter(lambda text: text.upper() + "!")

        def reverse(value):
            return list(reversed(value))

        def _private(value):
            return value

        CONSTANT = 3
        """,
    )
    registry = FilterRegistry()

    count = load_filters([tmp_path / "shared"], registry)

    assert count == 2
    assert sorted(registry.list_filters()) == ["reverse", "shout"]
    assert isinstance(registry.get("shout"), StringFilter)
    assert isinstance(registry.get("reverse"), ValueFilter)
    assert registry.get("reverse").apply([1, 2]) == [2, 1]


def test_later_layers_override_earlier(tmp_path: Path) -> None:
    """Project filters override shared ones with the same name."""
    _write_module(
        tmp_path / "shared" / "greet.py",
        """
        def greet(value):
            return "shared"
        """,
    )
    _write_module(
        tmp_path / "project" / "greet.py",
        """
        def greet(value):
            return "project"
        """,
    )
    registry = FilterRegistry()

    load_filters([tmp_path / "shared", tmp_path / "project", tmp_path / "absent"], registry)

    assert registry.require("greet").apply(None) == "project"


def test_broken_module_is_skipped(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    _write_module(tmp_path / "layer" / "a_broken.py", "raise RuntimeError('boom')\n")
    _write_module(
        tmp_path / "layer" / "b_good.py",
        """
        def good(value):
            return value
        """,
    )
    _write_module(tmp_path / "layer" / "__init__.py", "def ignored(value):\n    return value\n")
    registry = FilterRegistry()

    with caplog.at_level(logging.WARNING):
        count = load_filters([tmp_path / "layer"], registry)

    assert count == 1
    assert registry.list_filters() == ["good"]
    assert "a_broken.py" in caplog.text
