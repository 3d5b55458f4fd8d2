"""Tests for FiltersConfig loading, validation and registry building."""
from __future__ import annotations

import os
import textwrap
from pathlib import Path

import pytest

from mustache_filters.core.config import FiltersConfig, validate_config
from mustache_filters.core.errors import FiltersConfigError
from mustache_filters.core.filters import BUILTIN_FILTERS, FilterRegistry


def _write(path: Path, body: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(body), encoding="utf-8")
    return path


class TestDefaults:
    def test_bundled_defaults(self) -> None:
        cfg = FiltersConfig(environ={})

        assert cfg.escape_html is True
        assert cfg.builtins is True
        assert cfg.paths == []

    def test_tag_uses_escaping_default(self) -> None:
        tag = FiltersConfig(overrides={"filters": {"escapeHtml": False}}, environ={}).tag("f(x)", line=2)

        assert tag.escapes_html is False
        assert tag.expression == "f(x)"
        assert tag.line == 2


class TestLayering:
    def test_config_file_overrides_defaults(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "filters.yaml",
            """
            filters:
              escapeHtml: false
              paths:
                - template_filters
                - /abs/filters
            """,
        )

        cfg = FiltersConfig(path, environ={})

        assert cfg.escape_html is False
        assert cfg.builtins is True
        assert cfg.paths == [tmp_path / "template_filters", Path("/abs/filters")]

    def test_empty_config_file(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "filters.yaml", "")
        assert FiltersConfig(path, environ={}).escape_html is True

    def test_overrides_beat_file(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "filters.yaml", "filters:\n  builtins: false\n")
        cfg = FiltersConfig(path, overrides={"filters": {"builtins": True}}, environ={})
        assert cfg.builtins is True

    def test_environment_beats_everything(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "filters.yaml", "filters:\n  escapeHtml: true\n  paths: [a]\n")
        environ = {
            "MUSTACHE_FILTERS_ESCAPE_HTML": "no",
            "MUSTACHE_FILTERS_BUILTINS": "0",
            "MUSTACHE_FILTERS_PATHS": os.pathsep.join(["/x", "/y"]),
        }

        cfg = FiltersConfig(path, environ=environ)

        assert cfg.escape_html is False
        assert cfg.builtins is False
        assert cfg.paths == [tmp_path / "a", Path("/x"), Path("/y")]

    def test_overrides_keep_other_file_keys(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "filters.yaml", "filters:\n  escapeHtml: false\n  paths: [a]\n")

        cfg = FiltersConfig(path, overrides={"filters": {"builtins": False}}, environ={})

        assert cfg.escape_html is False
        assert cfg.builtins is False
        assert cfg.paths == [tmp_path / "a"]

    def test_plus_prefixed_paths_are_appended(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "filters.yaml", "filters:\n  paths: [a]\n")

        appended = FiltersConfig(path, overrides={"filters": {"paths": ["+", "b"]}}, environ={})
        replaced = FiltersConfig(path, overrides={"filters": {"paths": ["b"]}}, environ={})

        assert appended.paths == [tmp_path / "a", tmp_path / "b"]
        assert replaced.paths == [tmp_path / "b"]

    def test_merged_data_does_not_leak_between_instances(self) -> None:
        FiltersConfig(environ={}).data["filters"]["paths"].append("leaked")
        assert FiltersConfig(environ={}).paths == []

    def test_reads_process_environment_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MUSTACHE_FILTERS_ESCAPE_HTML", "false")
        assert FiltersConfig().escape_html is False


class TestValidation:
    def test_wrong_type_rejected(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "filters.yaml", "filters:\n  escapeHtml: maybe\n")

        with pytest.raises(FiltersConfigError, match="filters.escapeHtml"):
            FiltersConfig(path, environ={}).data

    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(FiltersConfigError, match="unknownKey"):
            validate_config({"filters": {"unknownKey": 1}})

    def test_missing_section_rejected(self) -> None:
        with pytest.raises(FiltersConfigError):
            validate_config({})

    def test_invalid_env_boolean(self) -> None:
        with pytest.raises(FiltersConfigError, match="MUSTACHE_FILTERS_BUILTINS"):
            FiltersConfig(environ={"MUSTACHE_FILTERS_BUILTINS": "sometimes"}).data

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FiltersConfigError, match="not found"):
            FiltersConfig(tmp_path / "absent.yaml", environ={}).data

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "filters.yaml", "filters: [unclosed\n")
        with pytest.raises(FiltersConfigError, match="invalid YAML"):
            FiltersConfig(path, environ={}).data

    def test_non_mapping_file(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "filters.yaml", "- a\n- b\n")
        with pytest.raises(FiltersConfigError, match="mapping"):
            FiltersConfig(path, environ={}).data


class TestBuildRegistry:
    def test_builtins_registered(self) -> None:
        registry = FiltersConfig(environ={}).build_registry()
        assert set(registry.list_filters()) == set(BUILTIN_FILTERS)

    def test_builtins_disabled(self) -> None:
        cfg = FiltersConfig(overrides={"filters": {"builtins": False}}, environ={})
        assert len(cfg.build_registry()) == 0

    def test_configured_paths_override_builtins(self, tmp_path: Path) -> None:
        _write(
            tmp_path / "template_filters" / "case.py",
            """
            def uppercase(value):
                return "overridden"
            """,
        )
        path = _write(tmp_path / "filters.yaml", "filters:\n  paths: [template_filters]\n")
        target = FilterRegistry()

        registry = FiltersConfig(path, environ={}).build_registry(target)

        assert registry is target
        assert registry.require("uppercase").apply("x") == "overridden"
        assert "lowercase" in registry
