"""
Filter configuration (YAML, validated against a bundled JSON schema).

Configuration sources (highest to lowest priority):
1. Environment variables: MUSTACHE_FILTERS_*
2. Explicit overrides passed to FiltersConfig
3. Project config file (``config_path``)
4. Bundled defaults: mustache_filters.data/config/filters.yaml
"""
from __future__ import annotations

import logging
import os
from functools import cached_property
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from mustache_filters.core.errors import FiltersConfigError
from mustache_filters.core.filters.builtin import register_builtin_filters
from mustache_filters.core.filters.loader import load_filters
from mustache_filters.core.filters.registry import FilterRegistry
from mustache_filters.core.rendering.context import Tag
from mustache_filters.data import read_yaml

logger = logging.getLogger(__name__)

try:
    import yaml  # type: ignore
except Exception as err:  # pragma: no cover - surfaced at import time
    raise RuntimeError("PyYAML is required: pip install pyyaml") from err

try:
    from jsonschema import Draft202012Validator  # type: ignore
except Exception as err:  # pragma: no cover - surfaced at import time
    raise RuntimeError("jsonschema is required: pip install jsonschema") from err

ENV_PREFIX = "MUSTACHE_FILTERS_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(name: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise FiltersConfigError(f"{name} must be a boolean, got {raw!r}")


def _env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    """Translate MUSTACHE_FILTERS_* variables into a config overlay."""
    section: Dict[str, Any] = {}
    key = f"{ENV_PREFIX}ESCAPE_HTML"
    if key in environ:
        section["escapeHtml"] = _parse_bool(key, environ[key])
    key = f"{ENV_PREFIX}BUILTINS"
    if key in environ:
        section["builtins"] = _parse_bool(key, environ[key])
    key = f"{ENV_PREFIX}PATHS"
    if key in environ:
        # Appended to configured paths, so an environment layer sits on top.
        section["paths"] = ["+", *(p for p in environ[key].split(os.pathsep) if p)]
    return {"filters": section} if section else {}


def _merge_layer(base: Dict[str, Any], layer: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay ``layer`` on ``base`` without mutating either.

    Keys of the ``filters`` section replace those below them, except a
    ``paths`` list starting with ``"+"``, whose entries are appended.
    """
    merged = {**base, **layer}
    lower, upper = base.get("filters"), layer.get("filters")
    if isinstance(lower, dict) and isinstance(upper, dict):
        section = {**lower, **upper}
        paths = upper.get("paths")
        if isinstance(paths, list) and paths[:1] == ["+"]:
            section["paths"] = [*(lower.get("paths") or []), *paths[1:]]
        merged["filters"] = section
    return merged


def _load_yaml_file(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as err:
        raise FiltersConfigError(f"config file not found: {path}") from err
    except yaml.YAMLError as err:
        raise FiltersConfigError(f"invalid YAML in {path}: {err}") from err
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FiltersConfigError(f"{path} must contain a mapping, got {type(data).__name__}")
    return data


def validate_config(config: Dict[str, Any]) -> None:
    """Validate ``config`` against the bundled schema.

    Raises:
        FiltersConfigError: listing every violation found
    """
    schema = read_yaml("schemas", "filters.schema.yaml")
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(config), key=lambda e: list(e.path))
    if errors:
        details = "; ".join(
            f"{'.'.join(str(p) for p in e.path) or '<root>'}: {e.message}" for e in errors
        )
        raise FiltersConfigError(f"invalid filter configuration: {details}")


class FiltersConfig:
    """Load, merge, and validate filter configuration.

    Usage:
        cfg = FiltersConfig(Path("templates/filters.yaml"))
        registry = cfg.build_registry()
        tag = cfg.tag("uppercase(name)")
    """

    def __init__(
        self,
        config_path: Optional[Path] = None,
        *,
        overrides: Optional[Dict[str, Any]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.config_path = Path(config_path) if config_path is not None else None
        self._overrides = overrides or {}
        self._environ = os.environ if environ is None else environ

    @cached_property
    def data(self) -> Dict[str, Any]:
        """The merged, validated configuration."""
        merged = read_yaml("config", "filters.yaml")
        if self.config_path is not None:
            logger.debug("Loading filter config from %s", self.config_path)
            merged = _merge_layer(merged, _load_yaml_file(self.config_path))
        merged = _merge_layer(merged, self._overrides)
        merged = _merge_layer(merged, _env_overrides(self._environ))
        validate_config(merged)
        return merged

    @property
    def section(self) -> Dict[str, Any]:
        return self.data.get("filters", {}) or {}

    @property
    def escape_html(self) -> bool:
        return bool(self.section.get("escapeHtml", True))

    @property
    def builtins(self) -> bool:
        return bool(self.section.get("builtins", True))

    @property
    def paths(self) -> List[Path]:
        """Filter directories, relative entries resolved against the config file."""
        base = self.config_path.parent if self.config_path is not None else Path.cwd()
        resolved: List[Path] = []
        for entry in self.section.get("paths", []) or []:
            path = Path(entry).expanduser()
            resolved.append(path if path.is_absolute() else base / path)
        return resolved

    def tag(self, expression: str = "", *, line: Optional[int] = None) -> Tag:
        """Return a variable Tag honoring the configured escaping default."""
        return Tag(expression=expression, escapes_html=self.escape_html, line=line)

    def build_registry(self, registry: Optional[FilterRegistry] = None) -> FilterRegistry:
        """Populate ``registry`` (a new one by default) according to the configuration.

        Builtins are registered first so configured filter directories can
        override them.
        """
        target = registry if registry is not None else FilterRegistry()
        if self.builtins:
            register_builtin_filters(target)
        paths = self.paths
        if paths:
            count = load_filters(paths, target)
            logger.debug("Loaded %d filter(s) from %d path(s)", count, len(paths))
        return target


__all__ = ["ENV_PREFIX", "FiltersConfig", "validate_config"]
