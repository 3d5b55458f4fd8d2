"""Bundled defaults and schemas, read through importlib.resources."""

from __future__ import annotations

import copy
from functools import lru_cache
from importlib import resources
from typing import Any

import yaml


@lru_cache(maxsize=8)
def _parse(subpackage: str, filename: str) -> dict[str, Any]:
    text = (resources.files(__name__) / subpackage / filename).read_text(encoding="utf-8")
    return yaml.safe_load(text) or {}


def read_yaml(subpackage: str, filename: str) -> dict[str, Any]:
    """Return a fresh copy of a bundled YAML mapping, e.g. ``("config", "filters.yaml")``."""
    return copy.deepcopy(_parse(subpackage, filename))


__all__ = ["read_yaml"]
