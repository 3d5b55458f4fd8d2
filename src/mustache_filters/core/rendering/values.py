"""Closed set of value variants understood by the default renderer."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from .base import Renderable


class ValueKind(Enum):
    """Variant of a template value, as seen by the renderer."""

    ABSENT = "absent"
    TEXT = "text"
    SCALAR = "scalar"
    RENDERABLE = "renderable"
    COLLECTION = "collection"


def value_kind(value: Any) -> ValueKind:
    """Classify ``value``.

    Order matters: strings are iterable and renderables may be, so both are
    checked before collections. Mappings render as scalars, and so do
    classes, even those defining ``render`` or ``__html__``.
    """
    if value is None:
        return ValueKind.ABSENT
    if isinstance(value, type):
        return ValueKind.SCALAR
    if isinstance(value, (str, bytes)) or hasattr(value, "__html__"):
        return ValueKind.TEXT
    if isinstance(value, Renderable):
        return ValueKind.RENDERABLE
    if isinstance(value, Mapping):
        return ValueKind.SCALAR
    if isinstance(value, Iterable):
        return ValueKind.COLLECTION
    return ValueKind.SCALAR


def is_empty(value: Any) -> bool:
    """True for values a template treats as empty.

    None, False, zero, empty strings and empty collections are empty.
    Renderables never are: their text is unknown until they render.
    """
    kind = value_kind(value)
    if kind is ValueKind.ABSENT:
        return True
    if kind is ValueKind.TEXT:
        return len(value) == 0 if isinstance(value, (str, bytes)) else value.__html__() == ""
    if kind is ValueKind.COLLECTION:
        if hasattr(value, "__len__"):
            return len(value) == 0
        return False
    if kind is ValueKind.SCALAR:
        if isinstance(value, Mapping):
            return len(value) == 0
        if isinstance(value, (bool, int, float)):
            return not value
    return False


__all__ = ["ValueKind", "value_kind", "is_empty"]
