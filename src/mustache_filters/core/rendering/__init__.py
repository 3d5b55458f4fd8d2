"""Rendering layer consumed by filters.

- base: Renderable contract and Rendering result
- context: Tag identity and context stack
- values: value variants
- default: default rendering of values and tag output
"""
from __future__ import annotations

from .base import Rendering, Renderable, RenderingFunction, rendering_function
from .context import DEFAULT_DELIMITERS, RenderContext, Tag
from .default import render_tag, render_value
from .values import ValueKind, is_empty, value_kind

__all__ = [
    "Rendering",
    "Renderable",
    "RenderingFunction",
    "rendering_function",
    "DEFAULT_DELIMITERS",
    "RenderContext",
    "Tag",
    "render_tag",
    "render_value",
    "ValueKind",
    "is_empty",
    "value_kind",
]
