"""Core library: filters, rendering, expression evaluation and configuration."""
from __future__ import annotations

from . import errors  # noqa: F401
from .filters import (
    Filter,
    FilterKind,
    FilterRegistry,
    filter_with_function,
    global_registry,
    invoke_filter,
    register_filter,
    string_filter,
    variadic_filter,
)
from .rendering import Rendering, Renderable, RenderContext, Tag, render_tag, render_value
from .expressions import ExpressionEvaluator, FilterCall, Identifier, Literal

__all__ = [
    "errors",
    "Filter",
    "FilterKind",
    "FilterRegistry",
    "filter_with_function",
    "global_registry",
    "invoke_filter",
    "register_filter",
    "string_filter",
    "variadic_filter",
    "Rendering",
    "Renderable",
    "RenderContext",
    "Tag",
    "render_tag",
    "render_value",
    "ExpressionEvaluator",
    "FilterCall",
    "Identifier",
    "Literal",
]
