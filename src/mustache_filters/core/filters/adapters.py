"""Adapters turning plain functions into filters.

Three constructors cover the common cases:

    filter_with_function(fn)   fn(value) -> value
    string_filter(fn)          fn(rendered text) -> value
    variadic_filter(fn)        fn([arg1, arg2, ...]) -> value

String filters are the subtle ones. When a filter is applied, no tag or
context exists yet, so the input cannot be rendered. ``StringFilter.apply``
therefore returns a ``DeferredRendering`` that renders the input, and
transforms the text, only once the surrounding tag renders.
"""
from __future__ import annotations

from typing import Any, Callable, List, Sequence

from mustache_filters.core.rendering.base import Rendering
from mustache_filters.core.rendering.context import RenderContext, Tag
from mustache_filters.core.rendering.default import render_value

from .base import Filter, FilterKind

ValueFunction = Callable[[Any], Any]
StringFunction = Callable[[str], Any]
VariadicFunction = Callable[[List[Any]], Any]


def _function_name(function: Callable[..., Any]) -> str:
    return getattr(function, "__name__", type(function).__name__)


class ValueFilter(Filter):
    """Filter whose ``apply`` is exactly the wrapped function."""

    kind = FilterKind.VALUE

    def __init__(self, function: ValueFunction) -> None:
        self.function = function

    def apply(self, value: Any) -> Any:
        return self.function(value)

    def get_name(self) -> str:
        return _function_name(self.function)

    def __repr__(self) -> str:
        return f"<ValueFilter {self.get_name()}>"


class DeferredRendering:
    """Renderable produced by a string filter.

    Holds the filter input and the string transformation. Nothing is
    rendered until ``render()`` runs; then the input is rendered once, raw,
    with the tag and context of the outer render.
    """

    def __init__(self, value: Any, transform: StringFunction) -> None:
        self.value = value
        self.transform = transform

    def render(self, tag: Tag, context: RenderContext) -> Rendering:
        # A RenderError here leaves before transform() is ever called.
        rendering = render_value(self.value, tag, context)
        result = self.transform(rendering.text)
        # The result re-enters default rendering: it may be text, a scalar,
        # or another renderable (including another DeferredRendering).
        return render_value(result, tag, context)

    def __repr__(self) -> str:
        return f"<DeferredRendering {_function_name(self.transform)}({self.value!r})>"


class StringFilter(Filter):
    """Filter that transforms the rendering of its input.

    The transformation always receives a string: the text the input would
    have rendered to in the tag, before any HTML escaping.
    """

    kind = FilterKind.STRING

    def __init__(self, transform: StringFunction) -> None:
        self.transform = transform

    def apply(self, value: Any) -> DeferredRendering:
        return DeferredRendering(value, self.transform)

    def get_name(self) -> str:
        return _function_name(self.transform)

    def __repr__(self) -> str:
        return f"<StringFilter {self.get_name()}>"


class VariadicFilter(Filter):
    """Filter invoked once per call with all of its arguments.

    ``{{ f(a) }}``, ``{{ f(a,b) }}`` and ``{{ f(a,b,c) }}`` give the function
    lists of 1, 2 and 3 values. Checking the count is up to the function.
    """

    kind = FilterKind.VARIADIC

    def __init__(self, function: VariadicFunction) -> None:
        self.function = function

    def apply(self, value: Any) -> Any:
        return self.function([value])

    def apply_arguments(self, arguments: Sequence[Any]) -> Any:
        return self.function(list(arguments))

    def get_name(self) -> str:
        return _function_name(self.function)

    def __repr__(self) -> str:
        return f"<VariadicFilter {self.get_name()}>"


def filter_with_function(function: ValueFunction) -> ValueFilter:
    """Return a filter that calls ``function`` with its input.

    Should the filter process strings, prefer ``string_filter``: it is given
    the rendering of the input rather than ``str()`` of the raw value.
    """
    return ValueFilter(function)


def string_filter(transform: StringFunction) -> StringFilter:
    """Return a filter that applies ``transform`` to the rendering of its input.

    For ``{{ f(x) }}`` where ``x`` is a number, ``transform`` receives the
    rendered number. It may return a string, any other value, or a renderable;
    the result is rendered like any tag value.
    """
    return StringFilter(transform)


def variadic_filter(function: VariadicFunction) -> VariadicFilter:
    """Return a filter that calls ``function`` with the list of call arguments."""
    return VariadicFilter(function)


__all__ = [
    "ValueFunction",
    "StringFunction",
    "VariadicFunction",
    "ValueFilter",
    "DeferredRendering",
    "StringFilter",
    "VariadicFilter",
    "filter_with_function",
    "string_filter",
    "variadic_filter",
]
