"""Filters for Mustache-style templates.

- base: Filter base class and FilterKind
- adapters: value, string and variadic adapters
- invocation: how the evaluator calls a filter
- registry: named filter registry
- builtin: standard filter library
- loader: layered loading of filter modules
"""
from __future__ import annotations

from .base import Filter, FilterKind
from .adapters import (
    DeferredRendering,
    StringFilter,
    ValueFilter,
    VariadicFilter,
    filter_with_function,
    string_filter,
    variadic_filter,
)
from .invocation import invoke_filter
from .registry import FilterRegistry, as_filter, global_registry, register_filter
from .builtin import BUILTIN_FILTERS, register_builtin_filters
from .loader import load_filters

__all__ = [
    # Base
    "Filter",
    "FilterKind",
    # Adapters
    "DeferredRendering",
    "StringFilter",
    "ValueFilter",
    "VariadicFilter",
    "filter_with_function",
    "string_filter",
    "variadic_filter",
    # Invocation
    "invoke_filter",
    # Registry
    "FilterRegistry",
    "as_filter",
    "global_registry",
    "register_filter",
    # Standard library
    "BUILTIN_FILTERS",
    "register_builtin_filters",
    # Loading
    "load_filters",
]
