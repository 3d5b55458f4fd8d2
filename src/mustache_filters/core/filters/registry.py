"""Named filter registry.

Filters can be registered using the @register decorator:

    registry = FilterRegistry()

    @registry.register("shout", kind=FilterKind.STRING)
    def shout(text: str) -> str:
        return text.upper() + "!"

Plain functions are wrapped by the adapter matching ``kind``; Filter
objects are stored as they are.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Union

from mustache_filters.core.errors import FilterNotFoundError

from .adapters import filter_with_function, string_filter, variadic_filter
from .base import Filter, FilterKind

logger = logging.getLogger(__name__)

FunctionOrFilter = Union[Filter, Callable[..., Any]]

_ADAPTERS: Dict[FilterKind, Callable[[Callable[..., Any]], Filter]] = {
    FilterKind.VALUE: filter_with_function,
    FilterKind.STRING: string_filter,
    FilterKind.VARIADIC: variadic_filter,
}


def as_filter(obj: FunctionOrFilter, kind: FilterKind = FilterKind.VALUE) -> Filter:
    """Return ``obj`` as a Filter, adapting plain callables according to ``kind``."""
    if isinstance(obj, Filter):
        return obj
    if not callable(obj):
        raise TypeError(f"cannot use {obj!r} as a filter: not callable")
    return _ADAPTERS[kind](obj)


class FilterRegistry:
    """Registry mapping filter names to filters."""

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._filters: Dict[str, Filter] = {}

    def register(
        self, name: str, kind: FilterKind = FilterKind.VALUE
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Decorator to register a function as a filter.

        Args:
            name: Name to register the filter under
            kind: Adapter used to wrap the function

        Returns:
            Decorator that registers the function and returns it unchanged
        """
        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self.add(name, func, kind=kind)
            return func
        return decorator

    def add(self, name: str, filter: FunctionOrFilter, kind: FilterKind = FilterKind.VALUE) -> Filter:
        """Add a filter, or a function adapted into one, to the registry.

        A later registration under the same name replaces the earlier one.
        """
        adapted = as_filter(filter, kind)
        if name in self._filters:
            logger.debug("Filter %s overrides %r", name, self._filters[name])
        self._filters[name] = adapted
        logger.debug("Registered %s filter %s", adapted.kind.value, name)
        return adapted

    def get(self, name: str) -> Optional[Filter]:
        """Get a filter by name, or None if not found."""
        return self._filters.get(name)

    def require(self, name: str) -> Filter:
        """Get a filter by name.

        Raises:
            FilterNotFoundError: If no filter is registered under ``name``
        """
        found = self._filters.get(name)
        if found is None:
            raise FilterNotFoundError(name)
        return found

    def remove(self, name: str) -> None:
        """Remove a filter if present."""
        self._filters.pop(name, None)

    def update(self, other: "FilterRegistry") -> None:
        """Copy every filter of ``other`` into this registry."""
        for name in other.list_filters():
            self._filters[name] = other._filters[name]

    def __contains__(self, name: str) -> bool:
        """Check if a filter is registered."""
        return name in self._filters

    def __len__(self) -> int:
        return len(self._filters)

    def list_filters(self) -> List[str]:
        """List all registered filter names."""
        return list(self._filters.keys())


# Global registry for convenience
global_registry = FilterRegistry()


def register_filter(
    name: str, kind: FilterKind = FilterKind.VALUE
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Register a function in the global registry.

    Usage:
        @register_filter("reverse")
        def reverse(value):
            return list(reversed(value))
    """
    return global_registry.register(name, kind=kind)


__all__ = [
    "FunctionOrFilter",
    "as_filter",
    "FilterRegistry",
    "global_registry",
    "register_filter",
]
