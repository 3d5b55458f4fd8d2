"""Error classes for filter application and rendering."""
from __future__ import annotations

from typing import Any, Optional


class MustacheFilterError(Exception):
    """Base class for all errors raised by this package."""
    pass


class RenderError(MustacheFilterError):
    """Raised when a value cannot be rendered.

    The same instance travels up through every deferred rendering: callers
    never wrap it, so ``tag`` still points at the tag that failed first.
    """

    def __init__(self, message: str, *, tag: Optional[Any] = None) -> None:
        super().__init__(message)
        self.tag = tag


class FilterNotFoundError(MustacheFilterError, KeyError):
    """Raised when a filter name resolves to nothing."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"filter '{self.name}' not found"


class FilterCallError(MustacheFilterError):
    """Raised by the evaluator when a call site is malformed."""
    pass


class FiltersConfigError(MustacheFilterError, ValueError):
    """Raised when filter configuration cannot be loaded or validated."""
    pass


__all__ = [
    "MustacheFilterError",
    "RenderError",
    "FilterNotFoundError",
    "FilterCallError",
    "FiltersConfigError",
]
