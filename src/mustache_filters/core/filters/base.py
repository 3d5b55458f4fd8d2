"""Base class for template filters.

A filter transforms one value into another. ``{{ uppercase(name) }}`` uses
a filter that returns the uppercase version of its input.

Filters are invoked in one of two shapes, chosen by ``kind``:
- VALUE and STRING filters receive exactly one value through ``apply()``
- VARIADIC filters receive the whole argument list of the call expression
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Sequence


class FilterKind(Enum):
    """Which adapter built a filter, and therefore how it is invoked."""

    VALUE = "value"
    STRING = "string"
    VARIADIC = "variadic"


class Filter(ABC):
    """Abstract base class for filters.

    Implementations must tolerate being applied many times with different
    inputs. Purity is expected but not enforced.

    Example:
        class Reverse(Filter):
            def apply(self, value: Any) -> Any:
                return list(reversed(value))
    """

    kind: FilterKind = FilterKind.VALUE

    @abstractmethod
    def apply(self, value: Any) -> Any:
        """Return the transformed value.

        Args:
            value: Any template value, including None

        Returns:
            Any value; strings, numbers, collections and renderables are all valid
        """
        ...

    def apply_arguments(self, arguments: Sequence[Any]) -> Any:
        """Apply the filter to every argument of a call at once.

        Used for VARIADIC filters. Subclasses declaring that kind receive the
        argument list through ``apply()`` unless they override this method.
        """
        return self.apply(list(arguments))

    @property
    def is_variadic(self) -> bool:
        return self.kind is FilterKind.VARIADIC

    def get_name(self) -> str:
        """Get filter name for logging/debugging."""
        return self.__class__.__name__


__all__ = ["Filter", "FilterKind"]
