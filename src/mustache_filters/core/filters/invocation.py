"""Invocation protocol used by the expression evaluator.

Variadic filters get the full argument list; every other filter gets the
single argument through ``apply()``. Rejecting extra arguments for
non-variadic filters is the evaluator's job and happens before this call.
"""
from __future__ import annotations

import logging
from typing import Any, Sequence

from .base import Filter, FilterKind

logger = logging.getLogger(__name__)


def invoke_filter(filter: Filter, arguments: Sequence[Any]) -> Any:
    """Invoke ``filter`` with the evaluated arguments of one call expression.

    Args:
        filter: The resolved filter
        arguments: Evaluated arguments, in call order (at least one)

    Returns:
        Whatever the filter returns (a value or a renderable)

    Raises:
        ValueError: If ``arguments`` is empty
    """
    if not arguments:
        raise ValueError(f"filter {filter.get_name()} invoked without arguments")

    logger.debug("Invoking %s filter %s with %d argument(s)", filter.kind.value, filter.get_name(), len(arguments))
    if filter.kind is FilterKind.VARIADIC:
        return filter.apply_arguments(arguments)
    return filter.apply(arguments[0])


__all__ = ["invoke_filter"]
