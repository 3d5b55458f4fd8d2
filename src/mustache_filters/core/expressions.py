"""Evaluation of filter-call expressions.

Parsing is not done here: callers build the node tree themselves (or get it
from a parser) out of three node types.

    FilterCall("uppercase", [Identifier("name")])      {{ uppercase(name) }}
    FilterCall("join", [Literal(", "), Identifier("tags")])

Nested calls are ordinary composition: arguments are evaluated first, left
to right, and the filter receives their values.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple, Union

from mustache_filters.core.errors import FilterCallError, FilterNotFoundError
from mustache_filters.core.filters.base import Filter
from mustache_filters.core.filters.invocation import invoke_filter
from mustache_filters.core.filters.registry import FilterRegistry, global_registry
from mustache_filters.core.rendering.context import RenderContext, Tag
from mustache_filters.core.rendering.default import render_tag

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identifier:
    """A name resolved in the context stack (``"."`` is the top object)."""

    name: str


@dataclass(frozen=True)
class Literal:
    """A constant value."""

    value: Any


@dataclass(frozen=True)
class FilterCall:
    """``name(arg1, arg2, ...)``."""

    name: str
    arguments: Tuple["Expression", ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any sequence; store an immutable tuple.
        object.__setattr__(self, "arguments", tuple(self.arguments))


Expression = Union[Identifier, Literal, FilterCall]


class ExpressionEvaluator:
    """Evaluate expressions against a context, resolving filters by name.

    A Filter found in the context stack under the call name takes
    precedence over the registry, so templates can be given private
    filters through their data. Other context values under that name only
    matter when the registry has no such filter.
    """

    def __init__(self, registry: Optional[FilterRegistry] = None) -> None:
        self.registry = registry if registry is not None else global_registry

    def resolve_filter(self, name: str, context: RenderContext) -> Filter:
        """Return the filter called ``name``.

        Raises:
            FilterNotFoundError: If neither the context nor the registry knows it
            FilterCallError: If ``name`` resolves to something that is not a filter
        """
        candidate = context.lookup(name)
        if isinstance(candidate, Filter):
            return candidate
        registered = self.registry.get(name)
        if registered is not None:
            return registered
        if candidate is None:
            raise FilterNotFoundError(name)
        raise FilterCallError(f"'{name}' is not a filter: {candidate!r}")

    def evaluate(self, expression: Expression, context: RenderContext) -> Any:
        """Return the value of ``expression`` in ``context``."""
        if isinstance(expression, Identifier):
            return context.lookup(expression.name)
        if isinstance(expression, Literal):
            return expression.value
        if isinstance(expression, FilterCall):
            return self._evaluate_call(expression, context)
        raise TypeError(f"unsupported expression: {expression!r}")

    def _evaluate_call(self, call: FilterCall, context: RenderContext) -> Any:
        if not call.arguments:
            raise FilterCallError(f"filter '{call.name}' called without arguments")

        filter = self.resolve_filter(call.name, context)
        if not filter.is_variadic and len(call.arguments) > 1:
            raise FilterCallError(
                f"filter '{call.name}' takes exactly one argument ({len(call.arguments)} given)"
            )

        arguments = tuple(self.evaluate(argument, context) for argument in call.arguments)
        logger.debug("Evaluating %s(%d argument(s))", call.name, len(arguments))
        return invoke_filter(filter, arguments)

    def render(self, tag: Tag, expression: Expression, context: RenderContext) -> str:
        """Evaluate ``expression`` and render it as the output of ``tag``."""
        return render_tag(tag, self.evaluate(expression, context), context)


__all__ = [
    "Identifier",
    "Literal",
    "FilterCall",
    "Expression",
    "ExpressionEvaluator",
]
