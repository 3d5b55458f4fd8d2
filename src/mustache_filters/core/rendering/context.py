"""Tag identity and the variable-resolution context stack.

Both objects are handed through the filter layer untouched; filters treat
them as opaque.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple

DEFAULT_DELIMITERS: Tuple[str, str] = ("{{", "}}")

# Marker returned by _resolve_in when an object has no such key/attribute.
_MISSING = object()


@dataclass(frozen=True)
class Tag:
    """The variable tag being rendered.

    ``expression`` is the tag's source text (``"uppercase(name)"``) and is
    only used for diagnostics. ``escapes_html`` is False for triple-mustache
    (``{{{ ... }}}``) and ampersand tags.
    """

    expression: str = ""
    escapes_html: bool = True
    delimiters: Tuple[str, str] = DEFAULT_DELIMITERS
    line: Optional[int] = None

    def describe(self) -> str:
        """Return the tag as it appears in the template, with its line if known."""
        opening, closing = self.delimiters
        text = f"{opening} {self.expression} {closing}" if self.expression else f"{opening}{closing}"
        if self.line is not None:
            return f"{text} at line {self.line}"
        return text


def _resolve_in(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj[name] if name in obj else _MISSING
    if obj is None or isinstance(obj, (str, bytes, int, float, bool)):
        return _MISSING
    if name.startswith("_"):
        return _MISSING
    return getattr(obj, name, _MISSING)


class RenderContext:
    """Immutable stack of objects used to resolve template identifiers.

    ``push()`` returns a new context; the receiver is left unchanged, so a
    context can be shared by every tag of a render pass.
    """

    __slots__ = ("_stack",)

    def __init__(self, *objects: Any) -> None:
        self._stack: Tuple[Any, ...] = tuple(objects)

    def push(self, obj: Any) -> "RenderContext":
        """Return a new context with ``obj`` on top."""
        context = RenderContext()
        context._stack = self._stack + (obj,)
        return context

    @property
    def top(self) -> Any:
        """The innermost object, or None for an empty context."""
        return self._stack[-1] if self._stack else None

    def lookup(self, name: str) -> Any:
        """Resolve ``name`` from the top of the stack down.

        ``"."`` is the top object. Dotted names (``user.name``) resolve their
        first segment through the stack and the remaining ones on the result.
        Unknown names resolve to None.
        """
        if name == ".":
            return self.top

        first, *rest = name.split(".")
        value: Any = _MISSING
        for obj in reversed(self._stack):
            value = _resolve_in(obj, first)
            if value is not _MISSING:
                break
        if value is _MISSING:
            return None

        for part in rest:
            value = _resolve_in(value, part)
            if value is _MISSING:
                return None
        return value

    def __iter__(self) -> Iterator[Any]:
        return reversed(self._stack)

    def __len__(self) -> int:
        return len(self._stack)

    def __repr__(self) -> str:
        return f"RenderContext(depth={len(self._stack)})"


__all__ = ["DEFAULT_DELIMITERS", "Tag", "RenderContext"]
