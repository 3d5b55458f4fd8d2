"""Standard filter library.

String filters see the rendering of their input, so ``{{ uppercase(count) }}``
works on numbers and renderables as well as on strings.

    uppercase, lowercase, capitalized     case changes
    HTMLescape, URLescape, javascriptEscape
    isEmpty, isBlank                      booleans for conditional sections
    join(sep, a, b, ...)                  separator-joined rendering
    default(a, b, ...)                    first non-empty argument
"""
from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Dict, List
from urllib.parse import quote

from markupsafe import Markup, escape

from mustache_filters.core.rendering.values import ValueKind, is_empty, value_kind

from .adapters import filter_with_function, string_filter, variadic_filter
from .base import Filter
from .registry import FilterRegistry

_WORD_RE = re.compile(r"\S+")

_JS_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
    "<": "\\u003C",
    ">": "\\u003E",
    "&": "\\u0026",
    "=": "\\u003D",
    "-": "\\u002D",
    ";": "\\u003B",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _capitalize_words(text: str) -> str:
    return _WORD_RE.sub(lambda m: m.group(0).capitalize(), text)


def _html_escape(text: str) -> Markup:
    return escape(text)


def _url_escape(text: str) -> str:
    return quote(text, safe="")


def _javascript_escape(text: str) -> str:
    out: List[str] = []
    for char in text:
        replacement = _JS_ESCAPES.get(char)
        if replacement is not None:
            out.append(replacement)
        elif ord(char) < 0x20:
            out.append(f"\\u{ord(char):04X}")
        else:
            out.append(char)
    return "".join(out)


def _is_blank(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip() == ""
    return is_empty(value)


def _join(arguments: List[Any]) -> List[Any]:
    # The result is a collection: items keep their own rendering and
    # HTML-safety, and are concatenated when the tag renders.
    separator, *items = arguments
    flat: List[Any] = []
    for item in items:
        if value_kind(item) is ValueKind.COLLECTION and not isinstance(item, Mapping):
            flat.extend(item)
        else:
            flat.append(item)
    joined: List[Any] = []
    for index, item in enumerate(flat):
        if index:
            joined.append(separator)
        joined.append(item)
    return joined


def _default(arguments: List[Any]) -> Any:
    for value in arguments:
        if not is_empty(value):
            return value
    return arguments[-1]


uppercase = string_filter(str.upper)
lowercase = string_filter(str.lower)
capitalized = string_filter(_capitalize_words)
html_escape = string_filter(_html_escape)
url_escape = string_filter(_url_escape)
javascript_escape = string_filter(_javascript_escape)
is_empty_filter = filter_with_function(is_empty)
is_blank_filter = filter_with_function(_is_blank)
join = variadic_filter(_join)
default = variadic_filter(_default)

BUILTIN_FILTERS: Dict[str, Filter] = {
    "uppercase": uppercase,
    "lowercase": lowercase,
    "capitalized": capitalized,
    "HTMLescape": html_escape,
    "URLescape": url_escape,
    "javascriptEscape": javascript_escape,
    "isEmpty": is_empty_filter,
    "isBlank": is_blank_filter,
    "join": join,
    "default": default,
}


def register_builtin_filters(registry: FilterRegistry) -> FilterRegistry:
    """Register the standard library into ``registry`` and return it."""
    for name, builtin in BUILTIN_FILTERS.items():
        registry.add(name, builtin)
    return registry


__all__ = ["BUILTIN_FILTERS", "register_builtin_filters"]
