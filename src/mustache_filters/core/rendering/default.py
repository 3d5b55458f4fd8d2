"""Default rendering of template values.

``render_value`` is what a tag does with a value when no filter intervenes.
The string filter adapter calls it too, both to obtain the raw text of its
input and to render whatever the transformation returns.
"""
from __future__ import annotations

import logging
from typing import Any, List

from markupsafe import escape

from .base import Rendering
from .context import RenderContext, Tag
from .values import ValueKind, value_kind

logger = logging.getLogger(__name__)


def _text_rendering(value: Any) -> Rendering:
    if isinstance(value, bytes):
        return Rendering(value.decode("utf-8"), False)
    if hasattr(value, "__html__"):
        return Rendering(str(value.__html__()), True)
    return Rendering(str(value), False)


def _scalar_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _as_rendering(result: Any) -> Rendering:
    # Third-party renderables may hand back bare strings.
    if isinstance(result, Rendering):
        return result
    if isinstance(result, tuple) and len(result) == 2 and isinstance(result[1], bool):
        return Rendering(str(result[0]), result[1])
    return _text_rendering(result)


def _render_collection(items: Any, tag: Tag, context: RenderContext) -> Rendering:
    renderings: List[Rendering] = [render_value(item, tag, context) for item in items]
    if any(r.html_safe for r in renderings):
        text = "".join(r.text if r.html_safe else str(escape(r.text)) for r in renderings)
        return Rendering(text, True)
    return Rendering("".join(r.text for r in renderings), False)


def render_value(value: Any, tag: Tag, context: RenderContext) -> Rendering:
    """Render ``value`` for ``tag`` without HTML-escaping it.

    Raises:
        RenderError: propagated unchanged from renderable values.
    """
    kind = value_kind(value)
    if kind is ValueKind.ABSENT:
        return Rendering("", False)
    if kind is ValueKind.TEXT:
        return _text_rendering(value)
    if kind is ValueKind.RENDERABLE:
        return _as_rendering(value.render(tag, context))
    if kind is ValueKind.COLLECTION:
        return _render_collection(value, tag, context)
    return Rendering(_scalar_text(value), False)


def render_tag(tag: Tag, value: Any, context: RenderContext) -> str:
    """Render ``value`` as the output of ``tag``, escaping it when required."""
    rendering = render_value(value, tag, context)
    if tag.escapes_html and not rendering.html_safe:
        logger.debug("Escaping output of %s", tag.describe())
        return str(escape(rendering.text))
    return rendering.text


__all__ = ["render_value", "render_tag"]
