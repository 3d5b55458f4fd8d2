"""Rendering contracts shared by filters and the default renderer.

A Renderable produces text for a tag, given a render context. Producing a
Renderable is cheap: no text is built until ``render()`` is called. Filters
rely on that split to defer work until the surrounding tag actually renders.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, NamedTuple, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .context import RenderContext, Tag


class Rendering(NamedTuple):
    """Text produced by a render, plus whether it is already HTML-safe."""

    text: str
    html_safe: bool = False


@runtime_checkable
class Renderable(Protocol):
    """Anything that can render itself for a tag in a context.

    Implementations raise ``RenderError`` on failure and must let a
    ``RenderError`` coming from nested renders through untouched.
    """

    def render(self, tag: "Tag", context: "RenderContext") -> Rendering:
        ...


RenderFunction = Callable[["Tag", "RenderContext"], Rendering]


class RenderingFunction:
    """Renderable backed by a plain function.

    Example:
        shout = RenderingFunction(lambda tag, ctx: Rendering("HEY"))
        shout.render(tag, context)  # Rendering(text='HEY', html_safe=False)
    """

    def __init__(self, function: RenderFunction) -> None:
        self.function = function

    def render(self, tag: "Tag", context: "RenderContext") -> Rendering:
        return self.function(tag, context)

    def __repr__(self) -> str:
        name = getattr(self.function, "__name__", type(self.function).__name__)
        return f"<RenderingFunction {name}>"


def rendering_function(function: RenderFunction) -> RenderingFunction:
    """Wrap ``function`` so it satisfies the Renderable contract."""
    return RenderingFunction(function)


__all__ = ["Rendering", "Renderable", "RenderFunction", "RenderingFunction", "rendering_function"]
