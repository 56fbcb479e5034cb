"""
Component base classes.

A component is a frozen pydantic model describing one element.  ``render``
takes the current :class:`RenderContext` and returns :class:`Markup`.  Children
are passed positionally and may be components, Markup (trusted) or plain
strings (escaped).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from markupsafe import Markup
from pydantic import BaseModel, ConfigDict, Field

from hxui.core.context import RenderContext, render
from hxui.core.css import ClassBuilder
from hxui.core.html import Attributes
from hxui.core.htmx import HtmxAttributes

CSS_PREFIX = "rhx-"


class Component(BaseModel, ABC):
    """Base for all components.

    Subclasses set ``block`` (the BEM block name without prefix) and
    implement :meth:`render`.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, extra="forbid")

    block: ClassVar[str] = ""

    class_name: str | None = None
    id: str | None = None
    hidden: bool = False
    hx: HtmxAttributes | None = None
    attributes: dict[str, str] = Field(default_factory=dict)  # extra passthrough attributes
    children: tuple[Any, ...] = ()

    def __init__(self, *children: Any, **data: Any) -> None:
        if children:
            data["children"] = tuple(children) + tuple(data.get("children", ()))
        super().__init__(**data)

    # -- BEM names ----------------------------------------------------------

    @property
    def block_class(self) -> str:
        return f"{CSS_PREFIX}{self.block}"

    def modifier(self, name: str) -> str:
        return f"{self.block_class}--{name}"

    def element(self, name: str) -> str:
        return f"{self.block_class}__{name}"

    def css(self) -> ClassBuilder:
        return ClassBuilder(self.block_class)

    # -- attributes ---------------------------------------------------------

    def base_attributes(self, css: ClassBuilder, *, with_id: bool = True) -> Attributes:
        """Wrapper ``class``, ``id`` and ``hidden``, plus passthrough attributes."""
        css.add(self.class_name)
        attrs = Attributes([("class", css.build())])
        if with_id:
            attrs.set("id", self.id or None)
        attrs.set("hidden", self.hidden)
        attrs.extend(self.attributes.items())
        return attrs

    def htmx_items(self, ctx: RenderContext) -> list[tuple[str, str]]:
        if self.hx is None:
            return []
        return self.hx.items(ctx.urls)

    # -- rendering ----------------------------------------------------------

    def render_content(self, ctx: RenderContext) -> Markup:
        return ctx.render_children(self.children)

    @abstractmethod
    def render(self, ctx: RenderContext) -> Markup:
        """Markup for this component in the given scope."""

    def __html__(self) -> str:
        return render(self)


def is_blank(markup: str) -> bool:
    return not markup or not markup.strip()
