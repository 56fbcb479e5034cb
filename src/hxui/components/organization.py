"""
Organization components: cards and dividers.

A Card opens a fresh slot registry for its children.  CardHeader, CardFooter
and CardImage fill slots instead of rendering in place; the card then lays
out image, header, body and footer in that fixed order.
"""

from __future__ import annotations

from markupsafe import Markup

from hxui.core.context import RenderContext, SlotRegistry
from hxui.core.html import element

from .base import Component, is_blank


class Card(Component):
    block = "card"

    def render(self, ctx: RenderContext) -> Markup:
        slots = SlotRegistry()
        body = self.render_content(ctx.child(slots=slots))

        attrs = self.base_attributes(self.css())
        attrs.extend(self.htmx_items(ctx))

        parts: list[Markup] = []
        for slot in ("image", "header"):
            fragment = slots.get(slot)
            if fragment is not None:
                parts.append(element("div", [("class", self.element(slot))], fragment))
        if not is_blank(body):
            parts.append(element("div", [("class", self.element("body"))], body))
        footer = slots.get("footer")
        if footer is not None:
            parts.append(element("div", [("class", self.element("footer"))], footer))
        return element("div", attrs, Markup("").join(parts))


class _CardSlot(Component):
    """Child that fills one card slot; outside a card its content passes through."""

    slot: str = ""

    def render(self, ctx: RenderContext) -> Markup:
        content = self.render_content(ctx)
        if ctx.slots is None:
            return content
        ctx.slots.set(self.slot, content)
        return Markup("")


class CardHeader(_CardSlot):
    block = "card"
    slot: str = "header"


class CardFooter(_CardSlot):
    block = "card"
    slot: str = "footer"


class CardImage(Component):
    block = "card"

    src: str = ""
    alt: str = ""

    def render(self, ctx: RenderContext) -> Markup:
        if ctx.slots is None:
            return Markup("")
        ctx.slots.set("image", element("img", [("src", self.src), ("alt", self.alt)]))
        return Markup("")


class Divider(Component):
    block = "divider"

    vertical: bool = False

    def render(self, ctx: RenderContext) -> Markup:
        css = self.css().add_if(self.modifier("vertical"), self.vertical)
        attrs = self.base_attributes(css)
        if not self.vertical:
            return element("hr", attrs)
        attrs.set("role", "separator")
        attrs.set("aria-orientation", "vertical")
        return element("div", attrs, "")
