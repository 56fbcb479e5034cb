"""Buttons and button groups."""

from __future__ import annotations

from markupsafe import Markup

from hxui.core.context import RenderContext
from hxui.core.html import element
from hxui.core.variants import ButtonVariant, Orientation, Size

from .base import Component


class Button(Component):
    """Styled ``<button>`` with htmx support.

    ``hx=HtmxAttributes(post="", route=RouteTarget(page="/Items/Delete"))``
    posts to the synthesized URL for the page route.
    """

    block = "button"

    variant: ButtonVariant = ButtonVariant.DEFAULT
    size: Size = Size.MEDIUM
    disabled: bool = False
    loading: bool = False
    full_width: bool = False
    icon_only: bool = False
    type: str = "button"
    aria_label: str | None = None

    def render(self, ctx: RenderContext) -> Markup:
        css = (
            self.css()
            .add_variant(self.block_class, self.variant)
            .add_if(self.modifier("small"), self.size is Size.SMALL)
            .add_if(self.modifier("large"), self.size is Size.LARGE)
            .add_if(self.modifier("full"), self.full_width)
            .add_if(self.modifier("icon-only"), self.icon_only)
            .add_if(self.modifier("loading"), self.loading)
            .add_if(self.modifier("disabled"), self.disabled)
        )
        attrs = self.base_attributes(css)
        attrs.set("type", self.type)
        attrs.set("disabled", self.disabled or self.loading)
        if self.aria_label and self.aria_label.strip():
            attrs.set("aria-label", self.aria_label)
        attrs.extend(self.htmx_items(ctx))
        return element("button", attrs, self.render_content(ctx))


class ButtonGroup(Component):
    block = "button-group"

    orientation: Orientation = Orientation.HORIZONTAL
    aria_label: str | None = None

    def render(self, ctx: RenderContext) -> Markup:
        css = self.css().add_if(
            self.modifier("vertical"), self.orientation is Orientation.VERTICAL
        )
        attrs = self.base_attributes(css)
        attrs.set("role", "group")
        if self.aria_label and self.aria_label.strip():
            attrs.set("aria-label", self.aria_label)
        return element("div", attrs, self.render_content(ctx))
