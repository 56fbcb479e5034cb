"""
Icon component backed by the icon registry.
"""

from __future__ import annotations

import logging

from markupsafe import Markup

from hxui.core.context import RenderContext
from hxui.core.html import element

from . import icons
from .base import Component

logger = logging.getLogger(__name__)


class Icon(Component):
    """Inline SVG icon by registry name.  Unknown names render nothing."""

    block = "icon"

    name: str
    size: str | None = None
    label: str | None = None

    def render(self, ctx: RenderContext) -> Markup:
        content = icons.get(self.name)
        if content is None:
            logger.debug("Unknown icon %r", self.name)
            return Markup("")

        css = self.css()
        if self.size and self.size.strip():
            css.add(self.modifier(self.size.strip().lower()))
        attrs = self.base_attributes(css)
        attrs.extend(
            [
                ("viewBox", "0 0 24 24"),
                ("fill", "none"),
                ("stroke", "currentColor"),
                ("stroke-width", "2"),
                ("stroke-linecap", "round"),
                ("stroke-linejoin", "round"),
            ]
        )
        if self.label and self.label.strip():
            attrs.set("role", "img")
            attrs.set("aria-label", self.label)
        else:
            attrs.set("aria-hidden", "true")
        return element("svg", attrs, content)
