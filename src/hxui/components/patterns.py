"""
htmx interaction patterns: lazy loading and polling.

Both fetch their content from a synthesized route URL and replace
themselves with the response by default.
"""

from __future__ import annotations

from abc import abstractmethod

from markupsafe import Markup
from pydantic import Field

from hxui.core.capabilities import RouteTarget
from hxui.core.context import RenderContext
from hxui.core.html import Attributes, element
from hxui.core.htmx import synthesize_url

from .base import Component


class _RoutedFetch(Component):
    page: str | None = None
    handler: str | None = None
    controller: str | None = None
    action: str | None = None
    route_values: dict[str, str] = Field(default_factory=dict)
    target: str = "this"
    swap: str = "outerHTML"

    def route(self) -> RouteTarget:
        return RouteTarget(
            page=self.page,
            handler=self.handler,
            controller=self.controller,
            action=self.action,
            values=self.route_values,
        )

    @abstractmethod
    def trigger(self) -> str:
        """Value of ``hx-trigger``."""

    def render(self, ctx: RenderContext) -> Markup:
        attrs: Attributes = self.base_attributes(self.css())
        attrs.set("hx-get", synthesize_url(self.route(), ctx.urls))
        attrs.set("hx-trigger", self.trigger())
        attrs.set("hx-target", self.target)
        attrs.set("hx-swap", self.swap)
        return element("div", attrs, self.render_content(ctx))


class LazyLoad(_RoutedFetch):
    """Placeholder that fetches its real content once loaded.

    Children render as the placeholder (typically a Spinner).
    """

    block = "lazy-load"

    load_trigger: str = "load"

    def trigger(self) -> str:
        return self.load_trigger


class Poll(_RoutedFetch):
    """Region refreshed every ``interval`` (an htmx time string such as ``5s``)."""

    block = "poll"

    interval: str = "5s"

    def trigger(self) -> str:
        return f"every {self.interval}"
