"""
Navigation components: tab groups, carousels and breadcrumbs.

Tab and BreadcrumbItem children do not render in place.  They register into
the group opened by their parent, which assembles the final structure once
every child has rendered.
"""

from __future__ import annotations

from typing import NamedTuple

from markupsafe import Markup
from pydantic import BaseModel, ConfigDict

from hxui.core.context import GroupRegistry, RenderContext
from hxui.core.css import ClassBuilder
from hxui.core.html import Attributes, element, join
from hxui.core.variants import Orientation, TabActivation, TabPlacement

from . import icons
from .base import Component

TABS_GROUP = "tabs"
CAROUSEL_GROUP = "carousel"
BREADCRUMB_GROUP = "breadcrumb"


# =============================================================================
# Tabs
# =============================================================================


class TabGroup(Component):
    """Tab list plus panel body.

    Child :class:`Tab` components register their buttons into the tab list;
    everything else (normally :class:`TabPanel`) renders into the body.
    """

    block = "tab-group"

    placement: TabPlacement = TabPlacement.TOP
    activation: TabActivation = TabActivation.AUTO
    aria_label: str | None = None

    def render(self, ctx: RenderContext) -> Markup:
        tabs = GroupRegistry(TABS_GROUP)
        body = self.render_content(ctx.child(group=tabs))

        css = self.css().add_if(
            self.modifier(self.placement.value), self.placement is not TabPlacement.TOP
        )
        attrs = self.base_attributes(css)
        attrs.set("data-rhx-tabs", "")
        attrs.set("data-rhx-placement", self.placement)
        if self.activation is not TabActivation.AUTO:
            attrs.set("data-rhx-activation", self.activation)
        attrs.extend(self.htmx_items(ctx))

        vertical = self.placement in (TabPlacement.START, TabPlacement.END)
        nav = Attributes(
            [
                ("class", self.element("nav")),
                ("role", "tablist"),
                ("aria-label", self.aria_label or None),
                ("aria-orientation", "vertical" if vertical else None),
            ]
        )
        parts = [
            element("div", nav, join(tabs.fragments())),
            element("div", [("class", self.element("body"))], body),
        ]
        return element("div", attrs, join(parts))


class Tab(Component):
    """One tab button; ``panel`` names the TabPanel it controls."""

    block = "tab"

    panel: str
    active: bool = False
    disabled: bool = False
    closable: bool = False

    def render(self, ctx: RenderContext) -> Markup:
        group = ctx.group(TABS_GROUP)
        if group is None:
            return Markup("")

        css = (
            self.css()
            .add_if(self.modifier("active"), self.active)
            .add_if(self.modifier("closable"), self.closable)
            .add_if(self.modifier("disabled"), self.disabled)
        )
        attrs = self.base_attributes(css, with_id=False)
        attrs.set("id", f"tab-{self.panel}")
        attrs.set("role", "tab")
        attrs.set("aria-selected", self.active)
        attrs.set("aria-controls", f"panel-{self.panel}")
        attrs.set("tabindex", "0" if self.active else "-1")
        if self.disabled:
            attrs.set("aria-disabled", "true")
            attrs.set("disabled", True)
        attrs.extend(self.htmx_items(ctx))

        parts = [element("span", [("class", self.element("label"))], self.render_content(ctx))]
        if self.closable and not self.disabled:
            parts.append(
                element(
                    "span",
                    [("class", self.element("close")), ("aria-hidden", "true")],
                    Markup("&times;"),
                )
            )
        group.append(element("button", attrs, join(parts)))
        return Markup("")


class TabPanel(Component):
    block = "tab-panel"

    name: str
    active: bool = False

    def render(self, ctx: RenderContext) -> Markup:
        css = self.css().add_if(self.modifier("active"), self.active)
        attrs = self.base_attributes(css, with_id=False)
        attrs.set("id", f"panel-{self.name}")
        attrs.set("role", "tabpanel")
        attrs.set("aria-labelledby", f"tab-{self.name}")
        attrs.set("tabindex", "0")
        attrs.set("hidden", self.hidden or not self.active)
        attrs.extend(self.htmx_items(ctx))
        return element("div", attrs, self.render_content(ctx))


# =============================================================================
# Carousel
# =============================================================================


class Carousel(Component):
    """Slide carousel; navigation and pagination appear only with two or more slides."""

    block = "carousel"

    loop: bool = False
    navigation: bool = True
    pagination: bool = True
    autoplay: bool = False
    autoplay_interval: int = 5000
    slides_per_page: int = 1
    slides_per_move: int = 1
    orientation: Orientation = Orientation.HORIZONTAL
    mouse_dragging: bool = True
    aria_label: str | None = None

    def render(self, ctx: RenderContext) -> Markup:
        slides = GroupRegistry(CAROUSEL_GROUP)
        content = self.render_content(ctx.child(group=slides))
        count = slides.count

        vertical = self.orientation is Orientation.VERTICAL
        css = self.css().add_if(self.modifier("vertical"), vertical)
        attrs = self.base_attributes(css)
        attrs.set("data-rhx-carousel", "")
        attrs.set("data-rhx-slide-count", count)
        if self.loop:
            attrs.set("data-rhx-loop", "true")
        if self.autoplay:
            attrs.set("data-rhx-autoplay", self.autoplay_interval)
        attrs.set("data-rhx-slides-per-page", self.slides_per_page)
        attrs.set("data-rhx-slides-per-move", self.slides_per_move)
        attrs.set("data-rhx-orientation", self.orientation)
        if self.mouse_dragging:
            attrs.set("data-rhx-mouse-dragging", "true")
        attrs.set("role", "region")
        attrs.set("aria-roledescription", "carousel")
        attrs.set("aria-label", self.aria_label or None)
        attrs.extend(self.htmx_items(ctx))

        track = element(
            "div", [("class", self.element("track")), ("aria-live", "polite")], content
        )
        parts = [element("div", [("class", self.element("viewport"))], track)]
        if self.navigation and count > 1:
            parts.append(self._navigation())
        if self.pagination and count > 1:
            parts.append(self._pagination(count))
        return element("div", attrs, join(parts))

    def _navigation(self) -> Markup:
        button = self.element("nav-button")

        def nav_button(direction: str, label: str, icon_name: str) -> Markup:
            chevron = Markup(
                '<svg viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
                'stroke-linecap="round" stroke-linejoin="round" aria-hidden="true">'
            ) + (icons.get(icon_name) or Markup("")) + Markup("</svg>")
            return element(
                "button",
                [
                    ("class", f"{button} {button}--{direction}"),
                    ("type", "button"),
                    ("aria-label", label),
                ],
                chevron,
            )

        return element(
            "div",
            [("class", self.element("navigation"))],
            nav_button("prev", "Previous slide", "chevron-left")
            + nav_button("next", "Next slide", "chevron-right"),
        )

    def _pagination(self, count: int) -> Markup:
        dots = [
            element(
                "button",
                [
                    ("class", self.element("dot")),
                    ("type", "button"),
                    ("role", "tab"),
                    ("aria-label", f"Slide {i}"),
                    ("aria-selected", i == 1),
                    ("tabindex", "0" if i == 1 else "-1"),
                ],
            )
            for i in range(1, count + 1)
        ]
        return element(
            "div", [("class", self.element("pagination")), ("role", "tablist")], join(dots)
        )


class CarouselItem(Component):
    """One slide.  Outside a Carousel it renders as slide 1."""

    block = "carousel"

    def render(self, ctx: RenderContext) -> Markup:
        group = ctx.group(CAROUSEL_GROUP)
        index = group.append() if group is not None else 1

        attrs = self.base_attributes(ClassBuilder(self.element("item")))
        attrs.set("role", "group")
        attrs.set("aria-roledescription", "slide")
        attrs.set("aria-label", f"Slide {index}")
        attrs.set("data-rhx-slide-index", index)
        attrs.extend(self.htmx_items(ctx))
        return element("div", attrs, self.render_content(ctx))


# =============================================================================
# Breadcrumb
# =============================================================================


class BreadcrumbLink(BaseModel):
    """One breadcrumb entry given as data; the last entry is the current page."""

    model_config = ConfigDict(frozen=True)

    label: str
    href: str | None = None


class _Crumb(NamedTuple):
    content: Markup
    href: str | None


class Breadcrumb(Component):
    """Navigation trail built from ``items`` or from BreadcrumbItem children."""

    block = "breadcrumb"

    items: tuple[BreadcrumbLink, ...] | None = None
    separator: str = "/"
    aria_label: str = "Breadcrumb"

    def render(self, ctx: RenderContext) -> Markup:
        group = GroupRegistry(BREADCRUMB_GROUP)
        self.render_content(ctx.child(group=group))

        if self.items:
            crumbs = [_Crumb(Markup.escape(i.label), i.href) for i in self.items]
        else:
            crumbs = [c for c in group if isinstance(c, _Crumb)]

        attrs = self.base_attributes(self.css())
        attrs.set("aria-label", self.aria_label)

        last = len(crumbs) - 1
        rendered = []
        for i, crumb in enumerate(crumbs):
            current = i == last
            if not crumb.href or not crumb.href.strip():
                inner = element("span", [("class", self.element("current"))], crumb.content)
            else:
                inner = element(
                    "a", [("class", self.element("link")), ("href", crumb.href)], crumb.content
                )
            if not current:
                inner += element(
                    "span",
                    [("class", self.element("separator")), ("aria-hidden", "true")],
                    self.separator,
                )
            item = Attributes([("class", self.element("item"))])
            item.set("aria-current", "page" if current else None)
            rendered.append(element("li", item, inner))

        return element(
            "nav", attrs, element("ol", [("class", self.element("list"))], join(rendered))
        )


class BreadcrumbItem(Component):
    """One crumb inside a Breadcrumb; registers itself and renders nothing in place."""

    block = "breadcrumb"

    href: str | None = None

    def render(self, ctx: RenderContext) -> Markup:
        content = self.render_content(ctx)
        group = ctx.group(BREADCRUMB_GROUP)
        if group is None:
            return content
        group.append(_Crumb(content, self.href))
        return Markup("")
