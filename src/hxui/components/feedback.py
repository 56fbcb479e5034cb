"""
Feedback components: badges, spinners, callouts and progress bars.
"""

from __future__ import annotations

from markupsafe import Markup

from hxui.core.aria import AriaAttributes
from hxui.core.context import RenderContext
from hxui.core.html import Attributes, element, format_number, join
from hxui.core.variants import Size, Variant

from .base import Component

_SVG_OPEN = (
    '<svg{extra} xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}" viewBox="0 0 24 24" '
    'fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" '
    'stroke-linejoin="round">'
)


def stroke_svg(
    inner: str, size: int = 20, *, class_name: str | None = None, hidden: bool = False
) -> Markup:
    """Inline 24x24 stroke icon at the given pixel size."""
    extra = f' class="{class_name}"' if class_name else ""
    if hidden:
        extra += " hidden"
    return Markup(_SVG_OPEN.format(size=size, extra=extra) + str(inner) + "</svg>")


INFO_CIRCLE = stroke_svg(
    '<circle cx="12" cy="12" r="10"></circle><line x1="12" y1="16" x2="12" y2="12"></line>'
    '<line x1="12" y1="8" x2="12.01" y2="8"></line>'
)
CHECK_CIRCLE = stroke_svg(
    '<path d="M22 11.08V12a10 10 0 1 1-5.93-9.14"></path>'
    '<polyline points="22 4 12 14.01 9 11.01"></polyline>'
)
EXCLAMATION_TRIANGLE = stroke_svg(
    '<path d="M10.29 3.86L1.82 18a2 2 0 0 0 1.71 3h16.94a2 2 0 0 0 1.71-3L13.71 3.86a2 2 0 0 0-3.42 0z">'
    '</path><line x1="12" y1="9" x2="12" y2="13"></line><line x1="12" y1="17" x2="12.01" y2="17"></line>'
)
EXCLAMATION_CIRCLE = stroke_svg(
    '<circle cx="12" cy="12" r="10"></circle><line x1="12" y1="8" x2="12" y2="12"></line>'
    '<line x1="12" y1="16" x2="12.01" y2="16"></line>'
)
CLOSE_X = stroke_svg(
    '<line x1="18" y1="6" x2="6" y2="18"></line><line x1="6" y1="6" x2="18" y2="18"></line>',
    size=16,
)

VARIANT_ICONS: dict[Variant, Markup] = {
    Variant.SUCCESS: CHECK_CIRCLE,
    Variant.WARNING: EXCLAMATION_TRIANGLE,
    Variant.DANGER: EXCLAMATION_CIRCLE,
}

NAMED_ICONS: dict[str, Markup] = {
    "check-circle": CHECK_CIRCLE,
    "exclamation-triangle": EXCLAMATION_TRIANGLE,
    "exclamation-circle": EXCLAMATION_CIRCLE,
    "info-circle": INFO_CIRCLE,
}


def callout_icon(variant: Variant, name: str | None = None) -> Markup:
    """Named icon if given, else the variant's icon (info for neutral/brand)."""
    if name:
        return NAMED_ICONS.get(name, INFO_CIRCLE)
    return VARIANT_ICONS.get(variant, INFO_CIRCLE)


class Badge(Component):
    block = "badge"

    variant: Variant = Variant.NEUTRAL
    pill: bool = False
    pulse: bool = False

    def render(self, ctx: RenderContext) -> Markup:
        css = (
            self.css()
            .add_variant(self.block_class, self.variant)
            .add_if(self.modifier("pill"), self.pill)
            .add_if(self.modifier("pulse"), self.pulse)
        )
        return element("span", self.base_attributes(css), self.render_content(ctx))


class Spinner(Component):
    """Loading indicator.  ``size`` is a named size or any CSS length."""

    block = "spinner"

    size: Size | str = Size.MEDIUM
    label: str | None = "Loading"

    def named_size(self) -> Size | None:
        if isinstance(self.size, Size):
            return self.size
        try:
            return Size(self.size.strip().lower())
        except ValueError:
            return None

    def render(self, ctx: RenderContext) -> Markup:
        named = self.named_size()
        css = self.css().add_if(
            self.modifier(named.value if named else ""), named not in (None, Size.MEDIUM)
        )
        attrs = self.base_attributes(css)
        attrs.set("role", "status")
        attrs.set("data-rhx-spinner", "")
        attrs.set("aria-label", self.label or None)
        if named is None and self.size:
            attrs.set("style", f"width: {self.size}; height: {self.size};")
        svg = Markup(
            '<svg viewBox="0 0 24 24" fill="none">'
            '<circle cx="12" cy="12" r="10" stroke="currentColor" stroke-width="3" />'
            "</svg>"
        )
        return element("span", attrs, svg)


class Callout(Component):
    """Inline alert message with a variant icon and optional close button."""

    block = "callout"

    variant: Variant = Variant.NEUTRAL
    open: bool = True
    closable: bool = False
    icon: str | None = None
    duration: int = 0  # auto-dismiss after this many milliseconds

    def render(self, ctx: RenderContext) -> Markup:
        css = self.css().add_variant(self.block_class, self.variant)
        attrs = self.base_attributes(css)
        attrs.set("role", "alert")
        attrs.set("data-rhx-callout", "")
        attrs.set("hidden", self.hidden or not self.open)
        if self.duration > 0:
            attrs.set("data-rhx-duration", self.duration)
        attrs.extend(self.htmx_items(ctx))

        parts = [
            element(
                "span",
                [("class", self.element("icon")), ("aria-hidden", "true")],
                callout_icon(self.variant, self.icon),
            ),
            element("div", [("class", self.element("content"))], self.render_content(ctx)),
        ]
        if self.closable:
            parts.append(
                element(
                    "button",
                    [("class", self.element("close")), ("type", "button"), ("aria-label", "Close")],
                    CLOSE_X,
                )
            )
        return element("div", attrs, join(parts))


class ProgressBar(Component):
    """Determinate or indeterminate progress bar; ``value`` is clamped to 0..100."""

    block = "progress-bar"

    value: float = 0
    indeterminate: bool = False
    label: str | None = None

    def render(self, ctx: RenderContext) -> Markup:
        css = self.css().add_if(self.modifier("indeterminate"), self.indeterminate)
        attrs = self.base_attributes(css)
        clamped = min(max(self.value, 0), 100)
        aria = AriaAttributes(
            role="progressbar",
            valuemin=0,
            valuemax=100,
            valuenow=None if self.indeterminate else clamped,
            label=self.label or None,
        )
        attrs.extend(aria.items())
        attrs.extend(self.htmx_items(ctx))

        fill = Attributes([("class", self.element("fill"))])
        if not self.indeterminate:
            fill.set("style", f"width: {format_number(clamped)}%")
        parts = [element("div", [("class", self.element("track"))], element("div", fill))]
        if not self.indeterminate:
            parts.append(
                element("span", [("class", self.element("label"))], f"{format_number(clamped)}%")
            )
        return element("div", attrs, join(parts))
