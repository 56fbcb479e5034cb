"""
Sparkline: a tiny inline SVG chart of a numeric series.
"""

from __future__ import annotations

from markupsafe import Markup

from hxui.core.context import RenderContext
from hxui.core.geometry import compute_points, format_coordinate, format_points
from hxui.core.html import element, empty_element, format_number
from hxui.core.variants import SparklineType

from .base import Component

VIEWBOX_WIDTH = 200
VIEWBOX_HEIGHT = 40
BAR_GAP = 1.0


class Sparkline(Component):
    """Line, area or bar sparkline drawn in a fixed 200x40 viewBox.

    The SVG stretches to ``width`` x ``height`` (CSS lengths) with
    ``preserveAspectRatio="none"``.  An empty series renders the bare SVG.
    """

    block = "sparkline"

    values: tuple[float, ...] = ()
    type: SparklineType = SparklineType.LINE
    stroke: str = "currentColor"
    stroke_width: float = 2
    fill: str | None = None
    min: float | None = None
    max: float | None = None
    padding: float = 2
    width: str = "100%"
    height: str = "2rem"
    label: str | None = None

    def render(self, ctx: RenderContext) -> Markup:
        attrs = self.base_attributes(self.css())
        attrs.set("viewBox", f"0 0 {VIEWBOX_WIDTH} {VIEWBOX_HEIGHT}")
        attrs.set("preserveAspectRatio", "none")
        attrs.set("role", "img")
        if self.label and self.label.strip():
            attrs.set("aria-label", self.label)
        else:
            attrs.set("aria-hidden", "true")
        attrs.set("style", f"width:{self.width};height:{self.height}")

        if not self.values:
            return element("svg", attrs, "")
        if self.type is SparklineType.BAR:
            content = self.bars()
        elif self.type is SparklineType.AREA:
            content = self.area() + self.line()
        else:
            content = self.line()
        return element("svg", attrs, content)

    def points(self) -> list[tuple[float, float]]:
        return compute_points(
            self.values, VIEWBOX_WIDTH, VIEWBOX_HEIGHT, self.padding, self.min, self.max
        )

    def line(self) -> Markup:
        return empty_element(
            "polyline",
            [
                ("class", self.element("line")),
                ("fill", "none"),
                ("stroke", self.stroke),
                ("stroke-width", format_number(self.stroke_width)),
                ("stroke-linejoin", "round"),
                ("stroke-linecap", "round"),
                ("points", format_points(self.points())),
            ],
        )

    def area(self) -> Markup:
        points = self.points()
        outline = [(points[0][0], VIEWBOX_HEIGHT), *points, (points[-1][0], VIEWBOX_HEIGHT)]
        return empty_element(
            "polygon",
            [
                ("class", self.element("area")),
                ("fill", self.fill or f"{self.stroke}33"),
                ("points", format_points(outline)),
            ],
        )

    def bars(self) -> Markup:
        count = len(self.values)
        lo = min(self.values) if self.min is None else self.min
        hi = max(self.values) if self.max is None else self.max
        if hi == lo:
            hi = lo + 1

        bar_width = max((VIEWBOX_WIDTH - BAR_GAP * (count - 1)) / count, 1)
        usable = VIEWBOX_HEIGHT - 2 * self.padding
        fill = self.fill or self.stroke

        rects = []
        for i, value in enumerate(self.values):
            normalized = min(max((value - lo) / (hi - lo), 0), 1)
            bar_height = max(normalized * usable, 0.5)
            x = i * (bar_width + BAR_GAP)
            y = VIEWBOX_HEIGHT - self.padding - bar_height
            rect = empty_element(
                "rect",
                [
                    ("class", self.element("bar")),
                    ("x", format_coordinate(x)),
                    ("y", format_coordinate(y)),
                    ("width", format_coordinate(bar_width)),
                    ("height", format_coordinate(bar_height)),
                    ("fill", fill),
                ],
            )
            rects.append(rect)
        return Markup("").join(rects)
