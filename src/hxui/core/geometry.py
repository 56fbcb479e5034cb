"""
Data series -> bounded 2-D points for sparkline charts.

The y axis is inverted for SVG: the minimum value sits at
``height - padding`` and the maximum at ``padding``.
"""

from __future__ import annotations

from collections.abc import Sequence

Point = tuple[float, float]


def compute_points(
    values: Sequence[float],
    width: float,
    height: float,
    padding: float = 2,
    min_value: float | None = None,
    max_value: float | None = None,
) -> list[Point]:
    """Map a series onto ``width`` x ``height`` with ``padding`` at top and bottom.

    Args:
        values: The data series; an empty series yields no points.
        width: Drawing width; x runs evenly from 0 to width.
        height: Drawing height.
        padding: Vertical inset at both edges.
        min_value: Lower bound, default the series minimum.
        max_value: Upper bound, default the series maximum.

    Returns:
        One ``(x, y)`` pair per value, rounded to 2 decimals.
    """
    if not values:
        return []

    lo = min(values) if min_value is None else min_value
    hi = max(values) if max_value is None else max_value
    if hi == lo:
        hi = lo + 1
    span = hi - lo

    count = len(values)
    usable = height - 2 * padding

    points: list[Point] = []
    for i, value in enumerate(values):
        x = width / 2 if count == 1 else i / (count - 1) * width
        clamped = min(max(value, lo), hi)
        normalized = (clamped - lo) / span
        y = height - padding - normalized * usable
        points.append((round(x, 2), round(y, 2)))
    return points


def format_coordinate(value: float) -> str:
    """Compact coordinate text: ``38`` not ``38.0``, ``12.5`` not ``12.50``."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def format_points(points: Sequence[Point]) -> str:
    """SVG ``points`` attribute value: ``"x,y x,y ..."``."""
    return " ".join(f"{format_coordinate(x)},{format_coordinate(y)}" for x, y in points)
