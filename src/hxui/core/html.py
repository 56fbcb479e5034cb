"""
Markup assembly helpers shared by every component.

All attribute and text output goes through :class:`Attributes` and
:func:`element`, so escaping happens in exactly one place.  A value of
``None`` means "not provided" and renders nothing; this is the single
render-if-present rule the components rely on.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum
from typing import Any

from markupsafe import Markup, escape

from .css import enum_token

# Elements that never take a closing tag.
VOID_ELEMENTS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "wbr"}
)


def format_number(value: float | int) -> str:
    """Shortest round-trip text for a number, without a trailing ``.0``."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def attr_text(value: Any) -> str | None:
    """Convert a Python value into attribute text, or None when absent.

    Booleans become ``"true"``/``"false"`` (the ARIA and htmx convention);
    numbers drop a redundant ``.0``.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return format_number(value)
    if isinstance(value, Enum):
        return enum_token(value)
    return str(value)


def _is_aria(name: str) -> bool:
    return name.startswith("aria-")


class Attributes:
    """Ordered HTML attribute set.

    ``set`` keeps the original position when a name is overwritten.  Names
    mapped to ``True`` render bare (``disabled``); ``None`` and ``False``
    are dropped.  ``aria-*`` states are tokens, not flags: booleans there
    render as ``"true"``/``"false"``.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[tuple[str, Any]] | None = None) -> None:
        self._items: dict[str, Any] = {}
        if items:
            self.extend(items)

    def set(self, name: str, value: Any) -> Attributes:
        if value is None:
            return self
        if isinstance(value, bool) and _is_aria(name):
            value = attr_text(value)
        elif value is False:
            return self
        self._items[name] = value
        return self

    def set_if(self, name: str, condition: bool, value: Any = True) -> Attributes:
        if condition:
            self.set(name, value)
        return self

    def extend(self, items: Iterable[tuple[str, Any]]) -> Attributes:
        for name, value in items:
            self.set(name, value)
        return self

    def get(self, name: str) -> Any:
        return self._items.get(name)

    def remove(self, name: str) -> None:
        self._items.pop(name, None)

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        return iter(self._items.items())

    def __len__(self) -> int:
        return len(self._items)

    def __html__(self) -> str:
        parts: list[str] = []
        for name, value in self._items.items():
            if value is True:
                parts.append(f" {name}")
            else:
                parts.append(f' {name}="{escape(attr_text(value))}"')
        return "".join(parts)

    def __str__(self) -> str:
        return self.__html__()


def element(
    tag: str,
    attrs: Attributes | Iterable[tuple[str, Any]] | None = None,
    content: Any = None,
) -> Markup:
    """Render one element.  ``content`` is escaped unless it is Markup."""
    if not isinstance(attrs, Attributes):
        attrs = Attributes(attrs)
    if tag in VOID_ELEMENTS:
        return Markup(f"<{tag}{attrs.__html__()} />")
    inner = escape(content) if content is not None else ""
    return Markup(f"<{tag}{attrs.__html__()}>{inner}</{tag}>")


def join(fragments: Iterable[Any]) -> Markup:
    """Concatenate fragments, escaping any plain strings."""
    return Markup("").join(escape(f) for f in fragments if f is not None)


def empty_element(tag: str, attrs: Attributes | Iterable[tuple[str, Any]] | None = None) -> Markup:
    """Self-closing element outside the HTML void set (SVG shapes)."""
    if not isinstance(attrs, Attributes):
        attrs = Attributes(attrs)
    return Markup(f"<{tag}{attrs.__html__()} />")
