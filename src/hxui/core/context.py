"""
Per-render scope objects.

A :class:`RenderContext` is created for each top-level :func:`render` call and
passed by reference to every component and child.  Composite components open a
child scope carrying a fresh :class:`SlotRegistry` or :class:`GroupRegistry`;
children rendered inside that scope register into it, and the composite reads
the registry once all of its children have rendered.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any

from markupsafe import Markup, escape

from .capabilities import ErrorLookup, FieldMetadata, FieldMetadataProvider, UrlSynthesizer

if TYPE_CHECKING:
    from hxui.config import HxUIOptions

logger = logging.getLogger(__name__)

_INHERIT: Any = object()


class SlotRegistry:
    """Case-insensitive slot name -> fragment map; the last write wins."""

    __slots__ = ("_slots",)

    def __init__(self) -> None:
        self._slots: dict[str, tuple[str, Markup]] = {}

    def set(self, name: str, fragment: Any) -> None:
        if name.casefold() in self._slots:
            logger.debug("Slot %r populated more than once; keeping the last fragment", name)
        self._slots[name.casefold()] = (name, escape(fragment))

    def has(self, name: str) -> bool:
        return name.casefold() in self._slots

    def get(self, name: str) -> Markup | None:
        entry = self._slots.get(name.casefold())
        return entry[1] if entry else None

    def get_or_default(self, name: str, default: Markup | str = "") -> Markup:
        fragment = self.get(name)
        return fragment if fragment is not None else escape(default)

    @property
    def names(self) -> list[str]:
        return [original for original, _ in self._slots.values()]

    @property
    def count(self) -> int:
        return len(self._slots)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __len__(self) -> int:
        return len(self._slots)


class GroupRegistry:
    """Ordered, append-only membership list for a group component.

    ``kind`` names the group ("tabs", "radio", ...) so members only join the
    group they belong to.  ``scope``, ``selected`` and ``disabled`` carry the
    state the group shares with its members.
    """

    __slots__ = ("kind", "scope", "selected", "disabled", "extras", "_entries")

    def __init__(
        self,
        kind: str,
        *,
        scope: str = "",
        selected: Iterable[str] = (),
        disabled: bool = False,
        extras: dict[str, Any] | None = None,
    ) -> None:
        self.kind = kind
        self.scope = scope
        self.selected = frozenset(s.casefold() for s in selected)
        self.disabled = disabled
        self.extras: dict[str, Any] = dict(extras or {})
        self._entries: list[Any] = []

    def append(self, entry: Any = None) -> int:
        """Register a member; returns its 1-based index."""
        self._entries.append(entry)
        return len(self._entries)

    def is_selected(self, value: str | None) -> bool:
        return value is not None and value.casefold() in self.selected

    @property
    def count(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> list[Any]:
        return list(self._entries)

    def fragments(self) -> list[Markup]:
        """Entries that carry markup, in registration order."""
        return [escape(e) for e in self._entries if e is not None]

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)


class RenderContext:
    """Scope handed to every component during one top-level render."""

    __slots__ = ("urls", "fields", "validation", "options", "_slots", "_group", "parent")

    def __init__(
        self,
        *,
        urls: UrlSynthesizer | None = None,
        fields: FieldMetadataProvider | None = None,
        validation: ErrorLookup | None = None,
        options: HxUIOptions | None = None,
        slots: SlotRegistry | None = None,
        group: GroupRegistry | None = None,
        parent: RenderContext | None = None,
    ) -> None:
        self.urls = urls
        self.fields = fields
        self.validation = validation
        self.options = options
        self._slots = slots
        self._group = group
        self.parent = parent

    # -- registries ---------------------------------------------------------

    @property
    def slots(self) -> SlotRegistry | None:
        return self._slots

    def group(self, kind: str) -> GroupRegistry | None:
        """Nearest group registry, if it is of the requested kind."""
        if self._group is None or self._group.kind != kind:
            logger.debug("No %r group registry in scope", kind)
            return None
        return self._group

    def child(
        self,
        *,
        slots: SlotRegistry | None = _INHERIT,
        group: GroupRegistry | None = _INHERIT,
    ) -> RenderContext:
        """New scope sharing capabilities; given registries shadow the parent's."""
        return RenderContext(
            urls=self.urls,
            fields=self.fields,
            validation=self.validation,
            options=self.options,
            slots=self._slots if slots is _INHERIT else slots,
            group=self._group if group is _INHERIT else group,
            parent=self,
        )

    # -- capabilities -------------------------------------------------------

    def lookup_field(self, name: str | None) -> FieldMetadata | None:
        if not name or self.fields is None:
            return None
        meta = self.fields.lookup(name)
        if meta is None:
            logger.debug("No metadata for bound field %r", name)
        return meta

    def errors_for(self, name: str | None) -> list[str]:
        if not name or self.validation is None:
            return []
        return list(self.validation.errors_for(name))

    # -- children -----------------------------------------------------------

    def render_children(self, children: Iterable[Any]) -> Markup:
        """Render children strictly in order and concatenate the output."""
        parts: list[Markup] = []
        for child in children:
            parts.append(self.render_child(child))
        return Markup("").join(parts)

    def render_child(self, child: Any) -> Markup:
        if child is None:
            return Markup("")
        render = getattr(child, "render", None)
        if callable(render) and not isinstance(child, str):
            return escape(render(self))
        return escape(child)


def render(
    component: Any,
    *,
    urls: UrlSynthesizer | None = None,
    fields: FieldMetadataProvider | None = None,
    validation: ErrorLookup | None = None,
    options: HxUIOptions | None = None,
) -> Markup:
    """Render a component tree in a fresh top-level context."""
    ctx = RenderContext(urls=urls, fields=fields, validation=validation, options=options)
    return ctx.render_child(component)
