"""
Attribute resolution for form controls.

Every property follows the same precedence: an explicit input on the component
wins over what the bound field says, which wins over the component default.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from .capabilities import FieldMetadata
from .context import RenderContext
from .fields import display_value, raw_value

_ID_UNSAFE = re.compile(r"[.\[\]]")


def sanitize_id(name: str) -> str:
    """DOM id for a field name: ``items[0].name`` -> ``items_0__name``."""
    return _ID_UNSAFE.sub("_", name)


@dataclass(frozen=True, slots=True)
class ResolvedField:
    """Final identity, value and state of one control for one render."""

    name: str
    id: str
    value: str | None
    raw_value: str | None
    label: str | None
    hint: str | None
    required: bool
    errors: tuple[str, ...]
    meta: FieldMetadata | None

    @property
    def has_error(self) -> bool:
        return bool(self.errors)

    @property
    def error(self) -> str | None:
        return self.errors[0] if self.errors else None

    @property
    def hint_id(self) -> str:
        return f"{self.id}-hint"

    @property
    def error_id(self) -> str:
        return f"{self.id}-error"

    @property
    def describedby(self) -> str | None:
        parts = []
        if self.hint:
            parts.append(self.hint_id)
        if self.has_error:
            parts.append(self.error_id)
        return " ".join(parts) or None

    @property
    def validation_label(self) -> str:
        return self.label or self.name


def resolve_field(
    ctx: RenderContext,
    *,
    field: str | None = None,
    name: str | None = None,
    id: str | None = None,
    value: Any = None,
    label: str | None = None,
    hint: str | None = None,
    required: bool | None = None,
    default_id: str = "",
    default_value: str | None = None,
) -> ResolvedField:
    """Merge explicit inputs with bound field metadata and validation state.

    Args:
        ctx: Current render context (field provider and validation state).
        field: Name of the bound field, if any.
        name, id, value, label, hint, required: Explicit inputs; None means
            "not given".
        default_id: Id used when neither an id nor a name resolves.
        default_value: Value used when neither input nor field supplies one.
    """
    meta = ctx.lookup_field(field)

    resolved_name = name if name is not None else (meta.name if meta else (field or ""))
    if id:
        resolved_id = id
    elif resolved_name:
        resolved_id = sanitize_id(resolved_name)
    else:
        resolved_id = default_id

    if value is not None:
        resolved_value = display_value(value)
        resolved_raw = raw_value(value)
    elif meta is not None and meta.value is not None:
        resolved_value = display_value(meta.value, meta.enum_members)
        resolved_raw = raw_value(meta.value)
    else:
        resolved_value = default_value
        resolved_raw = default_value

    if label is not None:
        resolved_label: str | None = label
    elif meta is not None:
        resolved_label = meta.display_name or meta.name
    else:
        resolved_label = None

    resolved_hint = hint if hint is not None else (meta.description if meta else None)

    if required is not None:
        resolved_required = required
    else:
        resolved_required = bool(meta and meta.required)

    return ResolvedField(
        name=resolved_name,
        id=resolved_id,
        value=resolved_value,
        raw_value=resolved_raw,
        label=resolved_label,
        hint=resolved_hint,
        required=resolved_required,
        errors=tuple(ctx.errors_for(resolved_name)),
        meta=meta,
    )
