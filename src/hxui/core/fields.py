"""
Field metadata adapter.

Turns a pre-computed :class:`FieldMetadata` into rendering hints: the native
input subtype, HTML constraint attributes, enum option lists and the
``data-val-*`` attributes read by unobtrusive client-side validation.
"""

from __future__ import annotations

import datetime as _dt
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from hxui.errors import ComponentConfigError

from .capabilities import Constraint, ConstraintKind, EnumMember, FieldMetadata
from .html import format_number
from .variants import DATA_TYPE_INPUTS, VALUE_KIND_INPUTS, InputType


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """One choice offered by a select or radio group."""

    value: str
    label: str
    selected: bool = False
    disabled: bool = False


# =============================================================================
# Subtype and value
# =============================================================================


def infer_input_type(meta: FieldMetadata | None) -> InputType:
    """Declared data type first, then the raw value kind, else text."""
    if meta is None:
        return InputType.TEXT
    if meta.data_type is not None:
        return DATA_TYPE_INPUTS[meta.data_type]
    return VALUE_KIND_INPUTS.get(meta.kind, InputType.TEXT)


def display_value(value: Any, members: Iterable[EnumMember] = ()) -> str | None:
    """Text form of a field value as it appears in an ``value`` attribute."""
    if value is None:
        return None
    if isinstance(value, list | tuple | set | frozenset):
        return ",".join(display_value(v, members) or "" for v in value)
    if isinstance(value, Enum):
        value = value.name
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, _dt.datetime):
        return value.strftime("%Y-%m-%dT%H:%M")
    if isinstance(value, _dt.date | _dt.time):
        return value.isoformat()
    if isinstance(value, int | float):
        return format_number(value)
    text = str(value)
    for member in members:
        if member.value.casefold() == text.casefold():
            return member.display
    return text


def raw_value(value: Any) -> str | None:
    """Submitted identifier of a field value (enum name, not its label)."""
    if value is None:
        return None
    if isinstance(value, list | tuple | set | frozenset):
        return ",".join(raw_value(v) or "" for v in value)
    if isinstance(value, Enum):
        return value.name
    return display_value(value)


# =============================================================================
# Constraints
# =============================================================================


def _first(meta: FieldMetadata | None, *kinds: ConstraintKind) -> Constraint | None:
    if meta is None:
        return None
    for constraint in meta.constraints:
        if constraint.kind in kinds:
            return constraint
    return None


def min_length(meta: FieldMetadata | None) -> int | None:
    if meta is None:
        return None
    for c in meta.constraints:
        if c.kind is ConstraintKind.LENGTH and c.minimum:
            return int(c.minimum)
        if c.kind is ConstraintKind.MIN_LENGTH and c.minimum is not None:
            return int(c.minimum)
    return None


def max_length(meta: FieldMetadata | None) -> int | None:
    c = _first(meta, ConstraintKind.LENGTH, ConstraintKind.MAX_LENGTH)
    if c is None or c.maximum is None:
        return None
    return int(c.maximum)


def pattern(meta: FieldMetadata | None) -> str | None:
    c = _first(meta, ConstraintKind.PATTERN)
    return c.pattern if c else None


def value_range(meta: FieldMetadata | None) -> tuple[str | None, str | None]:
    c = _first(meta, ConstraintKind.RANGE)
    if c is None:
        return None, None
    lo = format_number(c.minimum) if c.minimum is not None else None
    hi = format_number(c.maximum) if c.maximum is not None else None
    return lo, hi


def validation_attributes(meta: FieldMetadata | None, label: str) -> list[tuple[str, str]]:
    """``data-val-*`` pairs for every declared constraint, in declaration order.

    Args:
        meta: Bound field metadata; nothing is emitted without constraints.
        label: Field label used in the default messages.

    Returns:
        Attribute pairs starting with ``data-val="true"``, or an empty list.
    """
    if meta is None or not meta.constraints:
        return []

    pairs: list[tuple[str, str]] = [("data-val", "true")]
    for c in meta.constraints:
        kind = c.kind
        if kind is ConstraintKind.REQUIRED:
            pairs.append(("data-val-required", c.message or f"The {label} field is required."))
        elif kind is ConstraintKind.LENGTH:
            hi = format_number(c.maximum) if c.maximum is not None else ""
            msg = c.message or (
                f"The field {label} must be a string with a maximum length of {hi}."
            )
            pairs.append(("data-val-length", msg))
            pairs.append(("data-val-length-max", hi))
            if c.minimum:
                pairs.append(("data-val-length-min", format_number(c.minimum)))
        elif kind is ConstraintKind.MAX_LENGTH:
            hi = format_number(c.maximum) if c.maximum is not None else ""
            msg = c.message or (
                f"The field {label} must be a string or array type with a maximum length of '{hi}'."
            )
            pairs.append(("data-val-maxlength", msg))
            pairs.append(("data-val-maxlength-max", hi))
        elif kind is ConstraintKind.MIN_LENGTH:
            lo = format_number(c.minimum) if c.minimum is not None else ""
            msg = c.message or (
                f"The field {label} must be a string or array type with a minimum length of '{lo}'."
            )
            pairs.append(("data-val-minlength", msg))
            pairs.append(("data-val-minlength-min", lo))
        elif kind is ConstraintKind.PATTERN:
            msg = c.message or f"The field {label} must match the regular expression '{c.pattern}'."
            pairs.append(("data-val-regex", msg))
            pairs.append(("data-val-regex-pattern", c.pattern or ""))
        elif kind is ConstraintKind.RANGE:
            lo = format_number(c.minimum) if c.minimum is not None else ""
            hi = format_number(c.maximum) if c.maximum is not None else ""
            msg = c.message or f"The field {label} must be between {lo} and {hi}."
            pairs.append(("data-val-range", msg))
            pairs.append(("data-val-range-min", lo))
            pairs.append(("data-val-range-max", hi))
        elif kind is ConstraintKind.EMAIL:
            pairs.append(
                ("data-val-email", c.message or f"The {label} field is not a valid e-mail address.")
            )
        elif kind is ConstraintKind.URL:
            pairs.append(
                (
                    "data-val-url",
                    c.message
                    or f"The {label} field is not a valid fully-qualified http, https, or ftp URL.",
                )
            )
        elif kind is ConstraintKind.PHONE:
            pairs.append(
                ("data-val-phone", c.message or f"The {label} field is not a valid phone number.")
            )
    return pairs


# =============================================================================
# Enum options
# =============================================================================


def enum_members(enum_type: type[Enum], labels: dict[str, str] | None = None) -> list[EnumMember]:
    """Members of ``enum_type`` in declaration order.

    ``labels`` maps member names to display names; an enum may also expose a
    ``label`` attribute per member.

    Raises:
        ComponentConfigError: ``enum_type`` is not an Enum subclass.
    """
    if not isinstance(enum_type, type) or not issubclass(enum_type, Enum):
        raise ComponentConfigError(f"{enum_type!r} is not an Enum type")
    labels = labels or {}
    members: list[EnumMember] = []
    for member in enum_type:
        label = labels.get(member.name) or getattr(member, "label", None)
        members.append(EnumMember(value=member.name, label=label if isinstance(label, str) else None))
    return members


def enum_options(
    members: Iterable[EnumMember], current: str | Iterable[str] | None
) -> list[OptionSpec]:
    """Option list with case-insensitive selection against ``current``."""
    if current is None:
        chosen: set[str] = set()
    elif isinstance(current, str):
        chosen = {current.casefold()}
    else:
        chosen = {c.casefold() for c in current}
    return [
        OptionSpec(value=m.value, label=m.display, selected=m.value.casefold() in chosen)
        for m in members
    ]
