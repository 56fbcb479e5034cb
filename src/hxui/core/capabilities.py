"""
Capabilities the render engine consumes from its host application.

The engine never inspects models or routers itself.  A host supplies:

- a :class:`UrlSynthesizer` turning symbolic route identifiers into URLs,
- a :class:`FieldMetadataProvider` returning a pre-computed
  :class:`FieldMetadata` for a bound field name,
- a :class:`ValidationState` holding error messages per field name.

All three are optional; components degrade to their explicit inputs when a
capability is missing.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from .variants import DataType, ValueKind

# =============================================================================
# Route targets
# =============================================================================


class RouteTarget(BaseModel):
    """Symbolic route identifiers used when a verb directive is left empty."""

    model_config = ConfigDict(frozen=True)

    page: str | None = None
    handler: str | None = None
    controller: str | None = None
    action: str | None = None
    values: dict[str, str] = Field(default_factory=dict)

    @property
    def has_identifiers(self) -> bool:
        return any(
            v is not None and v.strip() for v in (self.page, self.controller, self.action)
        )

    def parameters(self) -> dict[str, str]:
        """Route values, with the page handler folded in as ``handler``."""
        params = dict(self.values)
        if self.page and self.handler:
            params["handler"] = self.handler
        return params


# =============================================================================
# Field metadata
# =============================================================================


class ConstraintKind(str, Enum):
    """Declared validation constraints; values are the ``data-val-*`` rule names."""

    REQUIRED = "required"
    LENGTH = "length"
    MIN_LENGTH = "minlength"
    MAX_LENGTH = "maxlength"
    PATTERN = "regex"
    RANGE = "range"
    EMAIL = "email"
    URL = "url"
    PHONE = "phone"


class Constraint(BaseModel):
    """One declared constraint on a bound field.

    ``minimum``/``maximum`` are string lengths for the length kinds and
    numeric bounds for RANGE.  ``message`` overrides the default error text.
    """

    model_config = ConfigDict(frozen=True)

    kind: ConstraintKind
    minimum: int | float | None = None
    maximum: int | float | None = None
    pattern: str | None = None
    message: str | None = None


class EnumMember(BaseModel):
    """One enumerant of a field's value domain."""

    model_config = ConfigDict(frozen=True)

    value: str  # raw identifier, submitted by the form
    label: str | None = None  # declared display name

    @property
    def display(self) -> str:
        return self.label or self.value


class FieldMetadata(BaseModel):
    """Everything the engine needs to know about one bound field."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    value: Any = None
    required: bool = False
    kind: ValueKind = ValueKind.STRING
    data_type: DataType | None = None
    display_name: str | None = None
    description: str | None = None
    constraints: tuple[Constraint, ...] = ()
    enum_members: tuple[EnumMember, ...] = ()

    @property
    def is_enum(self) -> bool:
        return bool(self.enum_members)


# =============================================================================
# Protocols
# =============================================================================


@runtime_checkable
class UrlSynthesizer(Protocol):
    """Builds a URL from route identifiers."""

    def synthesize(self, route: RouteTarget, params: Mapping[str, str]) -> str:
        """Return the URL, or raise ``UrlSynthesisError``."""
        ...


@runtime_checkable
class FieldMetadataProvider(Protocol):
    """Looks up metadata for a bound field name."""

    def lookup(self, name: str) -> FieldMetadata | None:
        ...


@runtime_checkable
class ErrorLookup(Protocol):
    """Returns the ordered error messages for a field name (possibly empty)."""

    def errors_for(self, name: str) -> list[str]:
        ...

    def all_messages(self) -> list[str]:
        """Every message, field by field, in insertion order."""
        ...


class MappingFieldProvider:
    """Field provider backed by a plain mapping of name -> metadata."""

    def __init__(self, fields: Mapping[str, FieldMetadata] | Iterable[FieldMetadata]) -> None:
        if isinstance(fields, Mapping):
            self._fields = dict(fields)
        else:
            self._fields = {f.name: f for f in fields}

    def lookup(self, name: str) -> FieldMetadata | None:
        return self._fields.get(name)


class ValidationState:
    """Error messages keyed by field name, in the order they were added."""

    def __init__(self, errors: Mapping[str, Iterable[str]] | None = None) -> None:
        self._errors: dict[str, list[str]] = {}
        for name, messages in (errors or {}).items():
            for message in messages:
                self.add(name, message)

    def add(self, name: str, message: str) -> None:
        self._errors.setdefault(name, []).append(message)

    def errors_for(self, name: str) -> list[str]:
        return list(self._errors.get(name, ()))

    def first_error(self, name: str) -> str | None:
        messages = self._errors.get(name)
        return messages[0] if messages else None

    @property
    def is_valid(self) -> bool:
        return not self._errors

    def items(self) -> Iterator[tuple[str, list[str]]]:
        for name, messages in self._errors.items():
            yield name, list(messages)

    def all_messages(self) -> list[str]:
        return [m for messages in self._errors.values() for m in messages]

    def __contains__(self, name: object) -> bool:
        return bool(self._errors.get(name))  # type: ignore[call-overload]

    def __len__(self) -> int:
        return len(self._errors)
