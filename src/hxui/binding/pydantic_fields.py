"""
Field metadata from pydantic models.

:class:`ModelFieldProvider` inspects a model instance (or class) once and
answers ``lookup(name)`` with a :class:`FieldMetadata` describing the field's
value kind, constraints and enum domain.  Nested models are reachable with
dotted names (``address.city``).

Constraints come from the field's ``annotated_types`` metadata
(``Field(min_length=..., ge=...)``) and pydantic's ``pattern``.  A display
data type and enum labels can be declared through ``json_schema_extra``::

    email: str = Field(json_schema_extra={"data_type": "email"})
    status: Status = Field(json_schema_extra={"labels": {"ACTIVE": "Active"}})
"""

from __future__ import annotations

import datetime as _dt
import logging
import types
from decimal import Decimal
from enum import Enum
from typing import Any, Union, get_args, get_origin

import annotated_types
from pydantic import BaseModel, ValidationError
from pydantic.fields import FieldInfo

from hxui.core.capabilities import Constraint, ConstraintKind, FieldMetadata, ValidationState
from hxui.core.fields import enum_members
from hxui.core.variants import DataType, ValueKind
from hxui.errors import ComponentConfigError

logger = logging.getLogger(__name__)


# =============================================================================
# Annotation analysis
# =============================================================================


def _unwrap_optional(annotation: Any) -> tuple[Any, bool]:
    """Strip ``X | None``; returns the inner type and whether None was allowed."""
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = [a for a in get_args(annotation) if a is not type(None)]
        nullable = len(args) != len(get_args(annotation))
        if len(args) == 1:
            return args[0], nullable
        return annotation, nullable
    return annotation, False


def value_kind(annotation: Any) -> ValueKind:
    """Classify a field annotation.  ``bool`` is checked before ``int``."""
    inner, _ = _unwrap_optional(annotation)
    if not isinstance(inner, type):
        return ValueKind.OTHER
    if issubclass(inner, Enum):
        return ValueKind.ENUM
    if issubclass(inner, bool):
        return ValueKind.BOOLEAN
    if issubclass(inner, int):
        return ValueKind.INTEGER
    if issubclass(inner, float | Decimal):
        return ValueKind.NUMBER
    if issubclass(inner, _dt.datetime):
        return ValueKind.DATETIME
    if issubclass(inner, _dt.date):
        return ValueKind.DATE
    if issubclass(inner, _dt.time):
        return ValueKind.TIME
    if issubclass(inner, str):
        return ValueKind.STRING
    return ValueKind.OTHER


def _constraints(info: FieldInfo, required: bool) -> list[Constraint]:
    constraints: list[Constraint] = []
    if required:
        constraints.append(Constraint(kind=ConstraintKind.REQUIRED))

    min_len: int | None = None
    max_len: int | None = None
    lower: float | None = None
    upper: float | None = None
    for item in info.metadata:
        if isinstance(item, annotated_types.MinLen):
            min_len = item.min_length
        elif isinstance(item, annotated_types.MaxLen):
            max_len = item.max_length
        elif isinstance(item, annotated_types.Ge):
            lower = item.ge
        elif isinstance(item, annotated_types.Gt):
            lower = item.gt
        elif isinstance(item, annotated_types.Le):
            upper = item.le
        elif isinstance(item, annotated_types.Lt):
            upper = item.lt
        elif getattr(item, "pattern", None):
            constraints.append(Constraint(kind=ConstraintKind.PATTERN, pattern=str(item.pattern)))

    if max_len is not None:
        constraints.append(
            Constraint(kind=ConstraintKind.LENGTH, minimum=min_len or None, maximum=max_len)
        )
    elif min_len is not None:
        constraints.append(Constraint(kind=ConstraintKind.MIN_LENGTH, minimum=min_len))
    if lower is not None or upper is not None:
        constraints.append(Constraint(kind=ConstraintKind.RANGE, minimum=lower, maximum=upper))
    return constraints


_DATA_TYPE_CONSTRAINTS = {
    DataType.EMAIL: ConstraintKind.EMAIL,
    DataType.URL: ConstraintKind.URL,
    DataType.PHONE: ConstraintKind.PHONE,
}


def field_metadata(name: str, info: FieldInfo, value: Any = None) -> FieldMetadata:
    """Build :class:`FieldMetadata` for one pydantic field.

    Args:
        name: Bound name reported back to the form (may be dotted).
        info: The pydantic field definition.
        value: Current value, when inspecting an instance.
    """
    annotation = info.annotation
    inner, nullable = _unwrap_optional(annotation)
    required = info.is_required() and not nullable
    extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}

    data_type: DataType | None = None
    if extra.get("data_type"):
        try:
            data_type = DataType(str(extra["data_type"]))
        except ValueError as e:
            raise ComponentConfigError(
                f"Unknown data_type {extra['data_type']!r} on field {name!r}"
            ) from e

    constraints = _constraints(info, required)
    if data_type in _DATA_TYPE_CONSTRAINTS:
        constraints.append(Constraint(kind=_DATA_TYPE_CONSTRAINTS[data_type]))

    members = ()
    if isinstance(inner, type) and issubclass(inner, Enum):
        labels = extra.get("labels")
        members = tuple(enum_members(inner, labels if isinstance(labels, dict) else None))

    return FieldMetadata(
        name=name,
        value=value,
        required=required,
        kind=value_kind(annotation),
        data_type=data_type,
        display_name=info.title,
        description=info.description,
        constraints=tuple(constraints),
        enum_members=members,
    )


# =============================================================================
# Provider
# =============================================================================


class ModelFieldProvider:
    """Field metadata provider over a pydantic model instance or class.

    Example::

        provider = ModelFieldProvider(form)
        render(Input(field="email"), fields=provider)
    """

    def __init__(self, model: BaseModel | type[BaseModel]) -> None:
        self._model = model
        self._cache: dict[str, FieldMetadata | None] = {}

    def lookup(self, name: str) -> FieldMetadata | None:
        if name not in self._cache:
            self._cache[name] = self._resolve(name)
        return self._cache[name]

    def _resolve(self, name: str) -> FieldMetadata | None:
        target: Any = self._model
        parts = name.split(".")
        for i, part in enumerate(parts):
            model_cls = target if isinstance(target, type) else type(target)
            if not (isinstance(model_cls, type) and issubclass(model_cls, BaseModel)):
                logger.debug("Cannot descend into %r while resolving %r", part, name)
                return None
            info = model_cls.model_fields.get(part)
            if info is None:
                return None
            value = None if isinstance(target, type) else getattr(target, part, None)
            if i == len(parts) - 1:
                return field_metadata(name, info, value)
            if value is not None:
                target = value
            else:
                target, _ = _unwrap_optional(info.annotation)
        return None


def _loc_name(loc: tuple[int | str, ...]) -> str:
    """``("items", 0, "name")`` -> ``items[0].name``."""
    name = ""
    for part in loc:
        if isinstance(part, int):
            name += f"[{part}]"
        else:
            name = f"{name}.{part}" if name else str(part)
    return name


def validation_state_from_error(
    error: ValidationError, prefix: str = ""
) -> ValidationState:
    """Collect a pydantic ``ValidationError`` into a :class:`ValidationState`.

    Model-level errors (empty location) are filed under ``""`` so they still
    appear in a validation summary.
    """
    state = ValidationState()
    for item in error.errors():
        name = _loc_name(tuple(item.get("loc", ())))
        if prefix:
            name = f"{prefix}.{name}" if name else prefix
        state.add(name, item.get("msg", "Invalid value"))
    return state
