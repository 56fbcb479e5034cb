"""Shared pytest fixtures for hxui tests."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum

import pytest

from hxui.core import (
    Constraint,
    ConstraintKind,
    FieldMetadata,
    MappingFieldProvider,
    RouteTarget,
    ValidationState,
)
from hxui.core.fields import enum_members
from hxui.core.variants import ValueKind
from hxui.errors import UrlSynthesisError


class Priority(Enum):
    LOW = 1
    HIGH = 2
    URGENT = 3


class FakeUrls:
    """URL synthesizer that records its calls.

    Pages map to their own path; controller/action pairs map to
    ``/{controller}/{action}``.  Parameters become a sorted query string.
    """

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.calls: list[tuple[RouteTarget, dict[str, str]]] = []

    def synthesize(self, route: RouteTarget, params: Mapping[str, str]) -> str:
        self.calls.append((route, dict(params)))
        if self.fail:
            raise UrlSynthesisError("no such route", route=route.page)
        path = route.page or f"/{route.controller}/{route.action}"
        if params:
            path += "?" + "&".join(f"{k}={v}" for k, v in sorted(params.items()))
        return path


@pytest.fixture
def urls() -> FakeUrls:
    return FakeUrls()


@pytest.fixture
def failing_urls() -> FakeUrls:
    return FakeUrls(fail=True)


@pytest.fixture
def priority_enum() -> type[Enum]:
    return Priority


@pytest.fixture
def fields() -> MappingFieldProvider:
    """Metadata for a small task form."""
    return MappingFieldProvider(
        [
            FieldMetadata(
                name="Title",
                value="Write docs",
                required=True,
                display_name="Task title",
                description="Short summary",
                constraints=(
                    Constraint(kind=ConstraintKind.REQUIRED),
                    Constraint(kind=ConstraintKind.LENGTH, minimum=3, maximum=100),
                ),
            ),
            FieldMetadata(name="Email", data_type="email", value="a@example.com"),
            FieldMetadata(
                name="Estimate",
                kind=ValueKind.INTEGER,
                value=5,
                constraints=(Constraint(kind=ConstraintKind.RANGE, minimum=1, maximum=40),),
            ),
            FieldMetadata(
                name="Priority",
                kind=ValueKind.ENUM,
                value=Priority.HIGH,
                enum_members=tuple(enum_members(Priority, {"HIGH": "High priority"})),
            ),
            FieldMetadata(name="Done", kind=ValueKind.BOOLEAN, value=True),
            FieldMetadata(name="Notes"),
        ]
    )


@pytest.fixture
def validation() -> ValidationState:
    return ValidationState({"Title": ["Title is required.", "Title is too short."]})
