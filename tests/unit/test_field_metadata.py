"""Tests for field metadata hints: subtypes, constraints and enum options."""

from __future__ import annotations

import datetime as dt
from enum import Enum

import pytest

from hxui.core import Constraint, ConstraintKind, EnumMember, FieldMetadata
from hxui.core.fields import (
    display_value,
    enum_members,
    enum_options,
    infer_input_type,
    max_length,
    min_length,
    pattern,
    raw_value,
    validation_attributes,
    value_range,
)
from hxui.core.variants import DataType, InputType, ValueKind
from hxui.errors import ComponentConfigError


class Color(Enum):
    RED = "r"
    GREEN = "g"


class TestInputType:
    def test_no_metadata_is_text(self) -> None:
        assert infer_input_type(None) is InputType.TEXT

    def test_declared_data_type_wins_over_value_kind(self) -> None:
        meta = FieldMetadata(name="When", kind=ValueKind.DATE, data_type=DataType.PASSWORD)
        assert infer_input_type(meta) is InputType.PASSWORD

    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            (ValueKind.INTEGER, InputType.NUMBER),
            (ValueKind.NUMBER, InputType.NUMBER),
            (ValueKind.DATE, InputType.DATE),
            (ValueKind.DATETIME, InputType.DATETIME_LOCAL),
            (ValueKind.TIME, InputType.TIME),
            (ValueKind.STRING, InputType.TEXT),
            (ValueKind.BOOLEAN, InputType.TEXT),
        ],
    )
    def test_value_kind_fallback(self, kind: ValueKind, expected: InputType) -> None:
        assert infer_input_type(FieldMetadata(name="f", kind=kind)) is expected

    def test_phone_maps_to_tel(self) -> None:
        meta = FieldMetadata(name="Phone", data_type=DataType.PHONE)
        assert infer_input_type(meta) is InputType.TEL


class TestValues:
    def test_display_of_common_types(self) -> None:
        assert display_value(None) is None
        assert display_value(True) == "true"
        assert display_value(3.0) == "3"
        assert display_value(dt.date(2024, 5, 1)) == "2024-05-01"
        assert display_value(dt.datetime(2024, 5, 1, 9, 30, 15)) == "2024-05-01T09:30"

    def test_enum_display_uses_member_label(self) -> None:
        members = [EnumMember(value="RED", label="Bright red"), EnumMember(value="GREEN")]
        assert display_value(Color.RED, members) == "Bright red"
        assert display_value(Color.GREEN, members) == "GREEN"
        assert raw_value(Color.RED) == "RED"

    def test_sequences_are_comma_joined(self) -> None:
        assert raw_value([Color.RED, Color.GREEN]) == "RED,GREEN"


class TestConstraints:
    def test_length_bounds(self) -> None:
        meta = FieldMetadata(
            name="Code", constraints=(Constraint(kind=ConstraintKind.LENGTH, minimum=2, maximum=8),)
        )
        assert min_length(meta) == 2
        assert max_length(meta) == 8

    def test_separate_min_and_max(self) -> None:
        meta = FieldMetadata(
            name="Code",
            constraints=(
                Constraint(kind=ConstraintKind.MIN_LENGTH, minimum=1),
                Constraint(kind=ConstraintKind.MAX_LENGTH, maximum=4),
            ),
        )
        assert (min_length(meta), max_length(meta)) == (1, 4)

    def test_pattern_and_range(self) -> None:
        meta = FieldMetadata(
            name="Age",
            constraints=(
                Constraint(kind=ConstraintKind.PATTERN, pattern=r"^\d+$"),
                Constraint(kind=ConstraintKind.RANGE, minimum=18, maximum=99.5),
            ),
        )
        assert pattern(meta) == r"^\d+$"
        assert value_range(meta) == ("18", "99.5")

    def test_no_metadata_no_hints(self) -> None:
        assert min_length(None) is None
        assert value_range(None) == (None, None)
        assert validation_attributes(None, "x") == []


class TestValidationAttributes:
    def test_default_messages_in_declaration_order(self) -> None:
        meta = FieldMetadata(
            name="Title",
            constraints=(
                Constraint(kind=ConstraintKind.REQUIRED),
                Constraint(kind=ConstraintKind.LENGTH, minimum=3, maximum=100),
            ),
        )
        assert validation_attributes(meta, "Task title") == [
            ("data-val", "true"),
            ("data-val-required", "The Task title field is required."),
            (
                "data-val-length",
                "The field Task title must be a string with a maximum length of 100.",
            ),
            ("data-val-length-max", "100"),
            ("data-val-length-min", "3"),
        ]

    def test_custom_message_and_range(self) -> None:
        meta = FieldMetadata(
            name="Qty",
            constraints=(
                Constraint(kind=ConstraintKind.RANGE, minimum=1, maximum=5, message="1 to 5"),
            ),
        )
        assert validation_attributes(meta, "Qty") == [
            ("data-val", "true"),
            ("data-val-range", "1 to 5"),
            ("data-val-range-min", "1"),
            ("data-val-range-max", "5"),
        ]

    def test_email_rule(self) -> None:
        meta = FieldMetadata(name="Email", constraints=(Constraint(kind=ConstraintKind.EMAIL),))
        assert ("data-val-email", "The Email field is not a valid e-mail address.") in (
            validation_attributes(meta, "Email")
        )


class TestEnumOptions:
    def test_members_in_declaration_order(self) -> None:
        members = enum_members(Color, {"GREEN": "Leaf green"})
        assert [(m.value, m.display) for m in members] == [("RED", "RED"), ("GREEN", "Leaf green")]

    def test_non_enum_type_is_a_programmer_error(self) -> None:
        with pytest.raises(ComponentConfigError):
            enum_members(str)  # type: ignore[arg-type]

    def test_selection_is_case_insensitive(self) -> None:
        options = enum_options(enum_members(Color), "green")
        assert [o.selected for o in options] == [False, True]

    def test_multiple_selection(self) -> None:
        options = enum_options(enum_members(Color), ["RED", "GREEN"])
        assert all(o.selected for o in options)
