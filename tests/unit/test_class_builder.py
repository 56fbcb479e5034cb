"""Tests for the BEM class builder."""

from __future__ import annotations

from enum import Enum

from hxui.core.css import ClassBuilder, enum_token
from hxui.core.variants import Size, Variant


class Shape(Enum):
    ROUNDED = 1
    SQUARE = 2


class TestAdd:
    def test_initial_token(self) -> None:
        assert ClassBuilder("rhx-button").build() == "rhx-button"

    def test_empty_builder_builds_empty_string(self) -> None:
        builder = ClassBuilder()
        assert builder.build() == ""
        assert builder.is_empty
        assert str(builder) == ""

    def test_blank_tokens_are_dropped(self) -> None:
        builder = ClassBuilder("a").add(None).add("").add("   ").add("b")
        assert builder.build() == "a b"
        assert builder.count == 2

    def test_insertion_order_kept_and_never_deduplicated(self) -> None:
        builder = ClassBuilder("b").add("a").add("b")
        assert builder.build() == "b a b"
        assert builder.tokens == ("b", "a", "b")

    def test_add_range_accepts_tokens_and_iterables(self) -> None:
        builder = ClassBuilder().add_range("a", None, ["b", None, " ", "c"])
        assert builder.build() == "a b c"


class TestConditional:
    def test_add_if(self) -> None:
        builder = ClassBuilder("x").add_if("on", True).add_if("off", False)
        assert builder.build() == "x on"

    def test_add_choice_adds_exactly_one(self) -> None:
        assert ClassBuilder().add_choice(True, "yes", "no").build() == "yes"
        assert ClassBuilder().add_choice(False, "yes", "no").build() == "no"

    def test_add_from_factory(self) -> None:
        assert ClassBuilder("a").add_from(lambda: "b").add_from(lambda: None).build() == "a b"


class TestVariants:
    def test_variant_string_case_preserved(self) -> None:
        builder = ClassBuilder("rhx-badge").add_variant("rhx-badge", "Brand")
        assert builder.build() == "rhx-badge rhx-badge--Brand"

    def test_variant_enum_uses_token(self) -> None:
        builder = ClassBuilder().add_variant("rhx-callout", Variant.DANGER)
        assert builder.build() == "rhx-callout--danger"

    def test_missing_variant_adds_nothing(self) -> None:
        assert ClassBuilder("a").add_variant("a", None).add_variant("a", "").build() == "a"

    def test_size_has_variant_shape(self) -> None:
        assert ClassBuilder().add_size("rhx-input", Size.LARGE).build() == "rhx-input--large"

    def test_enum_lowercases_member_name(self) -> None:
        builder = ClassBuilder().add_enum("shape-", Shape.ROUNDED).add_enum("shape-", None)
        assert builder.build() == "shape-rounded"

    def test_enum_token_prefers_string_value(self) -> None:
        assert enum_token(Variant.SUCCESS) == "success"
        assert enum_token(Shape.SQUARE) == "square"
