"""Tests for attribute and element assembly."""

from __future__ import annotations

from markupsafe import Markup

from hxui.core.html import Attributes, attr_text, element, empty_element, format_number, join
from hxui.core.variants import Variant


class TestAttrText:
    def test_none_is_absent(self) -> None:
        assert attr_text(None) is None

    def test_booleans(self) -> None:
        assert attr_text(True) == "true"
        assert attr_text(False) == "false"

    def test_numbers_drop_trailing_zero(self) -> None:
        assert attr_text(3.0) == "3"
        assert attr_text(2.5) == "2.5"
        assert format_number(40) == "40"

    def test_enum_member(self) -> None:
        assert attr_text(Variant.BRAND) == "brand"


class TestAttributes:
    def test_none_and_false_dropped(self) -> None:
        attrs = Attributes([("id", None), ("disabled", False), ("name", "x")])
        assert str(attrs) == ' name="x"'

    def test_true_renders_bare(self) -> None:
        assert str(Attributes([("hidden", True)])) == " hidden"

    def test_aria_booleans_render_as_tokens(self) -> None:
        attrs = Attributes([("aria-checked", True), ("aria-selected", False), ("checked", False)])
        assert str(attrs) == ' aria-checked="true" aria-selected="false"'

    def test_values_are_escaped(self) -> None:
        attrs = Attributes([("title", '"><script>')])
        assert str(attrs) == ' title="&#34;&gt;&lt;script&gt;"'

    def test_overwrite_keeps_position(self) -> None:
        attrs = Attributes([("a", "1"), ("b", "2")]).set("a", "3")
        assert list(attrs) == [("a", "3"), ("b", "2")]

    def test_set_if_and_remove(self) -> None:
        attrs = Attributes().set_if("open", True).set_if("closed", False)
        assert "open" in attrs
        attrs.remove("open")
        assert len(attrs) == 0


class TestElement:
    def test_content_escaped(self) -> None:
        assert element("span", None, "<b>") == Markup("<span>&lt;b&gt;</span>")

    def test_markup_content_trusted(self) -> None:
        assert element("span", None, Markup("<b>x</b>")) == Markup("<span><b>x</b></span>")

    def test_void_element(self) -> None:
        assert element("img", [("src", "/a.png"), ("alt", "")]) == Markup(
            '<img src="/a.png" alt="" />'
        )

    def test_empty_element_for_svg_shapes(self) -> None:
        assert empty_element("rect", [("x", "0")]) == Markup('<rect x="0" />')

    def test_join_skips_none_and_escapes_text(self) -> None:
        assert join([Markup("<i></i>"), None, "&"]) == Markup("<i></i>&amp;")
