"""Tests for slot and group registries and render scopes."""

from __future__ import annotations

import logging

from markupsafe import Markup

from hxui.components import Card, CardHeader, Carousel, CarouselItem, Radio, RadioGroup
from hxui.core import GroupRegistry, RenderContext, SlotRegistry, render


class TestSlotRegistry:
    def test_set_and_get_case_insensitive(self) -> None:
        slots = SlotRegistry()
        slots.set("Header", Markup("<h2>Hi</h2>"))
        assert slots.has("header")
        assert slots.get("HEADER") == Markup("<h2>Hi</h2>")
        assert "header" in slots

    def test_plain_text_fragment_is_escaped(self) -> None:
        slots = SlotRegistry()
        slots.set("footer", "<b>")
        assert slots.get("footer") == Markup("&lt;b&gt;")

    def test_missing_slot(self) -> None:
        slots = SlotRegistry()
        assert slots.get("image") is None
        assert slots.get_or_default("image", "none") == Markup("none")

    def test_last_write_wins_and_is_logged(self, caplog) -> None:
        slots = SlotRegistry()
        with caplog.at_level(logging.DEBUG, logger="hxui.core.context"):
            slots.set("header", "first")
            slots.set("HEADER", "second")
        assert slots.get("header") == Markup("second")
        assert slots.count == 1
        assert "more than once" in caplog.text

    def test_names_keep_original_spelling(self) -> None:
        slots = SlotRegistry()
        slots.set("Image", "")
        slots.set("footer", "")
        assert slots.names == ["Image", "footer"]


class TestGroupRegistry:
    def test_append_returns_one_based_index(self) -> None:
        group = GroupRegistry("carousel")
        assert group.append() == 1
        assert group.append() == 2
        assert group.count == 2

    def test_fragments_skip_markers(self) -> None:
        group = GroupRegistry("tabs")
        group.append(Markup("<button>A</button>"))
        group.append()
        group.append(Markup("<button>B</button>"))
        assert group.fragments() == [Markup("<button>A</button>"), Markup("<button>B</button>")]

    def test_selection_case_insensitive(self) -> None:
        group = GroupRegistry("radio", scope="color", selected=["Red"])
        assert group.is_selected("red")
        assert not group.is_selected("blue")
        assert not group.is_selected(None)


class TestRenderContext:
    def test_child_scope_shadows_registry(self) -> None:
        root = RenderContext()
        slots = SlotRegistry()
        child = root.child(slots=slots)
        assert child.slots is slots
        assert child.parent is root
        assert root.slots is None

    def test_child_scope_inherits_when_not_given(self) -> None:
        group = GroupRegistry("tabs")
        ctx = RenderContext(group=group).child()
        assert ctx.group("tabs") is group

    def test_group_of_other_kind_is_not_visible(self) -> None:
        ctx = RenderContext(group=GroupRegistry("tabs"))
        assert ctx.group("radio") is None

    def test_nested_scope_clears_registry(self) -> None:
        ctx = RenderContext(group=GroupRegistry("tabs")).child(group=None)
        assert ctx.group("tabs") is None

    def test_render_children_in_order(self) -> None:
        seen: list[str] = []

        class Recorder:
            def __init__(self, name: str) -> None:
                self.name = name

            def render(self, ctx: RenderContext) -> Markup:
                seen.append(self.name)
                return Markup(f"<{self.name}/>")

        out = RenderContext().render_children([Recorder("a"), "<text>", None, Recorder("b")])
        assert out == Markup("<a/>&lt;text&gt;<b/>")
        assert seen == ["a", "b"]

    def test_errors_without_validation_state(self) -> None:
        assert RenderContext().errors_for("Title") == []

    def test_render_plain_string(self) -> None:
        assert render("a & b") == Markup("a &amp; b")


class TestRegistryIsolationAcrossRenders:
    def test_carousel_rendered_twice(self) -> None:
        carousel = Carousel(CarouselItem("a"), CarouselItem("b"))
        first = render(carousel)
        second = render(carousel)
        assert first == second
        assert 'data-rhx-slide-count="2"' in second
        assert 'data-rhx-slide-index="3"' not in second

    def test_radio_group_rendered_twice(self) -> None:
        group = RadioGroup(Radio("Red"), Radio("Blue"), name="colour", value="Blue")
        first = render(group)
        assert render(group) == first
        assert first.count('type="radio"') == 2

    def test_card_slots_do_not_leak(self) -> None:
        assert "First" in render(Card(CardHeader("First")))
        html = render(Card("Body"))
        assert "rhx-card__header" not in html
