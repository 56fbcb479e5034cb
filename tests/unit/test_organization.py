"""Tests for cards and dividers."""

from __future__ import annotations

from markupsafe import Markup

from hxui import render
from hxui.components import Card, CardFooter, CardHeader, CardImage, Divider
from hxui.core import HtmxAttributes


class TestCard:
    def test_slots_laid_out_in_fixed_order(self) -> None:
        card = Card(
            CardFooter("F"),
            "Body",
            CardHeader("H"),
            CardImage(src="/a.png", alt="A"),
        )
        assert render(card) == Markup(
            '<div class="rhx-card">'
            '<div class="rhx-card__image"><img src="/a.png" alt="A" /></div>'
            '<div class="rhx-card__header">H</div>'
            '<div class="rhx-card__body">Body</div>'
            '<div class="rhx-card__footer">F</div>'
            "</div>"
        )

    def test_blank_body_omitted(self) -> None:
        assert render(Card(CardHeader("H"), "  ")) == Markup(
            '<div class="rhx-card"><div class="rhx-card__header">H</div></div>'
        )

    def test_repeated_slot_keeps_last(self) -> None:
        html = render(Card(CardHeader("first"), CardHeader("second")))
        assert "second" in html
        assert "first" not in html

    def test_nested_cards_have_separate_slots(self) -> None:
        html = render(Card(CardHeader("Outer"), Card(CardHeader("Inner"))))
        assert html.startswith('<div class="rhx-card"><div class="rhx-card__header">Outer</div>')
        assert '<div class="rhx-card"><div class="rhx-card__header">Inner</div></div>' in html

    def test_htmx_on_card(self) -> None:
        html = render(Card("x", hx=HtmxAttributes(get="/card", trigger="revealed")))
        assert html.startswith('<div class="rhx-card" hx-get="/card" hx-trigger="revealed">')

    def test_slot_children_outside_card(self) -> None:
        assert render(CardHeader("H")) == Markup("H")
        assert render(CardImage(src="/a.png")) == Markup("")


class TestDivider:
    def test_horizontal(self) -> None:
        assert render(Divider()) == Markup('<hr class="rhx-divider" />')

    def test_vertical(self) -> None:
        assert render(Divider(vertical=True)) == Markup(
            '<div class="rhx-divider rhx-divider--vertical" role="separator" '
            'aria-orientation="vertical"></div>'
        )
