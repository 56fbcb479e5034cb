"""Tests for htmx directive rendering and URL synthesis."""

from __future__ import annotations

import logging

from hxui.core import HtmxAttributes, RouteTarget
from hxui.core.htmx import resolve_verb, synthesize_url


class TestVerbResolution:
    def test_absent_verb_stays_absent(self, urls) -> None:
        assert resolve_verb(None, RouteTarget(page="/Items"), urls) is None
        assert urls.calls == []

    def test_explicit_url_used_verbatim(self, urls) -> None:
        assert resolve_verb("/explicit", RouteTarget(page="/Items"), urls) == "/explicit"
        assert urls.calls == []

    def test_empty_verb_synthesizes_from_page(self, urls) -> None:
        route = RouteTarget(page="/Items", handler="Delete", values={"id": "7"})
        assert resolve_verb("", route, urls) == "/Items?handler=Delete&id=7"

    def test_empty_verb_with_controller_action(self, urls) -> None:
        route = RouteTarget(controller="Items", action="Edit")
        assert resolve_verb("", route, urls) == "/Items/Edit"

    def test_handler_ignored_without_page(self) -> None:
        route = RouteTarget(controller="Items", action="Edit", handler="Save")
        assert route.parameters() == {}

    def test_no_route_identifiers_omits_directive(self, urls) -> None:
        assert resolve_verb("", RouteTarget(handler="Only"), urls) is None
        assert resolve_verb("", None, urls) is None
        assert urls.calls == []

    def test_missing_synthesizer_omits_directive(self) -> None:
        assert synthesize_url(RouteTarget(page="/Items"), None) is None

    def test_synthesis_failure_is_logged_not_raised(self, failing_urls, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="hxui.core.htmx"):
            assert resolve_verb("", RouteTarget(page="/Gone"), failing_urls) is None
        assert "URL synthesis failed" in caplog.text


class TestHtmxAttributes:
    def test_nothing_set_renders_nothing(self) -> None:
        assert HtmxAttributes().items() == []

    def test_fixed_emission_order(self) -> None:
        hx = HtmxAttributes(swap="outerHTML", target="#list", get="/items", post="/save")
        assert hx.items() == [
            ("hx-get", "/items"),
            ("hx-post", "/save"),
            ("hx-target", "#list"),
            ("hx-swap", "outerHTML"),
        ]

    def test_booleans_and_mappings(self) -> None:
        hx = HtmxAttributes(boost=True, push_url=False, vals={"a": 1, "b": "x"})
        assert hx.items() == [
            ("hx-push-url", "false"),
            ("hx-boost", "true"),
            ("hx-vals", '{"a":1,"b":"x"}'),
        ]

    def test_empty_behaviour_still_rendered(self) -> None:
        assert HtmxAttributes(confirm="").items() == [("hx-confirm", "")]

    def test_synthesized_verb_uses_route(self, urls) -> None:
        hx = HtmxAttributes(delete="", route=RouteTarget(page="/Items", values={"id": "3"}))
        assert hx.items(urls) == [("hx-delete", "/Items?id=3")]

    def test_failed_synthesis_leaves_other_directives(self, failing_urls) -> None:
        hx = HtmxAttributes(post="", target="this", route=RouteTarget(page="/Items"))
        assert hx.items(failing_urls) == [("hx-target", "this")]

    def test_merged_returns_copy(self) -> None:
        base = HtmxAttributes(get="/a", target="#t")
        merged = base.merged(target="#other")
        assert merged.target == "#other"
        assert base.target == "#t"
