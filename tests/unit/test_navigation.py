"""Tests for tab groups, carousels and breadcrumbs."""

from __future__ import annotations

from markupsafe import Markup

from hxui import render
from hxui.components import (
    Breadcrumb,
    BreadcrumbItem,
    BreadcrumbLink,
    Carousel,
    CarouselItem,
    Tab,
    TabGroup,
    TabPanel,
)
from hxui.core.variants import Orientation, TabActivation, TabPlacement


def _tabs(**kwargs) -> TabGroup:
    return TabGroup(
        Tab("One", panel="one", active=True),
        Tab("Two", panel="two", closable=True),
        TabPanel("A", name="one", active=True),
        TabPanel("B", name="two"),
        **kwargs,
    )


class TestTabGroup:
    def test_tabs_collected_into_tablist(self) -> None:
        html = render(_tabs())
        assert html.startswith(
            '<div class="rhx-tab-group" data-rhx-tabs="" data-rhx-placement="top">'
            '<div class="rhx-tab-group__nav" role="tablist">'
            '<button class="rhx-tab rhx-tab--active" id="tab-one" role="tab" '
            'aria-selected="true" aria-controls="panel-one" tabindex="0">'
            '<span class="rhx-tab__label">One</span></button>'
        )
        assert '<div class="rhx-tab-group__body"><div class="rhx-tab-panel' in html

    def test_tab_order_follows_declaration(self) -> None:
        html = render(_tabs())
        assert html.index('id="tab-one"') < html.index('id="tab-two"')

    def test_closable_tab(self) -> None:
        html = render(_tabs())
        assert '<span class="rhx-tab__close" aria-hidden="true">&times;</span>' in html

    def test_panels(self) -> None:
        html = render(_tabs())
        assert (
            '<div class="rhx-tab-panel rhx-tab-panel--active" id="panel-one" role="tabpanel" '
            'aria-labelledby="tab-one" tabindex="0">A</div>'
        ) in html
        assert 'aria-labelledby="tab-two" tabindex="0" hidden>B</div>' in html

    def test_vertical_placement_and_manual_activation(self) -> None:
        html = render(_tabs(placement=TabPlacement.START, activation=TabActivation.MANUAL))
        assert 'class="rhx-tab-group rhx-tab-group--start"' in html
        assert 'data-rhx-activation="manual"' in html
        assert 'aria-orientation="vertical"' in html

    def test_disabled_tab(self) -> None:
        html = render(TabGroup(Tab("X", panel="x", disabled=True, closable=True)))
        assert 'aria-disabled="true" disabled' in html
        assert "rhx-tab__close" not in html

    def test_tab_outside_group_renders_nothing(self) -> None:
        assert render(Tab("Lonely", panel="p")) == Markup("")


class TestCarousel:
    def test_slides_counted_and_indexed(self) -> None:
        html = render(Carousel(CarouselItem("a"), CarouselItem("b"), aria_label="Photos"))
        assert 'data-rhx-slide-count="2"' in html
        assert (
            '<div class="rhx-carousel__item" role="group" aria-roledescription="slide" '
            'aria-label="Slide 2" data-rhx-slide-index="2">b</div>'
        ) in html
        assert 'role="region" aria-roledescription="carousel" aria-label="Photos"' in html

    def test_navigation_and_pagination(self) -> None:
        html = render(Carousel(CarouselItem("a"), CarouselItem("b"), CarouselItem("c")))
        assert 'aria-label="Previous slide"' in html
        assert 'aria-label="Next slide"' in html
        assert '<path d="M15 18l-6-6 6-6" />' in html
        assert html.count('class="rhx-carousel__dot"') == 3
        assert 'aria-label="Slide 1" aria-selected="true" tabindex="0"' in html
        assert 'aria-label="Slide 3" aria-selected="false" tabindex="-1"' in html

    def test_single_slide_has_no_controls(self) -> None:
        html = render(Carousel(CarouselItem("only")))
        assert "rhx-carousel__navigation" not in html
        assert "rhx-carousel__pagination" not in html

    def test_options_as_data_attributes(self) -> None:
        html = render(
            Carousel(
                CarouselItem("a"),
                loop=True,
                autoplay=True,
                autoplay_interval=3000,
                orientation=Orientation.VERTICAL,
                mouse_dragging=False,
            )
        )
        assert 'class="rhx-carousel rhx-carousel--vertical"' in html
        assert 'data-rhx-loop="true"' in html
        assert 'data-rhx-autoplay="3000"' in html
        assert 'data-rhx-orientation="vertical"' in html
        assert "data-rhx-mouse-dragging" not in html

    def test_item_outside_carousel_defaults_to_first(self) -> None:
        assert 'aria-label="Slide 1"' in render(CarouselItem("x"))


class TestBreadcrumb:
    def test_items_from_data(self) -> None:
        crumbs = (
            BreadcrumbLink(label="Home", href="/"),
            BreadcrumbLink(label="Docs & API", href="/docs"),
            BreadcrumbLink(label="Intro"),
        )
        assert render(Breadcrumb(items=crumbs)) == Markup(
            '<nav class="rhx-breadcrumb" aria-label="Breadcrumb"><ol class="rhx-breadcrumb__list">'
            '<li class="rhx-breadcrumb__item"><a class="rhx-breadcrumb__link" href="/">Home</a>'
            '<span class="rhx-breadcrumb__separator" aria-hidden="true">/</span></li>'
            '<li class="rhx-breadcrumb__item"><a class="rhx-breadcrumb__link" href="/docs">'
            'Docs &amp; API</a><span class="rhx-breadcrumb__separator" aria-hidden="true">/</span>'
            "</li>"
            '<li class="rhx-breadcrumb__item" aria-current="page">'
            '<span class="rhx-breadcrumb__current">Intro</span></li>'
            "</ol></nav>"
        )

    def test_child_items(self) -> None:
        html = render(
            Breadcrumb(
                BreadcrumbItem("Home", href="/"),
                BreadcrumbItem("Settings"),
                separator=">",
                aria_label="Trail",
            )
        )
        assert 'aria-label="Trail"' in html
        assert '<a class="rhx-breadcrumb__link" href="/">Home</a>' in html
        assert 'aria-hidden="true">&gt;</span>' in html
        assert '<span class="rhx-breadcrumb__current">Settings</span>' in html

    def test_item_outside_breadcrumb_passes_content_through(self) -> None:
        assert render(BreadcrumbItem("Loose")) == Markup("Loose")
