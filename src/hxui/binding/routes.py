"""
URL synthesis from route identifiers.

Two synthesizers are provided: :class:`RouteTable` for explicit path
templates and :class:`StarletteUrlSynthesizer` for named routes on a
Starlette or FastAPI application.  Both put route values that are not path
parameters into the query string.
"""

from __future__ import annotations

import logging
import string
from collections.abc import Mapping
from typing import Any

from starlette.datastructures import URL
from starlette.routing import NoMatchFound

from hxui.core.capabilities import RouteTarget
from hxui.errors import UrlSynthesisError

logger = logging.getLogger(__name__)


def route_key(route: RouteTarget) -> str:
    """Lookup key for a route: the page, else ``controller.action``."""
    if route.page and route.page.strip():
        return route.page
    return ".".join(p for p in (route.controller, route.action) if p and p.strip())


def _with_query(path: str, query: Mapping[str, str]) -> str:
    if not query:
        return path
    return str(URL(path).include_query_params(**query))


class RouteTable:
    """Route key -> path template (``/users/{id}``).

    Example::

        urls = RouteTable({"users.detail": "/users/{id}", "/Search": "/search"})
        urls.synthesize(RouteTarget(page="/Search", handler="Results"), {"handler": "Results"})
        # "/search?handler=Results"
    """

    def __init__(self, routes: Mapping[str, str] | None = None) -> None:
        self._routes: dict[str, str] = dict(routes or {})

    def add(self, key: str, template: str) -> None:
        self._routes[key] = template

    def __contains__(self, key: object) -> bool:
        return key in self._routes

    def synthesize(self, route: RouteTarget, params: Mapping[str, str]) -> str:
        key = route_key(route)
        template = self._routes.get(key)
        if template is None:
            raise UrlSynthesisError(f"No route named {key!r}", route=key)

        try:
            names = {f for _, f, _, _ in string.Formatter().parse(template) if f}
        except ValueError as e:
            raise UrlSynthesisError(f"Bad path template {template!r}: {e}", route=key) from e
        missing = names - params.keys()
        if missing:
            raise UrlSynthesisError(
                f"Missing route values: {', '.join(sorted(missing))}", route=key
            )
        try:
            path = template.format(**{n: params[n] for n in names})
        except (ValueError, IndexError, KeyError) as e:
            raise UrlSynthesisError(f"Bad path template {template!r}: {e}", route=key) from e
        query = {k: v for k, v in params.items() if k not in names}
        return _with_query(path, query)


class StarletteUrlSynthesizer:
    """Resolves route keys against the named routes of a Starlette/FastAPI app.

    The route key (see :func:`route_key`) is used as the route ``name``.
    """

    def __init__(self, app: Any) -> None:
        self._router = getattr(app, "router", app)

    def _path_params(self, name: str) -> set[str]:
        for route in getattr(self._router, "routes", ()):
            if getattr(route, "name", None) == name:
                return set(getattr(route, "param_convertors", {}))
        return set()

    def synthesize(self, route: RouteTarget, params: Mapping[str, str]) -> str:
        name = route_key(route)
        path_keys = self._path_params(name)
        path_params = {k: v for k, v in params.items() if k in path_keys}
        try:
            path = self._router.url_path_for(name, **path_params)
        except NoMatchFound as e:
            raise UrlSynthesisError(f"No route named {name!r}: {e}", route=name) from e
        query = {k: v for k, v in params.items() if k not in path_keys}
        return _with_query(str(path), query)
