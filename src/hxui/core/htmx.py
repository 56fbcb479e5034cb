"""
htmx directive set and its URL-synthesis fallback.

A verb directive (``get``/``post``/``put``/``patch``/``delete``) left as an
empty string asks for its URL to be synthesized from the :class:`RouteTarget`.
Synthesis failures never reach the caller: the directive is omitted and the
reason logged at DEBUG.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict

from hxui.errors import UrlSynthesisError

from .capabilities import RouteTarget, UrlSynthesizer

logger = logging.getLogger(__name__)

VERBS: tuple[str, ...] = ("get", "post", "put", "patch", "delete")

# (field name, attribute name) in emission order
BEHAVIOURS: tuple[tuple[str, str], ...] = (
    ("target", "hx-target"),
    ("swap", "hx-swap"),
    ("trigger", "hx-trigger"),
    ("indicator", "hx-indicator"),
    ("confirm", "hx-confirm"),
    ("push_url", "hx-push-url"),
    ("boost", "hx-boost"),
    ("vals", "hx-vals"),
    ("headers", "hx-headers"),
    ("disabled_elt", "hx-disabled-elt"),
    ("encoding", "hx-encoding"),
    ("ext", "hx-ext"),
    ("include", "hx-include"),
    ("params", "hx-params"),
    ("select", "hx-select"),
    ("select_oob", "hx-select-oob"),
    ("swap_oob", "hx-swap-oob"),
    ("sync", "hx-sync"),
)


def synthesize_url(route: RouteTarget | None, urls: UrlSynthesizer | None) -> str | None:
    """URL for ``route``, or None when it cannot be produced."""
    if route is None or not route.has_identifiers:
        return None
    if urls is None:
        logger.debug("No URL synthesizer available for route %s", route)
        return None
    try:
        url = urls.synthesize(route, route.parameters())
    except UrlSynthesisError as exc:
        logger.debug("URL synthesis failed for %s: %s", route, exc.message)
        return None
    return url or None


def resolve_verb(
    value: str | None, route: RouteTarget | None, urls: UrlSynthesizer | None
) -> str | None:
    """Final value of one verb directive.

    None stays absent, a non-empty string is used verbatim, and an empty
    string is replaced by the synthesized URL (or dropped).
    """
    if value is None:
        return None
    if value:
        return value
    return synthesize_url(route, urls)


def _behaviour_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, dict):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


class HtmxAttributes(BaseModel):
    """The full htmx directive set of one element.

    Every field defaults to None, which renders nothing.  ``vals`` and
    ``headers`` accept a mapping that is JSON-encoded; ``boost`` and
    ``push_url`` accept booleans.
    """

    model_config = ConfigDict(frozen=True)

    get: str | None = None
    post: str | None = None
    put: str | None = None
    patch: str | None = None
    delete: str | None = None
    route: RouteTarget | None = None

    target: str | None = None
    swap: str | None = None
    trigger: str | None = None
    indicator: str | None = None
    confirm: str | None = None
    push_url: str | bool | None = None
    boost: str | bool | None = None
    vals: str | dict[str, Any] | None = None
    headers: str | dict[str, Any] | None = None
    disabled_elt: str | None = None
    encoding: str | None = None
    ext: str | None = None
    include: str | None = None
    params: str | None = None
    select: str | None = None
    select_oob: str | None = None
    swap_oob: str | None = None
    sync: str | None = None

    def items(self, urls: UrlSynthesizer | None = None) -> list[tuple[str, str]]:
        """Rendered ``(attribute, value)`` pairs in fixed order."""
        pairs: list[tuple[str, str]] = []
        for verb in VERBS:
            url = resolve_verb(getattr(self, verb), self.route, urls)
            if url is not None:
                pairs.append((f"hx-{verb}", url))
        for field_name, attr in BEHAVIOURS:
            value = getattr(self, field_name)
            if value is not None:
                pairs.append((attr, _behaviour_text(value)))
        return pairs

    def merged(self, **overrides: Any) -> HtmxAttributes:
        """Copy with the given directives replaced."""
        return self.model_copy(update=overrides)
