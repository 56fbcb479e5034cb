"""
Library options and head asset tags.

Options are read from a ``[tool.hxui]`` table in ``pyproject.toml`` or a
top-level ``[hxui]`` table in ``hxui.toml``.  Every key is optional.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

from markupsafe import Markup

from .core.html import element
from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_HTMX_VERSION = "2.0.4"
THEMES = ("light", "dark")


@dataclass
class HxUIOptions:
    """Asset and theme options for a host application."""

    default_theme: str = "light"  # "light" | "dark"
    cdn_base_url: str = "https://unpkg.com"
    include_htmx_script: bool = True
    css_isolation: bool = False
    htmx_version: str = DEFAULT_HTMX_VERSION
    asset_base_path: str = "/_rhx"


def _options_from_table(data: dict, source: Path) -> HxUIOptions:
    theme = data.get("default_theme", "light")
    if theme not in THEMES:
        raise ConfigError(
            f"{source}: default_theme must be one of {', '.join(THEMES)}, got {theme!r}"
        )
    for key in ("include_htmx_script", "css_isolation"):
        if key in data and not isinstance(data[key], bool):
            raise ConfigError(f"{source}: {key} must be true or false")

    return HxUIOptions(
        default_theme=theme,
        cdn_base_url=str(data.get("cdn_base_url", "https://unpkg.com")).rstrip("/"),
        include_htmx_script=data.get("include_htmx_script", True),
        css_isolation=data.get("css_isolation", False),
        htmx_version=str(data.get("htmx_version", DEFAULT_HTMX_VERSION)),
        asset_base_path=str(data.get("asset_base_path", "/_rhx")).rstrip("/"),
    )


def load_options(path: Path) -> HxUIOptions:
    """Load options from a ``pyproject.toml`` or ``hxui.toml`` file.

    Raises:
        ConfigError: The file cannot be parsed or holds invalid values.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    if path.name == "pyproject.toml":
        table = data.get("tool", {}).get("hxui", {})
    else:
        table = data.get("hxui", {})
    if not isinstance(table, dict):
        raise ConfigError(f"{path}: hxui options must be a table")
    return _options_from_table(table, path)


def find_options(project_root: Path) -> HxUIOptions:
    """Options for a project directory; ``hxui.toml`` wins over ``pyproject.toml``."""
    for name in ("hxui.toml", "pyproject.toml"):
        candidate = project_root / name
        if candidate.is_file():
            logger.debug("Loading hxui options from %s", candidate)
            return load_options(candidate)
    return HxUIOptions()


def head_assets(options: HxUIOptions | None = None) -> Markup:
    """``<link>`` and ``<script>`` tags for the stylesheets and behaviour scripts."""
    options = options or HxUIOptions()
    base = options.asset_base_path
    sheets = ["rhx-tokens", "rhx-reset", "rhx-core", "rhx-utilities"]

    tags = [
        element("link", [("rel", "stylesheet"), ("href", f"{base}/css/{sheet}.css")])
        for sheet in sheets
    ]
    tags.append(
        element(
            "link",
            [
                ("rel", "stylesheet"),
                ("href", f"{base}/css/themes/rhx-{options.default_theme}.css"),
            ],
        )
    )
    if options.include_htmx_script:
        tags.append(
            element(
                "script", [("src", f"{options.cdn_base_url}/htmx.org@{options.htmx_version}")], ""
            )
        )
    tags.append(element("script", [("src", f"{base}/js/rhx-core.js"), ("defer", True)], ""))
    return Markup("\n").join(tags)
