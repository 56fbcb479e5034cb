"""
hxui - server-rendered htmx UI components.

A catalogue of accessible components that render to HTML fragments, with
htmx directives, bound-field resolution and slot/group composition.
"""

from __future__ import annotations

from ._version import get_version
from .config import HxUIOptions, head_assets, load_options
from .core import (
    FieldMetadata,
    HtmxAttributes,
    MappingFieldProvider,
    RenderContext,
    RouteTarget,
    ValidationState,
    render,
)
from .errors import ComponentConfigError, ConfigError, HxUIError, UrlSynthesisError

__version__ = get_version()

__all__ = [
    "__version__",
    "ComponentConfigError",
    "ConfigError",
    "FieldMetadata",
    "HtmxAttributes",
    "HxUIError",
    "HxUIOptions",
    "MappingFieldProvider",
    "RenderContext",
    "RouteTarget",
    "UrlSynthesisError",
    "ValidationState",
    "head_assets",
    "load_options",
    "render",
]
