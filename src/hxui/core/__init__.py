"""
Render engine shared by every hxui component.

- ``css``: BEM class builder
- ``htmx`` / ``aria``: directive and accessibility attribute sets
- ``resolver`` / ``fields``: bound-field attribute resolution
- ``context``: render scope with slot and group registries
- ``geometry``: sparkline point mapping
"""

from .aria import AriaAttributes
from .capabilities import (
    Constraint,
    ConstraintKind,
    EnumMember,
    ErrorLookup,
    FieldMetadata,
    FieldMetadataProvider,
    MappingFieldProvider,
    RouteTarget,
    UrlSynthesizer,
    ValidationState,
)
from .context import GroupRegistry, RenderContext, SlotRegistry, render
from .css import ClassBuilder
from .geometry import compute_points, format_points
from .htmx import HtmxAttributes
from .resolver import ResolvedField, resolve_field

__all__ = [
    "AriaAttributes",
    "ClassBuilder",
    "Constraint",
    "ConstraintKind",
    "EnumMember",
    "ErrorLookup",
    "FieldMetadata",
    "FieldMetadataProvider",
    "GroupRegistry",
    "HtmxAttributes",
    "MappingFieldProvider",
    "RenderContext",
    "ResolvedField",
    "RouteTarget",
    "SlotRegistry",
    "UrlSynthesizer",
    "ValidationState",
    "compute_points",
    "format_points",
    "render",
    "resolve_field",
]
