"""
Adapters that supply render capabilities from common Python stacks.

- :mod:`.pydantic_fields`: field metadata and validation state from pydantic
- :mod:`.routes`: URL synthesis from a route table or a Starlette router
"""

from .pydantic_fields import ModelFieldProvider, validation_state_from_error
from .routes import RouteTable, StarletteUrlSynthesizer

__all__ = [
    "ModelFieldProvider",
    "RouteTable",
    "StarletteUrlSynthesizer",
    "validation_state_from_error",
]
