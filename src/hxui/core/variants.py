"""
Closed variant types used in class and attribute names.

Every enum value is the exact token that lands in markup, so the enum
definitions double as the token tables.  Changing a value changes the
emitted ``rhx-*`` class names.
"""

from __future__ import annotations

from enum import Enum


class Variant(str, Enum):
    """Semantic colour variants shared by badges, callouts and progress bars."""

    NEUTRAL = "neutral"
    BRAND = "brand"
    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"


class ButtonVariant(str, Enum):
    """Button appearances."""

    DEFAULT = "default"
    BRAND = "brand"
    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"
    GHOST = "ghost"
    TEXT = "text"


class Size(str, Enum):
    """Control sizes; MEDIUM is the unmodified default."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class Orientation(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class InputType(str, Enum):
    """Native ``<input type>`` subtypes an Input can render."""

    TEXT = "text"
    EMAIL = "email"
    URL = "url"
    TEL = "tel"
    PASSWORD = "password"
    NUMBER = "number"
    DATE = "date"
    DATETIME_LOCAL = "datetime-local"
    TIME = "time"
    SEARCH = "search"


class DataType(str, Enum):
    """Declared data-type tags a bound field may carry."""

    EMAIL = "email"
    URL = "url"
    PHONE = "phone"
    PASSWORD = "password"
    DATE = "date"
    DATETIME = "datetime"
    TIME = "time"


class ValueKind(str, Enum):
    """Raw value classification of a bound field."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    TIME = "time"
    ENUM = "enum"
    OTHER = "other"


class Resize(str, Enum):
    """Textarea resize behaviour; VERTICAL is the browser default."""

    NONE = "none"
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    BOTH = "both"
    AUTO = "auto"


class TabPlacement(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"
    START = "start"
    END = "end"


class TabActivation(str, Enum):
    AUTO = "auto"
    MANUAL = "manual"


class SparklineType(str, Enum):
    LINE = "line"
    AREA = "area"
    BAR = "bar"


# Native input subtype for each declared data type.
DATA_TYPE_INPUTS: dict[DataType, InputType] = {
    DataType.EMAIL: InputType.EMAIL,
    DataType.URL: InputType.URL,
    DataType.PHONE: InputType.TEL,
    DataType.PASSWORD: InputType.PASSWORD,
    DataType.DATE: InputType.DATE,
    DataType.DATETIME: InputType.DATETIME_LOCAL,
    DataType.TIME: InputType.TIME,
}

# Fallback subtype from the raw value kind.
VALUE_KIND_INPUTS: dict[ValueKind, InputType] = {
    ValueKind.INTEGER: InputType.NUMBER,
    ValueKind.NUMBER: InputType.NUMBER,
    ValueKind.DATE: InputType.DATE,
    ValueKind.DATETIME: InputType.DATETIME_LOCAL,
    ValueKind.TIME: InputType.TIME,
}
