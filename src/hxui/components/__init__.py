"""
Component catalogue.

Components are frozen pydantic models.  Build a tree, then render it with
:func:`hxui.render` or by passing it anywhere ``__html__`` is honoured.
"""

from .actions import Button, ButtonGroup
from .base import CSS_PREFIX, Component
from .data_display import Sparkline
from .feedback import Badge, Callout, ProgressBar, Spinner
from .form_control import FormControl
from .forms import (
    Checkbox,
    Input,
    Option,
    Radio,
    RadioGroup,
    Select,
    SelectItem,
    Switch,
    Textarea,
    ValidationMessage,
    ValidationSummary,
    enum_items,
)
from .imagery import Icon
from .navigation import (
    Breadcrumb,
    BreadcrumbItem,
    BreadcrumbLink,
    Carousel,
    CarouselItem,
    Tab,
    TabGroup,
    TabPanel,
)
from .organization import Card, CardFooter, CardHeader, CardImage, Divider
from .patterns import LazyLoad, Poll

__all__ = [
    "CSS_PREFIX",
    "Badge",
    "Breadcrumb",
    "BreadcrumbItem",
    "BreadcrumbLink",
    "Button",
    "ButtonGroup",
    "Callout",
    "Card",
    "CardFooter",
    "CardHeader",
    "CardImage",
    "Carousel",
    "CarouselItem",
    "Checkbox",
    "Component",
    "Divider",
    "FormControl",
    "Icon",
    "Input",
    "LazyLoad",
    "Option",
    "Poll",
    "ProgressBar",
    "Radio",
    "RadioGroup",
    "Select",
    "SelectItem",
    "Sparkline",
    "Spinner",
    "Switch",
    "Tab",
    "TabGroup",
    "TabPanel",
    "Textarea",
    "ValidationMessage",
    "ValidationSummary",
    "enum_items",
]
