"""Accessibility attribute set."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .html import attr_text

# (field name, attribute name) in emission order
ARIA_FIELDS: tuple[tuple[str, str], ...] = (
    ("role", "role"),
    ("label", "aria-label"),
    ("labelledby", "aria-labelledby"),
    ("describedby", "aria-describedby"),
    ("expanded", "aria-expanded"),
    ("selected", "aria-selected"),
    ("disabled", "aria-disabled"),
    ("hidden", "aria-hidden"),
    ("checked", "aria-checked"),
    ("pressed", "aria-pressed"),
    ("required", "aria-required"),
    ("invalid", "aria-invalid"),
    ("current", "aria-current"),
    ("live", "aria-live"),
    ("controls", "aria-controls"),
    ("haspopup", "aria-haspopup"),
    ("valuenow", "aria-valuenow"),
    ("valuemin", "aria-valuemin"),
    ("valuemax", "aria-valuemax"),
)


class AriaAttributes(BaseModel):
    """ARIA wiring for one element; only provided values render."""

    model_config = ConfigDict(frozen=True)

    role: str | None = None
    label: str | None = None
    labelledby: str | None = None
    describedby: str | None = None
    expanded: bool | None = None
    selected: bool | None = None
    disabled: bool | None = None
    hidden: bool | None = None
    checked: bool | str | None = None  # "mixed" for tri-state
    pressed: bool | str | None = None
    required: bool | None = None
    invalid: bool | None = None
    current: str | bool | None = None
    live: str | None = None
    controls: str | None = None
    haspopup: str | bool | None = None
    valuenow: float | int | None = None
    valuemin: float | int | None = None
    valuemax: float | int | None = None

    def items(self) -> list[tuple[str, str]]:
        pairs: list[tuple[str, str]] = []
        for field_name, attr in ARIA_FIELDS:
            text = attr_text(getattr(self, field_name))
            if text is not None:
                pairs.append((attr, text))
        return pairs
