"""
Shared base for field-bound form controls.

A control may be bound to an external field by name (``field=``).  The bound
field fills in name, value, label, hint and required-ness where the component
does not say otherwise, and contributes constraints and ``data-val-*``
attributes.  Validation errors for the resolved name switch the control into
its error state.
"""

from __future__ import annotations

from typing import Any

from markupsafe import Markup

from hxui.core.context import RenderContext
from hxui.core.css import ClassBuilder
from hxui.core.fields import validation_attributes
from hxui.core.html import Attributes, element
from hxui.core.resolver import ResolvedField, resolve_field
from hxui.core.variants import Size

from .base import Component


class FormControl(Component):
    """Base for inputs, textareas, checkboxes, switches, selects and radio groups."""

    field: str | None = None
    name: str | None = None
    value: Any = None
    label: str | None = None
    hint: str | None = None
    size: Size = Size.MEDIUM
    disabled: bool = False
    readonly: bool = False
    required: bool | None = None
    aria_label: str | None = None

    def resolve(self, ctx: RenderContext, *, default_value: str | None = None) -> ResolvedField:
        return resolve_field(
            ctx,
            field=self.field,
            name=self.name,
            id=self.id,
            value=self.value,
            label=self.label,
            hint=self.hint,
            required=self.required,
            default_value=default_value,
        )

    def control_css(self, resolved: ResolvedField) -> ClassBuilder:
        """Wrapper classes common to every control."""
        return (
            self.css()
            .add_if(self.modifier(self.size.value), self.size is not Size.MEDIUM)
            .add_if(self.modifier("disabled"), self.disabled)
        )

    def wrapper_attributes(self, css: ClassBuilder, resolved: ResolvedField) -> Attributes:
        # The id belongs to the native control, not the wrapper.
        css.add_if(self.modifier("error"), resolved.has_error)
        return self.base_attributes(css, with_id=False)

    # -- fragments ----------------------------------------------------------

    def label_html(
        self, resolved: ResolvedField, *, label_id: str | None = None, for_control: bool = True
    ) -> Markup:
        if not resolved.label:
            return Markup("")
        attrs = Attributes([("class", self.element("label")), ("id", label_id)])
        if for_control:
            attrs.set("for", resolved.id)
        return element("label", attrs, resolved.label)

    def hint_html(self, resolved: ResolvedField) -> Markup:
        if not resolved.hint:
            return Markup("")
        return element(
            "span", [("class", self.element("hint")), ("id", resolved.hint_id)], resolved.hint
        )

    def error_html(self, resolved: ResolvedField) -> Markup:
        """Error region; always present so the live region exists before it fills."""
        attrs = Attributes(
            [
                ("class", self.element("error")),
                ("id", resolved.error_id),
                ("aria-live", "polite"),
            ]
        )
        attrs.set("hidden", not resolved.has_error)
        return element("span", attrs, resolved.error or "")

    def state_aria(self, resolved: ResolvedField) -> list[tuple[str, Any]]:
        return [
            ("aria-describedby", resolved.describedby),
            ("aria-invalid", "true" if resolved.has_error else None),
            ("aria-required", "true" if resolved.required else None),
        ]

    def validation_items(self, resolved: ResolvedField) -> list[tuple[str, str]]:
        return validation_attributes(resolved.meta, resolved.validation_label)
