"""
Form controls.

Each control resolves its identity and state through
:meth:`FormControl.resolve`, so explicit inputs, bound field metadata and
validation errors combine the same way for every control.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from markupsafe import Markup
from pydantic import BaseModel, ConfigDict

from hxui.core import fields
from hxui.core.context import GroupRegistry, RenderContext
from hxui.core.css import ClassBuilder
from hxui.core.fields import OptionSpec
from hxui.core.html import Attributes, element, join
from hxui.core.resolver import ResolvedField, sanitize_id
from hxui.core.variants import InputType, Resize, Size, Variant

from . import icons
from .base import Component
from .feedback import CLOSE_X, callout_icon, stroke_svg
from .form_control import FormControl

OPTION_GROUP = "option"
RADIO_GROUP = "radio"

_ARROW_ICON = stroke_svg('<polyline points="6 9 12 15 18 9"></polyline>', size=16)
_CHECK_MARK = Markup(
    '<svg class="rhx-checkbox__check" xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" '
    'fill="none" stroke="currentColor" stroke-width="3" stroke-linecap="round" '
    'stroke-linejoin="round"><polyline points="20 6 9 17 4 12"></polyline></svg>'
)
_DASH_MARK = Markup(
    '<svg class="rhx-checkbox__dash" xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" '
    'fill="none" stroke="currentColor" stroke-width="3" stroke-linecap="round" '
    'stroke-linejoin="round"><line x1="5" y1="12" x2="19" y2="12"></line></svg>'
)


def text_of(markup: Markup) -> str:
    """Plain text of rendered child content."""
    return Markup(markup).striptags()


class SelectItem(BaseModel):
    """One explicit choice for a Select or RadioGroup."""

    model_config = ConfigDict(frozen=True)

    value: str
    text: str
    selected: bool = False
    disabled: bool = False


# =============================================================================
# Text inputs
# =============================================================================


class Input(FormControl):
    """Text-like ``<input>`` with label, hint and error regions.

    The input type comes from ``type`` if given, else from the bound field.
    """

    block = "input"

    type: InputType | None = None
    placeholder: str | None = None
    with_clear: bool = False
    password_toggle: bool = False
    filled: bool = False
    pattern: str | None = None
    minlength: int | None = None
    maxlength: int | None = None
    min: str | None = None
    max: str | None = None
    step: str | None = None
    autocomplete: str | None = None
    autofocus: bool = False

    def resolve_type(self, resolved: ResolvedField) -> InputType:
        if self.type is not None:
            return self.type
        return fields.infer_input_type(resolved.meta)

    def render(self, ctx: RenderContext) -> Markup:
        resolved = self.resolve(ctx)
        input_type = self.resolve_type(resolved)
        meta = resolved.meta

        css = (
            self.css()
            .add_if(self.modifier(self.size.value), self.size is not Size.MEDIUM)
            .add_if(self.modifier("filled"), self.filled)
            .add_if(self.modifier("disabled"), self.disabled)
            .add_if(self.modifier("readonly"), self.readonly)
        )
        attrs = self.wrapper_attributes(css, resolved)
        attrs.set("data-rhx-input", "")

        range_min, range_max = fields.value_range(meta)
        native = Attributes(
            [
                ("class", self.element("native")),
                ("type", input_type),
                ("id", resolved.id),
                ("name", resolved.name or None),
                ("value", resolved.value),
                ("placeholder", self.placeholder or None),
                ("required", resolved.required),
                ("disabled", self.disabled),
                ("readonly", self.readonly),
                ("autofocus", self.autofocus),
                ("minlength", self.minlength if self.minlength is not None else fields.min_length(meta)),
                ("maxlength", self.maxlength if self.maxlength is not None else fields.max_length(meta)),
                ("pattern", self.pattern or fields.pattern(meta)),
                ("min", self.min or range_min),
                ("max", self.max or range_max),
                ("step", self.step or None),
                ("autocomplete", self.autocomplete or None),
                ("aria-label", self.aria_label or None),
            ]
        )
        native.extend(self.state_aria(resolved))
        native.extend(self.htmx_items(ctx))
        native.extend(self.validation_items(resolved))

        control = [element("input", native)]
        if self.with_clear:
            control.append(
                element(
                    "button",
                    [
                        ("class", self.element("clear")),
                        ("type", "button"),
                        ("aria-label", "Clear"),
                        ("hidden", True),
                    ],
                    CLOSE_X,
                )
            )
        if self.password_toggle and input_type is InputType.PASSWORD:
            control.append(self._password_toggle())

        body = [
            self.label_html(resolved),
            element("div", [("class", self.element("control"))], join(control)),
            self.hint_html(resolved),
            self.error_html(resolved),
        ]
        return element("div", attrs, join(body))

    def _password_toggle(self) -> Markup:
        eye, eye_off = icons.get("eye") or "", icons.get("eye-off") or ""
        show = stroke_svg(eye, size=16, class_name=self.element("toggle-show"))
        hide = stroke_svg(eye_off, size=16, class_name=self.element("toggle-hide"), hidden=True)
        return element(
            "button",
            [
                ("class", self.element("toggle")),
                ("type", "button"),
                ("aria-label", "Show password"),
                ("data-rhx-input-toggle", True),
            ],
            show + hide,
        )


class Textarea(FormControl):
    block = "textarea"

    placeholder: str | None = None
    rows: int = 3
    resize: Resize = Resize.VERTICAL
    minlength: int | None = None
    maxlength: int | None = None

    def render(self, ctx: RenderContext) -> Markup:
        resolved = self.resolve(ctx)
        meta = resolved.meta

        css = (
            self.css()
            .add_if(self.modifier(self.size.value), self.size is not Size.MEDIUM)
            .add_if(self.modifier(f"resize-{self.resize.value}"), self.resize is not Resize.VERTICAL)
            .add_if(self.modifier("disabled"), self.disabled)
            .add_if(self.modifier("readonly"), self.readonly)
        )
        attrs = self.wrapper_attributes(css, resolved)
        attrs.set("data-rhx-textarea", "")

        native = Attributes(
            [
                ("class", self.element("native")),
                ("id", resolved.id),
                ("name", resolved.name or None),
                ("placeholder", self.placeholder or None),
                ("rows", self.rows),
                ("required", resolved.required),
                ("disabled", self.disabled),
                ("readonly", self.readonly),
                ("minlength", self.minlength if self.minlength is not None else fields.min_length(meta)),
                ("maxlength", self.maxlength if self.maxlength is not None else fields.max_length(meta)),
                ("aria-label", self.aria_label or None),
            ]
        )
        native.extend(self.state_aria(resolved))
        native.set("data-rhx-auto-resize", self.resize is Resize.AUTO)
        native.extend(self.htmx_items(ctx))
        native.extend(self.validation_items(resolved))

        body = [
            self.label_html(resolved),
            element(
                "div",
                [("class", self.element("control"))],
                element("textarea", native, resolved.value or ""),
            ),
            self.hint_html(resolved),
            self.error_html(resolved),
        ]
        return element("div", attrs, join(body))


# =============================================================================
# Toggles
# =============================================================================


class _Toggle(FormControl):
    """Checkbox-shaped control submitting ``true``, with a hidden ``false`` fallback."""

    checked: bool = False

    def is_checked(self, resolved: ResolvedField) -> bool:
        if self.checked:
            return True
        if self.value is None and resolved.meta is not None and isinstance(resolved.meta.value, bool):
            return resolved.meta.value
        if self.value is not None:
            return str(self.value).lower() == "true"
        return False

    def native_input(self, ctx: RenderContext, resolved: ResolvedField, *, switch: bool) -> Markup:
        is_checked = self.is_checked(resolved)
        native = Attributes(
            [
                ("type", "checkbox"),
                ("class", f"{self.element('native')} rhx-sr-only"),
                ("role", "switch" if switch else None),
                ("id", resolved.id),
                ("name", resolved.name or None),
                ("value", "true"),
                ("aria-checked", is_checked if switch else None),
                ("checked", is_checked),
                ("disabled", self.disabled),
                ("required", resolved.required),
            ]
        )
        native.extend(self.state_aria(resolved))
        native.set("aria-label", self.aria_label or None)
        native.extend(self.htmx_items(ctx))
        native.extend(self.validation_items(resolved))

        hidden_false = Markup("")
        if resolved.name:
            hidden_false = element(
                "input", [("type", "hidden"), ("name", resolved.name), ("value", "false")]
            )
        return hidden_false + element("input", native)

    def text_html(self, resolved: ResolvedField) -> Markup:
        if not resolved.label:
            return Markup("")
        return element("span", [("class", self.element("text"))], resolved.label)


class Checkbox(_Toggle):
    block = "checkbox"

    indeterminate: bool = False

    def render(self, ctx: RenderContext) -> Markup:
        resolved = self.resolve(ctx)
        attrs = self.wrapper_attributes(self.control_css(resolved), resolved)
        attrs.set("data-rhx-checkbox", "")
        attrs.set("data-rhx-indeterminate", "" if self.indeterminate else None)

        visual = element(
            "span",
            [("class", self.element("control")), ("aria-hidden", "true")],
            _CHECK_MARK + _DASH_MARK,
        )
        label = element(
            "label",
            [("class", self.element("label"))],
            join([self.native_input(ctx, resolved, switch=False), visual, self.text_html(resolved)]),
        )
        return element(
            "div", attrs, join([label, self.hint_html(resolved), self.error_html(resolved)])
        )


class Switch(_Toggle):
    block = "switch"

    def render(self, ctx: RenderContext) -> Markup:
        resolved = self.resolve(ctx)
        attrs = self.wrapper_attributes(self.control_css(resolved), resolved)
        attrs.set("data-rhx-switch", "")

        track = element(
            "span",
            [("class", self.element("track")), ("aria-hidden", "true")],
            element("span", [("class", self.element("thumb"))]),
        )
        label = element(
            "label",
            [("class", self.element("label"))],
            join([self.native_input(ctx, resolved, switch=True), track, self.text_html(resolved)]),
        )
        return element(
            "div", attrs, join([label, self.hint_html(resolved), self.error_html(resolved)])
        )


# =============================================================================
# Select
# =============================================================================


class Option(Component):
    """One option inside a Select; joins the nearest option group."""

    block = "option"

    value: str | None = None
    disabled: bool = False

    def render(self, ctx: RenderContext) -> Markup:
        content = self.render_content(ctx)
        text = text_of(content).strip()
        value = self.value if self.value is not None else text

        group = ctx.group(OPTION_GROUP)
        prefix = group.extras.get("prefix", "select") if group else "select"
        selected = group.is_selected(value) if group else False
        if group is not None:
            group.append(value)

        base = f"rhx-{prefix}__option"
        css = (
            ClassBuilder(base)
            .add_if(f"{base}--selected", selected)
            .add_if(f"{base}--disabled", self.disabled)
            .add(self.class_name)
        )
        attrs = Attributes(
            [
                ("class", css.build()),
                ("id", self.id or None),
                ("role", "option"),
                ("data-value", value),
                ("aria-selected", selected),
                ("tabindex", "-1"),
                ("aria-disabled", "true" if self.disabled else None),
            ]
        )
        return element("div", attrs, Markup(content.strip()))


class Select(FormControl):
    """Custom listbox select.

    Options come from ``items`` if given, else from ``enum_type`` or the bound
    field's enum domain, else from child :class:`Option` components.
    """

    block = "select"

    placeholder: str | None = None
    multiple: bool = False
    max_options_visible: int = 8
    with_clear: bool = False
    filled: bool = False
    items: tuple[SelectItem, ...] | None = None
    enum_type: Any = None

    def selected_values(self, value: str | None) -> list[str]:
        if not value:
            return []
        if self.multiple:
            return [v.strip() for v in value.split(",") if v.strip()]
        return [value]

    def option_specs(self, resolved: ResolvedField, selected: list[str]) -> list[OptionSpec] | None:
        if self.items is not None:
            chosen = {s.casefold() for s in selected}
            return [
                OptionSpec(
                    value=item.value,
                    label=item.text,
                    selected=item.selected or item.value.casefold() in chosen,
                    disabled=item.disabled,
                )
                for item in self.items
            ]
        if self.enum_type is not None:
            return fields.enum_options(fields.enum_members(self.enum_type), selected)
        if resolved.meta is not None and resolved.meta.is_enum:
            return fields.enum_options(resolved.meta.enum_members, selected)
        return None

    def display_text(self, value: str, specs: list[OptionSpec] | None) -> str:
        for spec in specs or ():
            if spec.value.casefold() == value.casefold():
                return spec.label
        return value

    def render(self, ctx: RenderContext) -> Markup:
        resolved = self.resolve(ctx)
        value = resolved.raw_value
        selected = self.selected_values(value)
        listbox_id = f"{resolved.id}-listbox"
        label_id = f"{resolved.id}-label"

        # Child options render first so they can see the selection.
        group = GroupRegistry(OPTION_GROUP, selected=selected, extras={"prefix": "select"})
        child_content = self.render_content(ctx.child(group=group))

        css = (
            self.css()
            .add_if(self.modifier(self.size.value), self.size is not Size.MEDIUM)
            .add_if(self.modifier("filled"), self.filled)
            .add_if(self.modifier("multiple"), self.multiple)
            .add_if(self.modifier("disabled"), self.disabled)
            .add_if(self.modifier("readonly"), self.readonly)
        )
        attrs = self.wrapper_attributes(css, resolved)
        attrs.set("data-rhx-select", "")
        attrs.set("data-rhx-select-multiple", "" if self.multiple else None)

        specs = self.option_specs(resolved, selected)
        has_label = bool(resolved.label)

        trigger = Attributes(
            [
                ("class", self.element("trigger")),
                ("type", "button"),
                ("id", resolved.id),
                ("role", "combobox"),
                ("aria-expanded", "false"),
                ("aria-haspopup", "listbox"),
                ("aria-controls", listbox_id),
                ("aria-labelledby", label_id if has_label else None),
                ("aria-label", self.aria_label or None),
            ]
        )
        trigger.extend(self.state_aria(resolved))
        trigger.set("disabled", self.disabled)

        if not value and self.placeholder:
            shown: Any = element("span", [("class", self.element("placeholder"))], self.placeholder)
        elif value:
            shown = self.display_text(value, specs)
        else:
            shown = ""
        trigger_body = join(
            [
                element("span", [("class", self.element("value"))], shown),
                element(
                    "span", [("class", self.element("arrow")), ("aria-hidden", "true")], _ARROW_ICON
                ),
            ]
        )

        parts = [
            self.label_html(resolved, label_id=label_id, for_control=False),
            element("button", trigger, trigger_body),
        ]
        if self.with_clear:
            parts.append(
                element(
                    "button",
                    [
                        ("class", self.element("clear")),
                        ("type", "button"),
                        ("aria-label", "Clear"),
                        ("hidden", not value),
                    ],
                    CLOSE_X,
                )
            )

        listbox = Attributes(
            [
                ("class", self.element("listbox")),
                ("role", "listbox"),
                ("id", listbox_id),
                ("aria-labelledby", label_id if has_label else None),
                ("aria-multiselectable", "true" if self.multiple else None),
                ("data-rhx-max-visible", self.max_options_visible),
                ("hidden", True),
            ]
        )
        options = self._options_html(specs) if specs is not None else child_content
        parts.append(element("div", listbox, options))

        if not self.multiple:
            hidden = Attributes(
                [
                    ("type", "hidden"),
                    ("class", self.element("hidden")),
                    ("data-rhx-select-value", True),
                    ("name", resolved.name or None),
                    ("value", value or ""),
                ]
            )
            hidden.extend(self.htmx_items(ctx))
            hidden.extend(self.validation_items(resolved))
            parts.append(element("input", hidden))
        else:
            values = [
                element("input", [("type", "hidden"), ("name", resolved.name), ("value", v)])
                for v in selected
            ]
            parts.append(
                element(
                    "div",
                    [
                        ("class", self.element("values")),
                        ("data-rhx-select-values", True),
                        ("data-name", resolved.name),
                    ],
                    join(values),
                )
            )

        parts.append(self.hint_html(resolved))
        parts.append(self.error_html(resolved))
        return element("div", attrs, join(parts))

    def _options_html(self, specs: list[OptionSpec]) -> Markup:
        option = self.element("option")
        rendered = []
        for spec in specs:
            css = (
                ClassBuilder(option)
                .add_if(f"{option}--selected", spec.selected)
                .add_if(f"{option}--disabled", spec.disabled)
            )
            attrs = Attributes(
                [
                    ("class", css.build()),
                    ("role", "option"),
                    ("data-value", spec.value),
                    ("aria-selected", spec.selected),
                    ("aria-disabled", "true" if spec.disabled else None),
                    ("tabindex", "-1"),
                ]
            )
            rendered.append(element("div", attrs, spec.label))
        return join(rendered)


# =============================================================================
# Radio group
# =============================================================================


def radio_html(
    name: str, value: str, text: str | Markup, *, checked: bool, disabled: bool, class_name: str | None = None
) -> Markup:
    css = ClassBuilder("rhx-radio").add_if("rhx-radio--disabled", disabled).add(class_name)
    native = Attributes(
        [
            ("type", "radio"),
            ("class", "rhx-radio__native rhx-sr-only"),
            ("name", name),
            ("value", value),
            ("checked", checked),
            ("disabled", disabled),
        ]
    )
    parts = [
        element("input", native),
        element("span", [("class", "rhx-radio__control"), ("aria-hidden", "true")], ""),
    ]
    if text:
        parts.append(element("span", [("class", "rhx-radio__text")], text))
    return element("label", [("class", css.build())], join(parts))


class Radio(Component):
    """One radio button; takes its name and selection from the enclosing RadioGroup."""

    block = "radio"

    value: str | None = None
    label: str | None = None
    disabled: bool = False

    def render(self, ctx: RenderContext) -> Markup:
        content = self.render_content(ctx)
        text: str | Markup = self.label if self.label is not None else Markup(content.strip())
        if self.value is not None:
            value = self.value
        elif self.label is not None:
            value = self.label
        else:
            value = text_of(content).strip()

        group = ctx.group(RADIO_GROUP)
        if group is not None:
            group.append(value)
        name = group.scope if group else ""
        checked = group.is_selected(value) if group else False
        disabled = self.disabled or (group.disabled if group else False)
        return radio_html(
            name, value, text, checked=checked, disabled=disabled, class_name=self.class_name
        )


class RadioGroup(FormControl):
    """``<fieldset>`` of radios built from items, an enum, or child Radio components."""

    block = "radio-group"

    items: tuple[SelectItem, ...] | None = None
    enum_type: Any = None
    inline: bool = False

    def render(self, ctx: RenderContext) -> Markup:
        resolved = self.resolve(ctx)
        value = resolved.raw_value

        group = GroupRegistry(
            RADIO_GROUP,
            scope=resolved.name,
            selected=[value] if value else [],
            disabled=self.disabled,
        )
        child_content = self.render_content(ctx.child(group=group))

        css = (
            self.css()
            .add_if(self.modifier(self.size.value), self.size is not Size.MEDIUM)
            .add_if(self.modifier("inline"), self.inline)
            .add_if(self.modifier("disabled"), self.disabled)
        )
        attrs = self.wrapper_attributes(css, resolved)
        attrs.set("role", "radiogroup")
        attrs.set("data-rhx-radio-group", "")
        attrs.set("aria-label", self.aria_label or None)
        attrs.extend(self.state_aria(resolved))
        attrs.extend(self.htmx_items(ctx))

        radios = self._generated(resolved, value)
        body = [
            element("legend", [("class", self.element("legend"))], resolved.label)
            if resolved.label
            else None,
            element(
                "div",
                [("class", self.element("items"))],
                radios if radios is not None else child_content,
            ),
            self.hint_html(resolved),
            self.error_html(resolved),
        ]
        return element("fieldset", attrs, join(body))

    def _generated(self, resolved: ResolvedField, value: str | None) -> Markup | None:
        if self.items is not None:
            specs = [
                OptionSpec(value=i.value, label=i.text, disabled=i.disabled) for i in self.items
            ]
        elif self.enum_type is not None:
            specs = fields.enum_options(fields.enum_members(self.enum_type), None)
        elif resolved.meta is not None and resolved.meta.is_enum:
            specs = fields.enum_options(resolved.meta.enum_members, None)
        else:
            return None
        chosen = value.casefold() if value else None
        return join(
            radio_html(
                resolved.name,
                spec.value,
                spec.label,
                checked=spec.value.casefold() == chosen,
                disabled=spec.disabled or self.disabled,
            )
            for spec in specs
        )


# =============================================================================
# Validation
# =============================================================================


class ValidationMessage(Component):
    """Standalone error message for a field name."""

    block = "validation-message"

    field: str = ""

    def render(self, ctx: RenderContext) -> Markup:
        errors = ctx.errors_for(self.field)
        message = errors[0] if errors else None
        css = self.css().add_if(self.modifier("error"), bool(message))
        attrs = self.base_attributes(css, with_id=False)
        attrs.set("id", f"{sanitize_id(self.field)}-error")
        attrs.set("aria-live", "polite")
        attrs.set("role", "alert" if message else None)
        attrs.set("hidden", not message)
        return element("span", attrs, message or "")


class ValidationSummary(Component):
    """Callout listing every validation message; renders nothing when valid."""

    block = "validation-summary"

    variant: Variant = Variant.DANGER

    def render(self, ctx: RenderContext) -> Markup:
        messages = [m for m in (ctx.validation.all_messages() if ctx.validation else []) if m]
        if not messages:
            return Markup("")
        css = ClassBuilder("rhx-callout").add_variant("rhx-callout", self.variant)
        attrs = self.base_attributes(css)
        attrs.set("role", "alert")
        items = join(element("li", None, m) for m in messages)
        body = [
            element(
                "span",
                [("class", "rhx-callout__icon"), ("aria-hidden", "true")],
                callout_icon(self.variant),
            ),
            element(
                "div",
                [("class", "rhx-callout__content")],
                element("ul", [("class", f"{self.block_class}__list")], items),
            ),
        ]
        return element("div", attrs, join(body))


def enum_items(enum_type: type[Enum], labels: dict[str, str] | None = None) -> tuple[SelectItem, ...]:
    """SelectItems for every member of ``enum_type``."""
    return tuple(
        SelectItem(value=m.value, text=m.display) for m in fields.enum_members(enum_type, labels)
    )
