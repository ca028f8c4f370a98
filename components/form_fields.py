"""Streamlit renderers for schema fields.

Widgets never write to the value store directly: each one is keyed in
``st.session_state`` and its ``on_change`` callback forwards the new value to
:meth:`wizard.controller.WizardController.edit`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import streamlit as st

from core.errors import UnreachableVariantError
from core.schema import CheckboxField, RadioField, Step, TextField
from core.validation import as_text
from utils.errors import display_field_error
from wizard.controller import WizardController
from wizard.dependencies import is_active
from wizard.navigation.keys import WizardSessionKeys

__all__ = [
    "render_checkbox_field",
    "render_radio_group",
    "render_step_fields",
    "render_text_field",
]


def _ensure_widget_state(key: str, value: Any) -> None:
    """Prime ``st.session_state`` with ``value`` when ``key`` is missing."""

    if key not in st.session_state:
        st.session_state[key] = value


def _build_on_change(controller: WizardController, name: str, key: str) -> Callable[[], None]:
    """Return a callback dispatching the widget value to ``controller.edit``."""

    def _callback() -> None:
        controller.edit(name, st.session_state.get(key))

    return _callback


def render_text_field(field: TextField, controller: WizardController, keys: WizardSessionKeys) -> str:
    """Render a text, textarea or number input for ``field``."""

    key = keys.widget(field.id)
    _ensure_widget_state(key, as_text(controller.value_of(field.name)))
    widget = st.text_area if field.input_type == "textarea" else st.text_input
    value = widget(
        field.label,
        key=key,
        placeholder=field.placeholder,
        help=field.description,
        disabled=field.disabled,
        on_change=_build_on_change(controller, field.name, key),
    )
    display_field_error(controller.error_of(field.name))
    return value


def render_checkbox_field(field: CheckboxField, controller: WizardController, keys: WizardSessionKeys) -> bool:
    key = keys.widget(field.id)
    _ensure_widget_state(key, controller.value_of(field.name) is True)
    value = st.checkbox(
        field.label,
        key=key,
        help=field.description,
        disabled=field.disabled,
        on_change=_build_on_change(controller, field.name, key),
    )
    display_field_error(controller.error_of(field.name))
    return value


def render_radio_group(
    members: list[RadioField],
    controller: WizardController,
    keys: WizardSessionKeys,
) -> str | None:
    """Render one radio widget for the visible members of a group."""

    name = members[0].name
    key = keys.widget(name)
    current = controller.value_of(name)
    options = [member.value for member in members]
    labels = {member.value: member.label for member in members}
    extra: dict[str, Any] = {}
    if current in options:
        _ensure_widget_state(key, current)
    elif key not in st.session_state:
        extra["index"] = None
    value = st.radio(
        name,
        options,
        key=key,
        format_func=lambda option: labels.get(option, str(option)),
        captions=[member.description or "" for member in members],
        disabled=all(member.disabled for member in members),
        label_visibility="collapsed",
        on_change=_build_on_change(controller, name, key),
        **extra,
    )
    display_field_error(controller.error_of(name))
    return value


def render_step_fields(step: Step, controller: WizardController, keys: WizardSessionKeys) -> None:
    """Render the active fields of ``step`` in declaration order.

    Activity is re-evaluated per field so that a field depending on one edited
    earlier in the same run shows up immediately.
    """

    values = controller.session.values
    rendered_groups: set[str] = set()
    for field in step.fields:
        if not is_active(field, values):
            continue
        if isinstance(field, TextField):
            render_text_field(field, controller, keys)
        elif isinstance(field, CheckboxField):
            render_checkbox_field(field, controller, keys)
        elif isinstance(field, RadioField):
            if field.name in rendered_groups:
                continue
            rendered_groups.add(field.name)
            members = [
                member
                for member in step.fields
                if isinstance(member, RadioField) and member.name == field.name and is_active(member, values)
            ]
            render_radio_group(members, controller, keys)
        else:
            raise UnreachableVariantError(f"Unknown field kind: {getattr(field, 'kind', field)!r}")
