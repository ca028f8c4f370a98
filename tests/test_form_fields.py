from __future__ import annotations

from typing import Any, Callable

import pytest
import streamlit as st

import components.form_fields as form_fields
from core.schema import Application
from wizard.controller import WizardController
from wizard.navigation.keys import WizardSessionKeys


class _WidgetRecorder:
    """Capture widget calls and return the value primed in session state."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, dict[str, Any]]] = []
        self.errors: list[str] = []

    def factory(self, kind: str) -> Callable[..., Any]:
        def _widget(label: str, *args: Any, **kwargs: Any) -> Any:
            self.calls.append((kind, label, {"args": args, **kwargs}))
            return st.session_state.get(kwargs["key"])

        return _widget

    def kinds(self) -> list[tuple[str, str]]:
        return [(kind, label) for kind, label, _ in self.calls]

    def callback(self, label: str) -> Callable[[], None]:
        for _kind, widget_label, kwargs in self.calls:
            if widget_label == label:
                return kwargs["on_change"]
        raise AssertionError(f"widget {label!r} not rendered")


@pytest.fixture()
def recorder(monkeypatch: pytest.MonkeyPatch) -> _WidgetRecorder:
    recorder = _WidgetRecorder()
    for kind in ("text_input", "text_area", "checkbox", "radio"):
        monkeypatch.setattr(st, kind, recorder.factory(kind))
    monkeypatch.setattr(st, "caption", lambda text, *args, **kwargs: recorder.errors.append(text))
    return recorder


@pytest.fixture()
def keys() -> WizardSessionKeys:
    return WizardSessionKeys(wizard_id="test")


def test_text_fields_are_primed_from_the_value_store(
    application: Application, recorder: _WidgetRecorder, keys: WizardSessionKeys
) -> None:
    controller = WizardController(application)
    controller.edit("phone", 5551234567)

    form_fields.render_step_fields(application.steps[0], controller, keys)

    assert recorder.kinds() == [("text_input", "Full Name"), ("text_input", "Phone")]
    assert st.session_state[keys.widget("phone")] == "5551234567"
    assert st.session_state[keys.widget("fullname")] == ""


def test_on_change_dispatches_to_edit(
    application: Application, recorder: _WidgetRecorder, keys: WizardSessionKeys
) -> None:
    controller = WizardController(application)
    form_fields.render_step_fields(application.steps[0], controller, keys)

    st.session_state[keys.widget("phone")] = "555-1234"
    recorder.callback("Phone")()

    assert controller.value_of("phone") == "555-1234"
    assert controller.error_of("phone") == "Must be a valid phone number"


def test_inline_error_is_rendered(
    application: Application, recorder: _WidgetRecorder, keys: WizardSessionKeys
) -> None:
    controller = WizardController(application)
    controller.next()

    form_fields.render_step_fields(application.steps[0], controller, keys)

    assert recorder.errors == [":red[This field is required]", ":red[This field is required]"]


def test_dependent_field_appears_once_its_condition_holds(
    application: Application, recorder: _WidgetRecorder, keys: WizardSessionKeys
) -> None:
    controller = WizardController(application)
    step = application.steps[1]

    form_fields.render_step_fields(step, controller, keys)
    assert recorder.kinds() == [("checkbox", "Do you give paid vacation?")]

    st.session_state[keys.widget("paid-vacation")] = True
    recorder.callback("Do you give paid vacation?")()
    recorder.calls.clear()
    form_fields.render_step_fields(step, controller, keys)

    assert recorder.kinds() == [
        ("checkbox", "Do you give paid vacation?"),
        ("text_input", "Please provide details about the paid vacation"),
    ]


def test_radio_group_renders_once(
    application: Application, recorder: _WidgetRecorder, keys: WizardSessionKeys
) -> None:
    controller = WizardController(application)

    form_fields.render_step_fields(application.steps[2], controller, keys)

    assert recorder.kinds() == [("radio", "pay")]
    _kind, _label, kwargs = recorder.calls[0]
    assert kwargs["args"] == (["Newfront", "Insurance"],)
    assert kwargs["format_func"]("Insurance") == "I want to pay the insurance company directly"
    assert "index" not in kwargs
    assert st.session_state[keys.widget("pay")] == "Newfront"


def test_radio_group_without_selection_starts_empty(
    schema_payload: dict[str, Any], recorder: _WidgetRecorder, keys: WizardSessionKeys
) -> None:
    from core.schema import load_application

    schema_payload["steps"][2]["fields"][0]["checked"] = False
    application = load_application(schema_payload)
    controller = WizardController(application)

    form_fields.render_step_fields(application.steps[2], controller, keys)

    _kind, _label, kwargs = recorder.calls[0]
    assert kwargs["index"] is None
    st.session_state[keys.widget("pay")] = "Insurance"
    kwargs["on_change"]()
    assert controller.value_of("pay") == "Insurance"
