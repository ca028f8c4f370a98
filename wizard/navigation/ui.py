from __future__ import annotations

from typing import Callable, Mapping

import streamlit as st

from wizard.controller import SubmissionResult, WizardController
from wizard.navigation.keys import WizardSessionKeys

SubmissionHandler = Callable[[WizardController, SubmissionResult], None]


def _on_back(controller: WizardController, keys: WizardSessionKeys) -> None:
    controller.back()
    st.session_state[keys.last_errors] = {}


def _on_next(controller: WizardController, keys: WizardSessionKeys) -> None:
    result = controller.next()
    st.session_state[keys.last_errors] = dict(result.errors)


def _on_submit(controller: WizardController, keys: WizardSessionKeys, on_submitted: SubmissionHandler | None) -> None:
    result = controller.submit()
    st.session_state[keys.last_errors] = dict(result.errors)
    if result.ok:
        st.session_state[keys.submission] = dict(result.values)
        if on_submitted is not None:
            on_submitted(controller, result)


def render_validation_warnings(controller: WizardController, errors: Mapping[str, str]) -> None:
    """Summarise the fields that blocked the last navigation attempt."""

    if not errors:
        return
    labels = [field.label for field in controller.visible_fields() if field.name in errors]
    unique_labels = list(dict.fromkeys(labels)) or sorted(errors)
    st.warning("Please fix the highlighted fields before continuing: " + ", ".join(unique_labels))


def render_navigation(
    controller: WizardController,
    keys: WizardSessionKeys,
    *,
    on_submitted: SubmissionHandler | None = None,
) -> None:
    """Render Back / Next / Finish buttons bound to ``controller``."""

    if controller.is_submitted:
        return
    back_col, forward_col = st.columns(2)
    with back_col:
        if not controller.is_first_step:
            st.button(
                "Back",
                key=keys.namespace("nav:back"),
                on_click=_on_back,
                args=(controller, keys),
            )
    with forward_col:
        if controller.is_last_step:
            st.button(
                "Finish",
                key=keys.namespace("nav:submit"),
                type="primary",
                on_click=_on_submit,
                args=(controller, keys, on_submitted),
            )
        else:
            st.button(
                "Next",
                key=keys.namespace("nav:next"),
                type="primary",
                on_click=_on_next,
                args=(controller, keys),
            )
    render_validation_warnings(controller, st.session_state.get(keys.last_errors) or {})
