"""Streamlit wiring for a wizard session (controller lifecycle and step layout)."""

from __future__ import annotations

import logging

import streamlit as st

from components.form_fields import render_step_fields
from components.stepper import render_stepper
from core.schema import Application
from utils.logging_context import set_application, set_session_id
from wizard.controller import WizardController
from wizard.navigation import SubmissionHandler, WizardSessionKeys, render_navigation

logger = logging.getLogger(__name__)

__all__ = ["get_controller", "reset_wizard", "run_wizard"]


def reset_wizard(keys: WizardSessionKeys) -> None:
    """Drop the controller and every widget key of the wizard ``keys`` namespaces."""

    for key in [key for key in st.session_state if isinstance(key, str) and key.startswith(keys.prefix)]:
        del st.session_state[key]


def _bind_log_context(controller: WizardController) -> None:
    set_session_id(controller.session.session_id)
    set_application(controller.application.id)


def get_controller(application: Application, keys: WizardSessionKeys) -> WizardController:
    """Return the session's controller, starting a new one for a new schema."""

    controller = st.session_state.get(keys.controller)
    if isinstance(controller, WizardController) and controller.application.id == application.id:
        _bind_log_context(controller)
        return controller
    if controller is not None:
        logger.info("Application changed to '%s'; starting a new session", application.id)
        reset_wizard(keys)
    controller = WizardController(application)
    st.session_state[keys.controller] = controller
    _bind_log_context(controller)
    return controller


def run_wizard(
    application: Application,
    *,
    wizard_id: str = "default",
    on_submitted: SubmissionHandler | None = None,
) -> WizardController:
    """Render the current step of ``application`` and its navigation."""

    keys = WizardSessionKeys(wizard_id=wizard_id)
    controller = get_controller(application, keys)

    st.title(application.title)
    render_stepper(controller.progress(), [step.title for step in application.steps])

    if controller.is_submitted:
        st.success("Thanks! Your application was submitted.")
        st.json(st.session_state.get(keys.submission) or controller.collect_values())
        if st.button("Start a new application", key=keys.namespace("restart")):
            reset_wizard(keys)
            st.rerun()
        return controller

    step = controller.current_step
    st.subheader(step.title)
    if step.description:
        st.caption(step.description)
    render_step_fields(step, controller, keys)
    render_navigation(controller, keys, on_submitted=on_submitted)
    return controller
