"""Navigation helpers for the Streamlit wizard."""

from __future__ import annotations

from wizard.navigation.keys import WizardSessionKeys
from wizard.navigation.ui import SubmissionHandler, render_navigation, render_validation_warnings

__all__ = [
    "SubmissionHandler",
    "WizardSessionKeys",
    "render_navigation",
    "render_validation_warnings",
]
