# app.py — insurance intake wizard entrypoint
from __future__ import annotations

import json
from pathlib import Path
import sys

import streamlit as st

APP_ROOT = Path(__file__).resolve().parent
if str(APP_ROOT) not in sys.path:
    sys.path.insert(0, str(APP_ROOT))

from core.config import load_settings  # noqa: E402
from core.errors import SchemaLoadError  # noqa: E402
from core.schema import ApplicationCategory  # noqa: E402
from core.schema_registry import available_categories, load_application_for_category  # noqa: E402
from infra.logging import log_event  # noqa: E402
from utils.errors import display_error  # noqa: E402
from utils.logging_context import configure_logging  # noqa: E402
from wizard.controller import SubmissionResult, WizardController  # noqa: E402
from wizard.wizard import run_wizard  # noqa: E402

SETTINGS = load_settings()
configure_logging(level=SETTINGS.log_level)

st.set_page_config(page_title="Insurance application", page_icon="📝", layout="centered")


def handle_submission(controller: WizardController, result: SubmissionResult) -> None:
    """Hand collected values to the submission collaborator."""

    log_event(
        "info",
        "submitted",
        application_id=controller.application.id,
        session_id=controller.session.session_id,
        step_id=controller.current_step.id,
        values=result.values,
    )


categories = available_categories(schema_dir=SETTINGS.schema_dir)
if not categories:
    display_error(f"No application schemas found in {SETTINGS.schema_dir or 'the bundled schemas'}.")
    st.stop()

default_index = categories.index(SETTINGS.default_category) if SETTINGS.default_category in categories else 0
category = st.sidebar.selectbox(
    "Application",
    categories,
    index=default_index,
    format_func=lambda item: ApplicationCategory(item).value.replace("-", " ").title(),
)

try:
    application = load_application_for_category(category, schema_dir=SETTINGS.schema_dir)
except SchemaLoadError as exc:
    details = json.dumps(exc.details, indent=2, default=str) if exc.details else None
    display_error(str(exc), details, show_detail=SETTINGS.debug)
    raise

run_wizard(application, on_submitted=handle_submission)
