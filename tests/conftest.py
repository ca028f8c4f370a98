from pathlib import Path
import sys
from typing import Any, Iterator

import streamlit as st

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.schema import Application, load_application  # noqa: E402


@pytest.fixture(autouse=True)
def _stub_streamlit_session_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Replace Streamlit's runtime-bound session state with a plain dictionary."""

    session_state: dict[str, object] = {}
    monkeypatch.setattr(st, "session_state", session_state, raising=False)
    yield


def workers_comp_schema() -> dict[str, Any]:
    """Return a trimmed copy of the worker's compensation schema."""

    return {
        "id": "app",
        "category": "workers-compensation",
        "title": "Worker's compensation application",
        "steps": [
            {
                "id": "primary-contact",
                "title": "Who is the primary contact for this policy?",
                "fields": [
                    {
                        "id": "fullname",
                        "kind": "text",
                        "name": "fullname",
                        "type": "text",
                        "label": "Full Name",
                        "required": True,
                    },
                    {
                        "id": "phone",
                        "kind": "text",
                        "name": "phone",
                        "type": "number",
                        "label": "Phone",
                        "required": True,
                        "rules": [{"type": "phone", "error": "Must be a valid phone number"}],
                    },
                ],
            },
            {
                "id": "about-employees",
                "title": "Tell us about your employees",
                "fields": [
                    {
                        "id": "paid-vacation",
                        "kind": "checkbox",
                        "name": "paid-vacation",
                        "label": "Do you give paid vacation?",
                        "required": True,
                    },
                    {
                        "id": "paid-vacation-details",
                        "kind": "text",
                        "name": "paid-vacation-details",
                        "type": "text",
                        "label": "Please provide details about the paid vacation",
                        "required": True,
                        "dependsOn": {"fieldName": "paid-vacation", "fieldValue": True},
                    },
                ],
            },
            {
                "id": "pay",
                "title": "How do you want to pay for your policy",
                "fields": [
                    {
                        "id": "pay-newfront",
                        "kind": "radio",
                        "name": "pay",
                        "label": "I want to pay Newfront",
                        "value": "Newfront",
                        "checked": True,
                    },
                    {
                        "id": "pay-insurance",
                        "kind": "radio",
                        "name": "pay",
                        "label": "I want to pay the insurance company directly",
                        "value": "Insurance",
                    },
                ],
            },
        ],
    }


@pytest.fixture()
def schema_payload() -> dict[str, Any]:
    return workers_comp_schema()


@pytest.fixture()
def application(schema_payload: dict[str, Any]) -> Application:
    return load_application(schema_payload, source="tests")
