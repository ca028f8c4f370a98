from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import pytest

from infra.logging import log_event


def test_log_event_omits_field_values(caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("INTAKE_DEBUG", raising=False)
    caplog.set_level(logging.INFO, logger="intake.audit")

    path = log_event(
        "info",
        "submitted",
        application_id="app",
        session_id="abc",
        values={"fullname": "Jane Doe", "paid-vacation": True},
    )

    assert path == ""
    payload: dict[str, Any] = json.loads(caplog.records[-1].getMessage())
    assert payload == {
        "application": "app",
        "event": "submitted",
        "fields": {"fullname": "str", "paid-vacation": "bool"},
        "level": "info",
        "session_id": "abc",
    }
    assert "Jane" not in caplog.text


def test_log_event_dumps_values_in_debug_mode(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("INTAKE_DEBUG", "1")
    monkeypatch.setattr("tempfile.gettempdir", lambda: str(tmp_path))

    path = log_event("info", "submitted", values={"fullname": "Jane Doe"})

    assert Path(path).parent == tmp_path
    assert json.loads(Path(path).read_text()) == {"fullname": "Jane Doe"}
