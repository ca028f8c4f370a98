"""Structured audit logging for intake submissions."""

from __future__ import annotations

import json
import logging
import os
import tempfile
import time
from pathlib import Path
from typing import Any, Mapping

LOGGER = logging.getLogger("intake.audit")

_DEBUG_ENV = "INTAKE_DEBUG"


def _field_summary(values: Mapping[str, Any]) -> dict[str, str]:
    """Describe submitted values by type only; answers stay out of the logs."""

    return {name: type(value).__name__ for name, value in values.items()}


def log_event(
    level: str,
    event: str,
    *,
    application_id: str | None = None,
    session_id: str | None = None,
    step_id: str | None = None,
    values: Mapping[str, Any] | None = None,
) -> str:
    """Emit a structured log line and optionally dump the values to a temp file.

    Args:
        level: Logging level name (e.g., ``"info"``).
        event: Short event name such as ``"submitted"``.
        application_id: Identifier of the application schema.
        session_id: Wizard session identifier.
        step_id: Step the event relates to.
        values: Collected field values; only their names and types are logged.
            The full mapping is written to a temp file when the
            ``INTAKE_DEBUG`` env var is truthy.

    Returns:
        Path to the dumped payload file if written, else an empty string.
    """

    record: dict[str, Any] = {
        "level": level.lower(),
        "event": event,
        "application": application_id,
        "session_id": session_id,
        "step": step_id,
    }
    if values is not None:
        record["fields"] = _field_summary(values)
    safe_record = {key: value for key, value in record.items() if value is not None}
    LOGGER.log(getattr(logging, level.upper(), logging.INFO), json.dumps(safe_record, sort_keys=True))

    if values and os.getenv(_DEBUG_ENV, "").strip().lower() in {"1", "true", "yes", "on"}:
        path = Path(tempfile.gettempdir()) / f"intake_{event}_{int(time.time())}.json"
        path.write_text(json.dumps(dict(values), ensure_ascii=False, indent=2))
        return str(path)
    return ""
