from __future__ import annotations

import logging
from typing import Any

from core.schema import Application
from utils.logging_context import configure_logging, log_context, set_application, set_session_id
from wizard.controller import WizardController


def test_controller_logging_includes_context(application: Application, caplog: Any) -> None:
    configure_logging()
    caplog.set_level(logging.INFO, logger="wizard.controller")
    controller = WizardController(application)
    controller.edit("fullname", "Jane Doe")
    controller.edit("phone", "5551234567")

    controller.next()

    records = [record for record in caplog.records if "Advanced to step" in record.message]
    assert records, "Expected a step transition log entry"
    record = records[0]
    assert record.session_id == controller.session.session_id
    assert record.application == "app"
    assert record.wizard_step == "primary-contact"


def test_log_context_restores_previous_values(caplog: Any) -> None:
    configure_logging()
    set_session_id("session-123")
    set_application("cyber")
    logger = logging.getLogger("test.logging.context")
    caplog.set_level(logging.INFO, logger=logger.name)

    with log_context(wizard_step="contact"):
        logger.info("inside")
    logger.info("outside")

    inside, outside = caplog.records[-2:]
    assert inside.session_id == "session-123"
    assert inside.application == "cyber"
    assert inside.wizard_step == "contact"
    assert outside.wizard_step == "-"
