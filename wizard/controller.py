"""Step-transition state machine for schema-driven intake wizards."""

from __future__ import annotations

import logging
import uuid
from contextlib import AbstractContextManager
from dataclasses import dataclass, field as dataclass_field
from typing import Mapping

from core.errors import WizardContractError
from core.schema import Application, FieldValue, RadioField, Step
from core.validation import validate_field
from utils.logging_context import log_context
from wizard.dependencies import active_fields, is_active
from wizard.store import ErrorStore, ValueStore
from wizard.types import AnyField

logger = logging.getLogger(__name__)


@dataclass
class WizardSession:
    """Mutable state of one wizard run: values, errors and position."""

    values: ValueStore
    errors: ErrorStore = dataclass_field(default_factory=ErrorStore)
    step_index: int = 0
    submitted: bool = False
    session_id: str = dataclass_field(default_factory=lambda: uuid.uuid4().hex[:12])


@dataclass(frozen=True)
class NavigationResult:
    """Outcome of a ``next``/``back`` request."""

    ok: bool
    step_index: int
    errors: Mapping[str, str] = dataclass_field(default_factory=dict)


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of ``submit``; ``values`` is only populated on success."""

    ok: bool
    values: Mapping[str, FieldValue] = dataclass_field(default_factory=dict)
    errors: Mapping[str, str] = dataclass_field(default_factory=dict)


@dataclass(frozen=True)
class StepProgress:
    """Position snapshot for progress indicators."""

    step_index: int
    total_steps: int
    completion_ratio: float
    submitted: bool


class WizardController:
    """Drive a :class:`WizardSession` through the steps of an application.

    Every public operation runs to completion synchronously. Validation results
    for a step are computed before any store is touched, so a failed ``next``
    leaves the position unchanged and only the error store updated.
    """

    def __init__(self, application: Application, *, session: WizardSession | None = None) -> None:
        self._application = application
        self._session = session or WizardSession(values=ValueStore.initialize(application))

    @property
    def application(self) -> Application:
        return self._application

    @property
    def session(self) -> WizardSession:
        return self._session

    @property
    def step_index(self) -> int:
        return self._session.step_index

    @property
    def current_step(self) -> Step:
        return self._application.steps[self._session.step_index]

    @property
    def is_first_step(self) -> bool:
        return self._session.step_index == 0

    @property
    def is_last_step(self) -> bool:
        return self._session.step_index == self._application.step_count - 1

    @property
    def is_submitted(self) -> bool:
        return self._session.submitted

    def value_of(self, name: str) -> FieldValue | None:
        return self._session.values.get(name)

    def error_of(self, name: str) -> str | None:
        return self._session.errors.get(name)

    def visible_fields(self) -> list[AnyField]:
        """Return the active fields of the current step."""

        return active_fields(self.current_step.fields, self._session.values)

    def progress(self) -> StepProgress:
        total = self._application.step_count
        if self._session.submitted:
            ratio = 1.0
        else:
            ratio = self._session.step_index / total
        return StepProgress(
            step_index=self._session.step_index,
            total_steps=total,
            completion_ratio=ratio,
            submitted=self._session.submitted,
        )

    def _log_scope(self) -> AbstractContextManager[None]:
        return log_context(
            session_id=self._session.session_id,
            application=self._application.id,
            wizard_step=self.current_step.id,
        )

    def _ensure_open(self, operation: str) -> None:
        if self._session.submitted:
            raise WizardContractError(
                f"Cannot {operation} after application '{self._application.id}' was submitted",
                operation=operation,
            )

    def _validate_current_step(self) -> dict[str, str | None]:
        results: dict[str, str | None] = {}
        values = self._session.values
        for field in active_fields(self.current_step.fields, values):
            message = validate_field(field, values.get(field.name))
            if results.get(field.name) is None:
                results[field.name] = message
        return results

    def _apply_step_results(self, results: Mapping[str, str | None]) -> dict[str, str]:
        errors = self._session.errors
        for name, message in results.items():
            errors.set(name, message)
        for field in self.current_step.fields:
            if field.name not in results:
                errors.clear(field.name)
        return {name: message for name, message in results.items() if message}

    def edit(self, name: str, value: FieldValue) -> str | None:
        """Store ``value`` for ``name`` and refresh that field's error.

        Returns:
            The validation message now recorded for ``name`` or ``None``.

        Raises:
            WizardContractError: If the session is submitted, ``name`` is not a
                field of the application, or a radio group receives a value
                that none of its members declares.
        """

        self._ensure_open("edit")
        fields = self._application.fields_named(name)
        if not fields:
            raise WizardContractError(f"Unknown field name: {name!r}", operation="edit")
        if isinstance(fields[0], RadioField):
            options = [member.value for member in fields if isinstance(member, RadioField)]
            if not isinstance(value, str) or value not in options:
                raise WizardContractError(
                    f"Value {value!r} is not an option of radio group {name!r}",
                    operation="edit",
                )
        owner = next((field for field in self.current_step.fields if field.name == name), fields[0])
        self._session.values.set(name, value)
        message = validate_field(owner, value)
        self._session.errors.set(name, message)
        with self._log_scope():
            logger.debug("Edited field '%s' (valid=%s)", name, message is None)
        return message

    def next(self) -> NavigationResult:
        """Advance one step when every active field of the current step passes."""

        self._ensure_open("go to the next step")
        if self.is_last_step:
            raise WizardContractError("Already on the last step; use submit()", operation="next")
        failures = self._apply_step_results(self._validate_current_step())
        with self._log_scope():
            if failures:
                logger.info("Step blocked by invalid fields: %s", ", ".join(sorted(failures)))
                return NavigationResult(ok=False, step_index=self._session.step_index, errors=failures)
            self._session.step_index += 1
            logger.info("Advanced to step %d/%d", self._session.step_index + 1, self._application.step_count)
        return NavigationResult(ok=True, step_index=self._session.step_index)

    def back(self) -> NavigationResult:
        """Return to the previous step without validating anything."""

        self._ensure_open("go back")
        if self.is_first_step:
            raise WizardContractError("Already on the first step", operation="back")
        self._session.step_index -= 1
        with self._log_scope():
            logger.info("Moved back to step %d/%d", self._session.step_index + 1, self._application.step_count)
        return NavigationResult(ok=True, step_index=self._session.step_index)

    def collect_values(self) -> dict[str, FieldValue]:
        """Return name -> value for every active field across all steps.

        Radio groups without a selection have no value and are left out.
        """

        values = self._session.values
        collected: dict[str, FieldValue] = {}
        for field in self._application.iter_fields():
            if field.name in collected or field.name not in values:
                continue
            if is_active(field, values):
                value = values.get(field.name)
                if value is not None:
                    collected[field.name] = value
        return collected

    def submit(self) -> SubmissionResult:
        """Validate the last step and, when it passes, close the session."""

        self._ensure_open("submit")
        if not self.is_last_step:
            raise WizardContractError("Submit is only available on the last step", operation="submit")
        failures = self._apply_step_results(self._validate_current_step())
        with self._log_scope():
            if failures:
                logger.info("Submission blocked by invalid fields: %s", ", ".join(sorted(failures)))
                return SubmissionResult(ok=False, errors=failures)
            collected = self.collect_values()
            self._session.submitted = True
            logger.info("Application submitted with %d fields", len(collected))
        return SubmissionResult(ok=True, values=collected)


__all__ = [
    "NavigationResult",
    "StepProgress",
    "SubmissionResult",
    "WizardController",
    "WizardSession",
]
