"""Schema-driven wizard engine: value/error stores, dependencies and navigation."""

from __future__ import annotations

from .controller import (
    NavigationResult,
    StepProgress,
    SubmissionResult,
    WizardController,
    WizardSession,
)
from .dependencies import active_fields, is_active
from .store import ErrorStore, ValueStore

__all__ = [
    "ErrorStore",
    "NavigationResult",
    "StepProgress",
    "SubmissionResult",
    "ValueStore",
    "WizardController",
    "WizardSession",
    "active_fields",
    "is_active",
]
