"""Exception hierarchy for the intake wizard engine.

Only validation messages are meant for end users and they never travel as
exceptions. Everything raised from here signals a broken schema or a caller
that ignored the wizard contract and must not be swallowed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass
class IntakeError(Exception):
    """Base exception for the intake engine."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class SchemaLoadError(IntakeError):
    """Raised when an application schema cannot be loaded.

    No partially loaded :class:`~core.schema.Application` is ever exposed
    when this is raised.
    """

    source: str | None = None
    details: Mapping[str, Any] | None = None
    original: Exception | None = None


@dataclass
class UnreachableVariantError(IntakeError):
    """Raised when the engine meets a field kind or rule type it does not know."""

    variant: str | None = None


@dataclass
class WizardContractError(IntakeError):
    """Raised when a wizard operation is invoked outside its precondition."""

    operation: str | None = None


__all__ = [
    "IntakeError",
    "SchemaLoadError",
    "UnreachableVariantError",
    "WizardContractError",
]
