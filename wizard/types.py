"""Shared type aliases for the wizard package."""

from __future__ import annotations

from core.schema import CheckboxField, RadioField, TextField

# Any concrete member of the field union
AnyField = TextField | CheckboxField | RadioField


__all__ = ["AnyField"]
