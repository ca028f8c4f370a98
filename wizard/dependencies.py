"""Decide which fields are currently live based on ``dependsOn`` conditions."""

from __future__ import annotations

from numbers import Real
from typing import Iterable

from core.schema import FieldValue
from wizard.store import ValueStore
from wizard.types import AnyField


def _strict_equals(left: FieldValue | None, right: FieldValue) -> bool:
    """Compare by value and type: ``"true"`` never equals ``True``."""

    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if isinstance(left, Real) and isinstance(right, Real):
        return left == right
    return type(left) is type(right) and left == right


def is_active(field: AnyField, values: ValueStore) -> bool:
    """Return ``True`` when ``field`` should be shown, validated and collected."""

    condition = field.depends_on
    if condition is None:
        return True
    return _strict_equals(values.get(condition.field_name), condition.field_value)


def active_fields(fields: Iterable[AnyField], values: ValueStore) -> list[AnyField]:
    """Return the active members of ``fields`` in their original order."""

    return [field for field in fields if is_active(field, values)]


__all__ = ["active_fields", "is_active"]
