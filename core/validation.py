"""Per-field validation for intake applications.

Validation is a pure function of ``(field, value)``: it never touches the
value or error stores, callers apply the returned message themselves.
"""

from __future__ import annotations

from typing import Final

from core.errors import UnreachableVariantError
from core.regexes import EMAIL_RULE_PATTERN, PHONE_RULE_PATTERN
from core.schema import CheckboxField, FieldValue, RadioField, Rule, TextField

REQUIRED_MESSAGE: Final[str] = "This field is required"


def as_text(value: FieldValue | None) -> str:
    """Return the textual form of ``value`` as a form input would show it."""

    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def rule_fails(rule: Rule, text: str) -> bool:
    """Return ``True`` when ``text`` does not satisfy ``rule``."""

    if rule.type == "email":
        return EMAIL_RULE_PATTERN.fullmatch(text) is None
    if rule.type == "phone":
        return PHONE_RULE_PATTERN.fullmatch(text) is None
    raise UnreachableVariantError(f"Unknown rule type: {rule.type!r}", variant=str(rule.type))


def validate_field(field: object, value: FieldValue | None) -> str | None:
    """Return the error message for ``value`` or ``None`` when it is valid.

    Checkbox and radio fields are never validated, even when flagged as
    ``required``. Text fields check ``required`` first and then report the
    error of the first failing rule in declaration order.

    Raises:
        UnreachableVariantError: If ``field`` is not a known field kind.
    """

    if isinstance(field, TextField):
        text = as_text(value)
        if field.required and len(text) == 0:
            return REQUIRED_MESSAGE
        for rule in field.rules:
            if rule_fails(rule, text):
                return rule.error
        return None
    if isinstance(field, (CheckboxField, RadioField)):
        # TODO: decide whether ``required`` should be enforced for checkbox and radio fields.
        return None
    kind = getattr(field, "kind", type(field).__name__)
    raise UnreachableVariantError(f"Unknown field kind: {kind!r}", variant=str(kind))


__all__ = ["REQUIRED_MESSAGE", "as_text", "rule_fails", "validate_field"]
