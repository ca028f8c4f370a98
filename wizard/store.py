"""Value and error stores backing a wizard session."""

from __future__ import annotations

from typing import Iterator

from core.errors import UnreachableVariantError
from core.schema import Application, CheckboxField, FieldValue, RadioField, TextField


class ValueStore:
    """Mutable mapping from field name to its current value.

    Radio members share a name, so a radio group occupies a single slot whose
    value is the ``value`` of the selected member. A group without a
    ``checked`` member stays unset until the user picks one.
    """

    def __init__(self, values: dict[str, FieldValue] | None = None) -> None:
        self._values: dict[str, FieldValue] = dict(values or {})

    @classmethod
    def initialize(cls, application: Application) -> "ValueStore":
        """Seed a store from the defaults declared in ``application``."""

        values: dict[str, FieldValue] = {}
        for field in application.iter_fields():
            if isinstance(field, TextField):
                values[field.name] = field.value if field.value is not None else ""
            elif isinstance(field, CheckboxField):
                values[field.name] = field.value if field.value is not None else False
            elif isinstance(field, RadioField):
                if field.checked and field.name not in values:
                    values[field.name] = field.value
            else:
                raise UnreachableVariantError(
                    f"Unknown field kind: {getattr(field, 'kind', field)!r}",
                    variant=str(getattr(field, "kind", "")),
                )
        return cls(values)

    def get(self, name: str) -> FieldValue | None:
        return self._values.get(name)

    def set(self, name: str, value: FieldValue) -> None:
        self._values[name] = value

    def snapshot(self) -> dict[str, FieldValue]:
        """Return a shallow copy of the current values."""

        return dict(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ValueStore({self._values!r})"


class ErrorStore:
    """Last validation message per field name; absence means no error."""

    def __init__(self) -> None:
        self._errors: dict[str, str] = {}

    def get(self, name: str) -> str | None:
        return self._errors.get(name)

    def set(self, name: str, message: str | None) -> None:
        """Record ``message`` for ``name``; ``None`` or ``""`` clears it."""

        if message:
            self._errors[name] = message
        else:
            self._errors.pop(name, None)

    def clear(self, name: str) -> None:
        self._errors.pop(name, None)

    def has_errors(self) -> bool:
        return bool(self._errors)

    def snapshot(self) -> dict[str, str]:
        return dict(self._errors)

    def __contains__(self, name: object) -> bool:
        return name in self._errors

    def __repr__(self) -> str:
        return f"ErrorStore({self._errors!r})"


__all__ = ["ErrorStore", "ValueStore"]
