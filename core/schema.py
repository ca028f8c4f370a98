"""Pydantic models describing an insurance application form.

An :class:`Application` is an ordered sequence of :class:`Step` objects, each
holding an ordered sequence of fields. Fields are a closed, tagged union on
``kind`` (``text`` | ``checkbox`` | ``radio``). Models are frozen: once
:func:`load_application` returns, the schema is never mutated.

Structural integrity (unique ids, resolvable ``dependsOn`` references, names
shared only by radio groups) is enforced when the application is built, so an
``Application`` instance is always safe to drive a wizard session.
"""

from __future__ import annotations

import logging
from collections import Counter
from enum import StrEnum
from typing import Annotated, Any, Iterator, Literal, Mapping, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    ValidationError,
    model_validator,
)

from core.errors import SchemaLoadError

logger = logging.getLogger(__name__)

FieldValue = Union[StrictBool, StrictInt, StrictFloat, StrictStr]
"""Value held by a field: string, number or boolean, never coerced."""


class ApplicationCategory(StrEnum):
    """Insurance lines served by the intake wizard."""

    WORKERS_COMPENSATION = "workers-compensation"
    CYBER_INSURANCE = "cyber-insurance"
    FARM_INSURANCE = "farm-insurance"


class _SchemaModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)


class Rule(_SchemaModel):
    """Declarative constraint on a text field with its failure message."""

    type: Literal["email", "phone"]
    error: str


class DependsOn(_SchemaModel):
    """Activation condition pointing at another field's name and value."""

    field_name: str = Field(alias="fieldName")
    field_value: FieldValue = Field(alias="fieldValue")


class _FieldBase(_SchemaModel):
    id: str
    name: str
    label: str
    description: str | None = None
    required: bool = False
    disabled: bool = False
    depends_on: DependsOn | None = Field(default=None, alias="dependsOn")


class TextField(_FieldBase):
    """Free-text, multi-line or numeric input validated by ``rules``."""

    kind: Literal["text"] = "text"
    input_type: Literal["text", "textarea", "number"] = Field(alias="type")
    placeholder: str | None = None
    value: Union[StrictStr, StrictInt, StrictFloat, None] = None
    rules: tuple[Rule, ...] = ()


class CheckboxField(_FieldBase):
    """Boolean toggle."""

    kind: Literal["checkbox"] = "checkbox"
    value: StrictBool | None = None


class RadioField(_FieldBase):
    """One option of a radio group; members of a group share ``name``."""

    kind: Literal["radio"] = "radio"
    value: StrictStr
    checked: bool = False


FormField = Annotated[Union[TextField, CheckboxField, RadioField], Field(discriminator="kind")]


class Step(_SchemaModel):
    """Ordered group of fields presented and validated together."""

    id: str
    title: str
    description: str | None = None
    fields: tuple[FormField, ...] = ()


class Application(_SchemaModel):
    """Complete, validated application schema."""

    id: str
    category: ApplicationCategory
    title: str
    steps: tuple[Step, ...]

    @model_validator(mode="after")
    def _check_integrity(self) -> "Application":
        if not self.steps:
            raise ValueError("application must declare at least one step")

        id_counts = Counter(field.id for field in self.iter_fields())
        duplicates = sorted(field_id for field_id, count in id_counts.items() if count > 1)
        if duplicates:
            raise ValueError(f"duplicate field ids: {', '.join(duplicates)}")

        kinds_by_name: dict[str, list[str]] = {}
        for field in self.iter_fields():
            kinds_by_name.setdefault(field.name, []).append(field.kind)
        shared = sorted(
            name for name, kinds in kinds_by_name.items() if len(kinds) > 1 and any(kind != "radio" for kind in kinds)
        )
        if shared:
            raise ValueError(f"field names shared outside a radio group: {', '.join(shared)}")

        dangling = [
            f"{field.id} -> {field.depends_on.field_name}"
            for field in self.iter_fields()
            if field.depends_on is not None and field.depends_on.field_name not in kinds_by_name
        ]
        if dangling:
            raise ValueError(f"dependsOn references unknown fields: {', '.join(dangling)}")

        for name, members in self.radio_groups().items():
            if len(members) == 1:
                logger.warning("Radio field '%s' in application '%s' has no group peers", name, self.id)
        return self

    @property
    def step_count(self) -> int:
        return len(self.steps)

    def iter_fields(self) -> Iterator[TextField | CheckboxField | RadioField]:
        """Yield every field in step and declaration order."""

        for step in self.steps:
            yield from step.fields

    def field_names(self) -> tuple[str, ...]:
        """Return the distinct field names in first-seen order."""

        return tuple(dict.fromkeys(field.name for field in self.iter_fields()))

    def fields_named(self, name: str) -> tuple[TextField | CheckboxField | RadioField, ...]:
        return tuple(field for field in self.iter_fields() if field.name == name)

    def radio_groups(self) -> dict[str, tuple[RadioField, ...]]:
        """Return radio members grouped by their shared name."""

        groups: dict[str, list[RadioField]] = {}
        for field in self.iter_fields():
            if isinstance(field, RadioField):
                groups.setdefault(field.name, []).append(field)
        return {name: tuple(members) for name, members in groups.items()}


def load_application(raw: Mapping[str, Any] | str | bytes, *, source: str | None = None) -> Application:
    """Build an :class:`Application` from a mapping or a JSON document.

    Args:
        raw: Parsed schema mapping or its JSON text.
        source: Optional label (e.g. a file path) used in error messages.

    Raises:
        SchemaLoadError: If the document is malformed or violates an
            integrity rule. Nothing is returned in that case.
    """

    label = source or "<schema>"
    try:
        if isinstance(raw, (str, bytes)):
            application = Application.model_validate_json(raw)
        else:
            application = Application.model_validate(raw)
    except ValidationError as exc:
        errors = exc.errors(include_url=False)
        summary = "; ".join(str(error.get("msg", "")) for error in errors[:3])
        raise SchemaLoadError(
            f"Invalid application schema in {label}: {summary}",
            source=source,
            details={"errors": errors},
            original=exc,
        ) from exc

    logger.info(
        "Loaded application '%s' (%s) with %d steps from %s",
        application.id,
        application.category,
        application.step_count,
        label,
    )
    return application


__all__ = [
    "Application",
    "ApplicationCategory",
    "CheckboxField",
    "DependsOn",
    "FieldValue",
    "FormField",
    "RadioField",
    "Rule",
    "Step",
    "TextField",
    "load_application",
]
