"""Pydantic models for submitted forms and their validation errors."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from enum import Enum
from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from errortag.common import FieldName, NonEmptyString

# (message_template, substitutions) as produced by upstream validators
RawError: TypeAlias = tuple[str, Mapping[str, object] | Sequence[tuple[str, object]]]


def normalize_field(field: object) -> str:
    """Return the string name used to look up a field's errors."""
    if isinstance(field, Enum):
        return str(field.value)
    if isinstance(field, str):
        return field
    raise ValueError(f"Field name must be a string or Enum member, got {type(field).__name__}")


class ErrorRecord(BaseModel):
    """A single validation failure: a message template plus substitution values.

    Templates reference substitutions with ``%{key}`` tokens, e.g.
    ``"should be at least %{count} character(s)"`` with ``{"count": 8}``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    message_template: str
    substitutions: dict[str, Any] = Field(default_factory=dict)

    @field_validator("substitutions", mode="before")
    @classmethod
    def _coerce_pairs(cls, value: object) -> object:
        if isinstance(value, Mapping) or value is None:
            return dict(value or {})
        if isinstance(value, Iterable) and not isinstance(value, str | bytes):
            return {str(key): item for key, item in value}
        return value

    @classmethod
    def from_tuple(cls, error: RawError) -> ErrorRecord:
        message, substitutions = error
        return cls(message_template=message, substitutions=substitutions)


class FormState(BaseModel):
    """Read-only view of a submitted form and its ordered validation errors.

    ``errors`` keeps the order produced by the validation layer. A field may
    appear any number of times.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: NonEmptyString
    id: str | None = None
    errors: tuple[tuple[FieldName, ErrorRecord], ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _default_id(cls, data: Any) -> Any:
        if isinstance(data, dict) and "id" not in data and "name" in data:
            return {**data, "id": data["name"]}
        return data

    @field_validator("errors", mode="before")
    @classmethod
    def _coerce_errors(cls, value: object) -> object:
        if not isinstance(value, Iterable) or isinstance(value, str | bytes | Mapping):
            return value

        coerced: list[object] = []
        for entry in value:
            if isinstance(entry, Mapping):
                coerced.append(
                    (
                        normalize_field(entry.get("field")),
                        {
                            "message_template": entry.get("message", entry.get("message_template")),
                            "substitutions": entry.get("substitutions") or {},
                        },
                    )
                )
                continue

            field, error = entry
            if isinstance(error, tuple) and len(error) == 2 and isinstance(error[0], str):
                error = ErrorRecord.from_tuple(error)
            coerced.append((normalize_field(field), error))
        return tuple(coerced)

    @classmethod
    def from_errors(
        cls,
        name: str,
        errors: Iterable[tuple[object, ErrorRecord | RawError]] = (),
        *,
        id: str | None = None,
    ) -> FormState:
        data: dict[str, Any] = {"name": name, "errors": list(errors)}
        if id is not None:
            data["id"] = id
        return cls.model_validate(data)

    def errors_for(self, field: object) -> list[ErrorRecord]:
        """Return the errors recorded for ``field`` in storage order."""
        name = normalize_field(field)
        return [error for error_field, error in self.errors if error_field == name]

    def has_errors(self, field: object) -> bool:
        name = normalize_field(field)
        return any(error_field == name for error_field, _ in self.errors)


Translator: TypeAlias = Callable[[ErrorRecord], str]
