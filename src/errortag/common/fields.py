"""Reusable Pydantic field annotations."""

from __future__ import annotations

from typing import Annotated, TypeAlias

from pydantic import Field, StrictStr

JsonValue: TypeAlias = dict[str, object] | list[object] | str | int | float | bool | None
JsonDict: TypeAlias = dict[str, object]

NonEmptyString = Annotated[StrictStr, Field(min_length=1, frozen=True)]

# Name of an input inside a form (e.g. "password")
FieldName = Annotated[StrictStr, Field(min_length=1)]

# Space separated CSS class list applied to each error element
CssClass = Annotated[StrictStr, Field(pattern=r"^[^\s\"'<>]*( [^\s\"'<>]+)*$")]

__all__ = [
    "CssClass",
    "FieldName",
    "JsonDict",
    "JsonValue",
    "NonEmptyString",
]
