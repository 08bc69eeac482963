"""Pydantic models for component configuration and config loading errors."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from errortag.common import CssClass, LoggingConfig

from .references import TranslatorReference, describe_callable


class ConfigNotFoundError(BaseModel):
    """Configuration file not found at expected location."""

    model_config = ConfigDict(extra="forbid")

    expected_path: Path
    message: str


class ConfigYamlError(BaseModel):
    """YAML parsing error in configuration file."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    line: int | None = None
    column: int | None = None
    message: str


class ConfigValidationError(BaseModel):
    """Schema validation error in configuration.

    ``path`` is ``None`` when the invalid value came from the environment.
    """

    model_config = ConfigDict(extra="forbid")

    path: Path | None
    field: str | None = None
    message: str


class ConfigIOError(BaseModel):
    """File I/O error reading configuration."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    message: str


ConfigError: TypeAlias = ConfigNotFoundError | ConfigYamlError | ConfigValidationError | ConfigIOError


class ComponentSettings(BaseModel):
    """Defaults for one component, e.g. ``components.ErrorTag`` in YAML."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    default_class: CssClass | None = None
    default_translator: TranslatorReference | Callable[..., str] | None = None

    @field_validator("default_translator", mode="before")
    @classmethod
    def _parse_reference(cls, value: Any) -> Any:
        if isinstance(value, str | tuple | list):
            return TranslatorReference.parse(value)
        return value

    @field_serializer("default_translator")
    def _serialize_translator(self, value: TranslatorReference | Callable[..., str] | None) -> str | None:
        if value is None:
            return None
        if isinstance(value, TranslatorReference):
            return str(value)
        return describe_callable(value)


class ErrortagConfig(BaseModel):
    """Effective configuration (merged result)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    components: dict[str, ComponentSettings] = Field(default_factory=dict)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def settings_for(self, component: str) -> ComponentSettings:
        return self.components.get(component) or ComponentSettings()
