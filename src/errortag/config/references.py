"""Lazy references to translator functions named in configuration."""

from __future__ import annotations

import importlib
from collections.abc import Callable, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from errortag.common import NonEmptyString
from errortag.errors import TranslatorResolutionError


class TranslatorReference(BaseModel):
    """A ``module:function`` pair resolved only when a render needs it.

    Accepts ``"pkg.mod:func"``, ``"pkg.mod.func"`` or a ``(module, function)``
    pair. ``function`` may be dotted to reach attributes such as
    ``ErrorHelpers.translate_error``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    module: NonEmptyString
    function: NonEmptyString

    @model_validator(mode="before")
    @classmethod
    def _parse(cls, data: Any) -> Any:
        if isinstance(data, str):
            return _split_reference(data)
        if isinstance(data, Sequence) and len(data) == 2:
            module, function = data
            return {"module": module, "function": function}
        return data

    @classmethod
    def parse(cls, value: str | Sequence[str]) -> TranslatorReference:
        return cls.model_validate(value)

    def __str__(self) -> str:
        return f"{self.module}:{self.function}"

    def load(self) -> Callable[..., str]:
        """Import the module and return the referenced callable.

        Raises:
            TranslatorResolutionError: the module cannot be imported, the
                attribute is missing, or it is not callable.
        """
        try:
            target: object = importlib.import_module(self.module)
        except (ImportError, TypeError) as exc:
            raise TranslatorResolutionError(str(self), f"cannot import module '{self.module}': {exc}") from exc

        for part in self.function.split("."):
            try:
                target = getattr(target, part)
            except AttributeError as exc:
                raise TranslatorResolutionError(str(self), f"'{self.module}' has no attribute '{self.function}'") from exc

        if not callable(target):
            raise TranslatorResolutionError(str(self), f"'{self.function}' is not callable")
        return target


def _split_reference(value: str) -> dict[str, str]:
    text = value.strip()
    if ":" in text:
        module, _, function = text.partition(":")
    else:
        module, _, function = text.rpartition(".")
    if not module or not function:
        raise ValueError(f"Translator reference must look like 'module:function', got '{value}'")
    return {"module": module, "function": function}


def describe_callable(value: Callable[..., object]) -> str:
    module = getattr(value, "__module__", None) or "<unknown>"
    name = getattr(value, "__qualname__", None) or getattr(value, "__name__", None) or repr(value)
    return f"{module}:{name}"
