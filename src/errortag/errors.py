"""Exceptions raised while rendering error tags.

These signal caller or configuration mistakes and are never caught inside the
render path. Recoverable file/config loading problems are reported as
``Result`` values instead (see ``errortag.config.models``).
"""

from __future__ import annotations


class ErrortagError(Exception):
    """Base class for errortag exceptions."""


class ContextResolutionError(ErrortagError):
    """The form or field to render could not be determined."""


class MissingFieldError(ContextResolutionError):
    """No field given explicitly and none available from the field context."""

    def __init__(self, component: str) -> None:
        self.component = component
        super().__init__(
            f"{component} requires a field: pass `field` explicitly or render it inside a field context."
        )


class MissingFormError(ContextResolutionError):
    """No form given explicitly and none available from the field context."""

    def __init__(self, component: str, field: str) -> None:
        self.component = component
        self.field = field
        super().__init__(
            f"{component} for field '{field}' requires a form: pass `form` explicitly or render it inside a form context."
        )


class TranslatorResolutionError(ErrortagError):
    """A configured translator reference does not point at a callable."""

    def __init__(self, reference: str, reason: str) -> None:
        self.reference = reference
        self.reason = reason
        super().__init__(f"Cannot resolve translator '{reference}': {reason}")
