"""Resolution of the form and field an error tag renders for.

The enclosing form and field are passed down explicitly as a ``FieldContext``
instead of being looked up from an implicit render scope.
"""

from __future__ import annotations

from dataclasses import dataclass

from errortag.common import create_logger
from errortag.constants import ERROR_TAG_COMPONENT
from errortag.errors import MissingFieldError, MissingFormError
from errortag.forms import FormState, normalize_field

logger = create_logger("context")


@dataclass(frozen=True, slots=True)
class FieldContext:
    """Form and field propagated from an enclosing form or field scope."""

    form: FormState | None = None
    field: str | None = None

    @classmethod
    def for_form(cls, form: FormState) -> FieldContext:
        return cls(form=form)

    def field_scope(self, field: object) -> FieldContext:
        """Return the context seen by components nested inside ``field``."""
        return FieldContext(form=self.form, field=normalize_field(field))


@dataclass(frozen=True, slots=True)
class ResolvedContext:
    form: FormState
    field: str


def resolve_context(
    form: FormState | None = None,
    field: object | None = None,
    context: FieldContext | None = None,
    *,
    component: str = ERROR_TAG_COMPONENT,
) -> ResolvedContext:
    """Pick the form and field to render, explicit inputs first.

    Raises:
        MissingFieldError: neither ``field`` nor ``context.field`` is set.
        MissingFormError: neither ``form`` nor ``context.form`` is set.
    """
    context = context or FieldContext()

    if field is not None:
        resolved_field = normalize_field(field)
        if context.field is not None and context.field != resolved_field:
            logger.debug("Explicit field overrides context", field=resolved_field, context_field=context.field)
    elif context.field is not None:
        resolved_field = context.field
    else:
        raise MissingFieldError(component)

    resolved_form = form if form is not None else context.form
    if resolved_form is None:
        raise MissingFormError(component, resolved_field)

    return ResolvedContext(form=resolved_form, field=resolved_field)
