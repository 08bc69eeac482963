"""Input id derivation matching the ids assigned to rendered form inputs."""

from __future__ import annotations

from typing import Protocol

from .models import FormState, normalize_field


class IdDeriver(Protocol):
    """Derives the DOM id of the input rendered for ``field`` in ``form``."""

    def __call__(self, form: FormState | str, field: object, /) -> str: ...


def input_id(form: FormState | str, field: object) -> str:
    """Return the id of the input element for ``field``.

    ``"{form.id}_{field}"`` for a form with an id, ``"{field}"`` when the id
    was explicitly cleared, ``"{name}_{field}"`` when only a form name is given.
    """
    name = normalize_field(field)
    if isinstance(form, str):
        return f"{form}_{name}"
    if form.id is None:
        return name
    return f"{form.id}_{name}"
