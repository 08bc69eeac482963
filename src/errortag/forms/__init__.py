"""Form state and error records consumed by the error tag renderer."""

from .ids import IdDeriver, input_id
from .models import ErrorRecord, FormState, RawError, Translator, normalize_field

__all__ = [
    "ErrorRecord",
    "FormState",
    "IdDeriver",
    "RawError",
    "Translator",
    "input_id",
    "normalize_field",
]
