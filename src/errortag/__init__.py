"""errortag - render form field validation errors as markup.

By default, errortag's internal logging is disabled when used as a library.
Library users can enable logging by calling errortag.enable_logging().
"""

from errortag.common import disable_library_logging, enable_library_logging
from errortag.component import ErrorTag, ResolvedConfig, error_tag
from errortag.config import ComponentSettings, ConfigRegistry, ErrortagConfig, get_registry
from errortag.context import FieldContext, ResolvedContext, resolve_context
from errortag.errors import (
    ContextResolutionError,
    ErrortagError,
    MissingFieldError,
    MissingFormError,
    TranslatorResolutionError,
)
from errortag.forms import ErrorRecord, FormState, input_id
from errortag.markup import ErrorNode, render_nodes
from errortag.translators import TranslatorReference, resolve_translator, translate_error

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "ComponentSettings",
    "ConfigRegistry",
    "ContextResolutionError",
    "ErrorNode",
    "ErrorRecord",
    "ErrorTag",
    "ErrortagConfig",
    "ErrortagError",
    "FieldContext",
    "FormState",
    "MissingFieldError",
    "MissingFormError",
    "ResolvedConfig",
    "ResolvedContext",
    "TranslatorReference",
    "TranslatorResolutionError",
    "enable_logging",
    "error_tag",
    "get_registry",
    "input_id",
    "render_nodes",
    "resolve_context",
    "resolve_translator",
    "translate_error",
]
