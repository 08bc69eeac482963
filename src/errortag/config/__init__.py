"""Public configuration API for errortag.

Component defaults are keyed by component name::

    components:
      ErrorTag:
        default_class: invalid-feedback
        default_translator: myapp.errors:translate_error
"""

from __future__ import annotations

from .loader import load_config, load_config_file
from .merger import merge_configs
from .models import (
    ComponentSettings,
    ConfigError,
    ConfigIOError,
    ConfigNotFoundError,
    ConfigValidationError,
    ConfigYamlError,
    ErrortagConfig,
)
from .references import TranslatorReference
from .registry import ConfigRegistry, get_registry
from .resolver import apply_env_overrides

__all__ = [
    "ComponentSettings",
    "ConfigError",
    "ConfigIOError",
    "ConfigNotFoundError",
    "ConfigRegistry",
    "ConfigValidationError",
    "ConfigYamlError",
    "ErrortagConfig",
    "TranslatorReference",
    "apply_env_overrides",
    "get_registry",
    "load_config",
    "load_config_file",
    "merge_configs",
]
