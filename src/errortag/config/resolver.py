"""Environment variable resolution helpers for configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping

import yaml

from errortag.common import JsonDict
from errortag.constants import ENV_PREFIX, ERROR_TAG_COMPONENT
from errortag.utils.dicts import insert_path

from .merger import merge_configs
from .models import ErrortagConfig

_SECTIONS = {"components", "logging"}


def apply_env_overrides(config: ErrortagConfig, environ: Mapping[str, str] | None = None) -> ErrortagConfig:
    """Apply environment variable overrides to config.

    ``ERRORTAG_CONFIG__COMPONENTS__ErrorTag__DEFAULT_CLASS=invalid-feedback``
    sets ``components["ErrorTag"].default_class``. Section and setting names are
    case-insensitive; component names are matched against ``ErrorTag`` and the
    configured ones ignoring case and otherwise kept as written.

    Raises:
        pydantic.ValidationError: an override value is invalid.
    """
    override_data = collect_env_overrides(config, environ)
    if not override_data:
        return config

    return merge_configs(config, ErrortagConfig.model_validate(override_data))


def collect_env_overrides(config: ErrortagConfig, environ: Mapping[str, str] | None = None) -> JsonDict:
    environ = os.environ if environ is None else environ
    prefix = f"{ENV_PREFIX}__"
    known_components = {name.lower(): name for name in (ERROR_TAG_COMPONENT, *config.components)}
    override_data: JsonDict = {}

    for key, value in environ.items():
        if not key.upper().startswith(prefix):
            continue
        segments = [segment for segment in key[len(prefix) :].split("__") if segment]
        if not segments or segments[0].lower() not in _SECTIONS:
            continue

        section = segments[0].lower()
        if section == "components" and len(segments) >= 2:
            component = known_components.get(segments[1].lower(), segments[1])
            path = [section, component, *(segment.lower() for segment in segments[2:])]
        else:
            path = [section, *(segment.lower() for segment in segments[1:])]

        if len(path) < 2:
            continue
        insert_path(override_data, path, _parse_env_value(value))

    return override_data


def _parse_env_value(raw: str) -> object:
    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw
    return parsed
