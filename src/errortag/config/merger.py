"""Configuration merging utilities."""

from __future__ import annotations

from errortag.common import LoggingConfig
from errortag.utils.dicts import deep_merge

from .models import ComponentSettings, ErrortagConfig


def merge_configs(*configs: ErrortagConfig | None) -> ErrortagConfig:
    """Merge configs in order; later configs override earlier ones.

    Only values that were explicitly set win, so a later file that sets just
    ``default_class`` keeps an earlier ``default_translator``.
    """
    components: dict[str, ComponentSettings] = {}
    logging_data: dict[str, object] = {}

    for config in configs:
        if config is None:
            continue
        for name, settings in config.components.items():
            base = components.get(name)
            components[name] = settings if base is None else _merge_settings(base, settings)
        if "logging" in config.model_fields_set:
            logging_data = deep_merge(logging_data, config.logging.model_dump(exclude_unset=True))

    return ErrortagConfig(
        components=components,
        logging=LoggingConfig.model_validate(logging_data),
    )


def _merge_settings(base: ComponentSettings, override: ComponentSettings) -> ComponentSettings:
    updates = {
        name: getattr(override, name)
        for name in override.model_fields_set
        if getattr(override, name) is not None
    }
    if not updates:
        return base
    return base.model_copy(update=updates)
