"""Process-wide store of component configuration."""

from __future__ import annotations

import threading
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from result import Result

from errortag.common import create_logger

from .loader import load_config
from .models import ComponentSettings, ConfigError, ErrortagConfig

logger = create_logger("config")


class ConfigRegistry:
    """Holds the current configuration as an immutable snapshot.

    Readers take ``snapshot()`` once per render and never lock. Writers swap in
    a new snapshot under a lock, so a render sees either the old or the new
    configuration, never a mix.
    """

    def __init__(self, config: ErrortagConfig | None = None) -> None:
        self._config = config or ErrortagConfig()
        self._lock = threading.Lock()

    def snapshot(self) -> ErrortagConfig:
        return self._config

    def settings_for(self, component: str) -> ComponentSettings:
        return self._config.settings_for(component)

    def replace(self, config: ErrortagConfig) -> None:
        with self._lock:
            self._config = config
        logger.debug("Config replaced", components=sorted(config.components))

    def update(self, component: str, **values: Any) -> ComponentSettings:
        """Set individual settings for ``component``, keeping the others.

        Raises:
            pydantic.ValidationError: a value is invalid for ``ComponentSettings``.
        """
        with self._lock:
            current = self._config.settings_for(component)
            data = {name: getattr(current, name) for name in current.model_fields_set}
            settings = ComponentSettings.model_validate({**data, **values})
            self._config = self._config.model_copy(
                update={"components": {**self._config.components, component: settings}},
            )
        logger.debug("Component config updated", component=component, keys=sorted(values))
        return settings

    def reset(self) -> None:
        self.replace(ErrortagConfig())

    def load(self, paths: Iterable[Path]) -> Result[ErrortagConfig, ConfigError]:
        """Load configuration files and install the result on success."""
        return load_config(paths).inspect(self.replace)


def get_registry() -> ConfigRegistry:
    global _registry
    if _registry is None:
        _registry = ConfigRegistry()
    return _registry


# Private singleton instance
_registry: ConfigRegistry | None = None
