"""Configuration file loading and validation helpers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError
from result import Err, Ok, Result, is_err

from errortag.common import create_logger

from .merger import merge_configs
from .models import (
    ConfigError,
    ConfigIOError,
    ConfigNotFoundError,
    ConfigValidationError,
    ConfigYamlError,
    ErrortagConfig,
)
from .resolver import apply_env_overrides

logger = create_logger("config")


def load_config_file(path: Path) -> Result[ErrortagConfig, ConfigError]:
    """Load and validate a single YAML configuration file."""
    logger.debug("Loading config file", path=str(path))

    if not path.exists() or not path.is_file():
        return Err(
            ConfigNotFoundError(
                expected_path=path,
                message=f"Configuration file not found: {path}",
            ),
        )

    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Config file read error", path=str(path), error=str(exc))
        return Err(ConfigIOError(path=path, message=str(exc)))

    try:
        data = yaml.safe_load(raw_text)
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        line = getattr(mark, "line", None)
        column = getattr(mark, "column", None)
        logger.error("Config YAML parse error", path=str(path), line=line, column=column, error=str(exc))
        return Err(
            ConfigYamlError(
                path=path,
                line=(line + 1) if line is not None else None,
                column=(column + 1) if column is not None else None,
                message=str(exc),
            ),
        )

    if data is None:
        data = {}

    if not isinstance(data, dict):
        logger.error("Config must be a mapping", path=str(path))
        return Err(
            ConfigValidationError(
                path=path,
                field=None,
                message="Configuration root must be a mapping of keys to values.",
            ),
        )

    try:
        config = ErrortagConfig.model_validate(data)
    except ValidationError as exc:
        error = _validation_error(path, exc)
        logger.error("Config validation error", path=str(path), field=error.field, error=error.message)
        return Err(error)

    logger.debug("Config validated", path=str(path), components=sorted(config.components))
    return Ok(config)


def load_config(
    paths: Iterable[Path],
    *,
    environ: Mapping[str, str] | None = None,
) -> Result[ErrortagConfig, ConfigError]:
    """Load every existing file in ``paths``, merge them in order and apply env overrides.

    Missing files are skipped. Any other loading error stops at the first
    failing file.
    """
    configs: list[ErrortagConfig] = []
    for path in paths:
        result = load_config_file(path)
        if is_err(result):
            if isinstance(result.err_value, ConfigNotFoundError):
                logger.debug("Skipping missing config file", path=str(path))
                continue
            return result
        configs.append(result.ok_value)

    merged = merge_configs(*configs)
    try:
        return Ok(apply_env_overrides(merged, environ))
    except ValidationError as exc:
        error = _validation_error(None, exc)
        logger.error("Config environment override error", field=error.field, error=error.message)
        return Err(error)


def _validation_error(path: Path | None, exc: ValidationError) -> ConfigValidationError:
    error_details = exc.errors()
    field = None
    message = str(exc)
    if error_details:
        first = error_details[0]
        loc = first.get("loc") or ()
        field = ".".join(str(part) for part in loc) or None
        message = first.get("msg", message)
    return ConfigValidationError(path=path, field=field, message=message)
