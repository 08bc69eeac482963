from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from result import Err, Ok, Result

from errortag.config import ConfigError, ConfigRegistry, load_config
from errortag.settings import settings

ConfigFilesOption = Annotated[
    list[Path] | None,
    typer.Option(
        "--config",
        "-c",
        help="Configuration file(s) merged in order. Defaults to ERRORTAG_CONFIG_FILES or ./errortag.yaml.",
    ),
]


def load_registry(config_files: list[Path] | None) -> Result[ConfigRegistry, ConfigError]:
    paths = config_files or settings.config_files
    match load_config(paths):
        case Ok(config):
            return Ok(ConfigRegistry(config))
        case Err(error):
            return Err(error)


def handle_config_error(error: ConfigError) -> None:
    expected_path = getattr(error, "expected_path", None)
    error_path = getattr(error, "path", None)
    if expected_path is not None:
        message = f"[{expected_path}] {error.message}"
    elif error_path is not None:
        message = f"[{error_path}] {error.message}"
    else:
        message = f"[environment] {error.message}"

    field = getattr(error, "field", None)
    if field:
        message = f"{message} (field: {field})"

    typer.secho(message, err=True, fg=typer.colors.RED)
