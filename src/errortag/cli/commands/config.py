from __future__ import annotations

import json
from enum import Enum
from typing import Annotated

import typer
import yaml
from result import is_err

from .options import ConfigFilesOption, handle_config_error, load_registry


class ConfigFormat(str, Enum):
    YAML = "yaml"
    JSON = "json"


FormatOption = Annotated[
    ConfigFormat,
    typer.Option("--format", "-f", show_default=True, case_sensitive=False, help="Output format (yaml or json)."),
]

app = typer.Typer(help="Inspect errortag configuration.")


@app.callback(invoke_without_command=True)
def _config_root(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("show")
def show(
    format: FormatOption = ConfigFormat.YAML,
    config_files: ConfigFilesOption = None,
) -> None:
    """Print the effective configuration after merging files and environment."""
    selected_format = format.value
    result = load_registry(config_files)
    if is_err(result):
        handle_config_error(result.err_value)
        raise typer.Exit(code=1)

    payload = result.ok_value.snapshot().model_dump(mode="json")
    typer.echo(_format_payload(payload, selected_format))


def _format_payload(payload: dict[str, object], format: str) -> str:
    if format == "json":
        return json.dumps(payload, indent=2, sort_keys=True)
    return yaml.safe_dump(payload, sort_keys=True)
