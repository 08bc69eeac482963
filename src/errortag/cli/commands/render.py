from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
import yaml
from pydantic import ValidationError
from result import Err, Ok, Result, is_err

from errortag.common import create_logger
from errortag.component import ErrorTag
from errortag.errors import ContextResolutionError, TranslatorResolutionError
from errortag.forms import FormState
from errortag.markup import render_nodes
from errortag.utils import format_validation_error

from .options import ConfigFilesOption, handle_config_error, load_registry

logger = create_logger("cli")

FormFileArgument = Annotated[
    Path,
    typer.Argument(help="YAML or JSON file describing the form: name, optional id and errors."),
]
FieldOption = Annotated[str | None, typer.Option("--field", help="Field whose errors are rendered.")]
ClassOption = Annotated[str | None, typer.Option("--class", help="CSS class for each error element.")]
FeedbackOption = Annotated[
    str | None,
    typer.Option("--feedback-for", help="Input id used for the feedback binding attribute."),
]


class OutputFormat(str, Enum):
    HTML = "html"
    JSON = "json"


OutputOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", show_default=True, case_sensitive=False, help="Output format (html or json)."),
]


def render(
    form_file: FormFileArgument,
    field: FieldOption = None,
    css_class: ClassOption = None,
    feedback_for: FeedbackOption = None,
    format: OutputOption = OutputFormat.HTML,
    config_files: ConfigFilesOption = None,
) -> None:
    """Render the error tags of one field of a form."""
    registry_result = load_registry(config_files)
    if is_err(registry_result):
        handle_config_error(registry_result.err_value)
        raise typer.Exit(code=1)

    form_result = _load_form(form_file)
    if is_err(form_result):
        typer.secho(form_result.err_value, err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)

    component = ErrorTag(registry_result.ok_value)
    try:
        nodes = component.render(
            form_result.ok_value,
            field,
            css_class=css_class,
            feedback_for=feedback_for,
        )
    except (ContextResolutionError, TranslatorResolutionError) as exc:
        logger.error("Render failed", form_file=str(form_file), error=str(exc))
        typer.secho(str(exc), err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    if format is OutputFormat.JSON:
        typer.echo(json.dumps([node.to_dict() for node in nodes], indent=2))
    else:
        typer.echo(render_nodes(nodes, separator="\n"))


def _load_form(path: Path) -> Result[FormState, str]:
    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        return Err(f"[{path}] {exc}")

    try:
        data = yaml.safe_load(raw_text)
    except yaml.YAMLError as exc:
        return Err(f"[{path}] {exc}")

    if not isinstance(data, dict):
        return Err(f"[{path}] Form file root must be a mapping of keys to values.")

    try:
        return Ok(FormState.model_validate(data))
    except ValidationError as exc:
        return Err(f"[{path}] {format_validation_error('form file', exc)}")
