from __future__ import annotations

from pathlib import Path

import pytest
from result import is_err, is_ok

from errortag.config import (
    ConfigNotFoundError,
    ConfigValidationError,
    ConfigYamlError,
    TranslatorReference,
    load_config,
    load_config_file,
)


@pytest.fixture(autouse=True)
def _clear_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    import os

    for key in list(os.environ.keys()):
        if key.upper().startswith("ERRORTAG_CONFIG__"):
            monkeypatch.delenv(key, raising=False)


def write_yaml(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


def test_load_config_file_parses_component_settings(tmp_path: Path) -> None:
    path = write_yaml(
        tmp_path / "errortag.yaml",
        """
components:
  ErrorTag:
    default_class: invalid-feedback
    default_translator: myapp.errors:translate_error
""",
    )

    result = load_config_file(path)

    assert is_ok(result)
    settings = result.ok_value.settings_for("ErrorTag")
    assert settings.default_class == "invalid-feedback"
    assert settings.default_translator == TranslatorReference(module="myapp.errors", function="translate_error")


def test_load_config_file_accepts_pair_reference(tmp_path: Path) -> None:
    path = write_yaml(
        tmp_path / "errortag.yaml",
        """
components:
  ErrorTag:
    default_translator: [myapp.errors, translate_error]
""",
    )

    result = load_config_file(path)

    assert is_ok(result)
    assert str(result.ok_value.settings_for("ErrorTag").default_translator) == "myapp.errors:translate_error"


def test_load_config_file_empty_file_gives_defaults(tmp_path: Path) -> None:
    result = load_config_file(write_yaml(tmp_path / "errortag.yaml", ""))

    assert is_ok(result)
    assert result.ok_value.components == {}


def test_load_config_file_missing(tmp_path: Path) -> None:
    result = load_config_file(tmp_path / "missing.yaml")

    assert is_err(result)
    assert isinstance(result.err_value, ConfigNotFoundError)


def test_load_config_file_invalid_yaml(tmp_path: Path) -> None:
    result = load_config_file(write_yaml(tmp_path / "errortag.yaml", "components: [unclosed"))

    assert is_err(result)
    error = result.err_value
    assert isinstance(error, ConfigYamlError)
    assert error.line is not None


def test_load_config_file_root_must_be_mapping(tmp_path: Path) -> None:
    result = load_config_file(write_yaml(tmp_path / "errortag.yaml", "- a\n- b\n"))

    assert is_err(result)
    assert isinstance(result.err_value, ConfigValidationError)
    assert "mapping" in result.err_value.message


def test_load_config_file_rejects_unknown_setting(tmp_path: Path) -> None:
    path = write_yaml(
        tmp_path / "errortag.yaml",
        """
components:
  ErrorTag:
    default_colour: red
""",
    )

    result = load_config_file(path)

    assert is_err(result)
    error = result.err_value
    assert isinstance(error, ConfigValidationError)
    assert error.field == "components.ErrorTag.default_colour"


def test_load_config_file_rejects_malformed_reference(tmp_path: Path) -> None:
    path = write_yaml(
        tmp_path / "errortag.yaml",
        """
components:
  ErrorTag:
    default_translator: translate_error
""",
    )

    result = load_config_file(path)

    assert is_err(result)
    assert isinstance(result.err_value, ConfigValidationError)


def test_load_config_merges_files_and_skips_missing(tmp_path: Path) -> None:
    base = write_yaml(
        tmp_path / "base.yaml",
        """
components:
  ErrorTag:
    default_class: invalid-feedback
    default_translator: myapp.errors:translate_error
""",
    )
    local = write_yaml(
        tmp_path / "local.yaml",
        """
components:
  ErrorTag:
    default_class: help-block
""",
    )

    result = load_config([base, tmp_path / "missing.yaml", local])

    assert is_ok(result)
    settings = result.ok_value.settings_for("ErrorTag")
    assert settings.default_class == "help-block"
    assert str(settings.default_translator) == "myapp.errors:translate_error"


def test_load_config_stops_at_invalid_file(tmp_path: Path) -> None:
    broken = write_yaml(tmp_path / "broken.yaml", "components: [unclosed")

    result = load_config([broken])

    assert is_err(result)
    assert isinstance(result.err_value, ConfigYamlError)


def test_load_config_applies_env_overrides(tmp_path: Path) -> None:
    base = write_yaml(
        tmp_path / "base.yaml",
        """
components:
  ErrorTag:
    default_class: invalid-feedback
""",
    )

    result = load_config(
        [base],
        environ={"ERRORTAG_CONFIG__COMPONENTS__ERRORTAG__DEFAULT_CLASS": "is-danger"},
    )

    assert is_ok(result)
    assert result.ok_value.settings_for("ErrorTag").default_class == "is-danger"


def test_load_config_reports_invalid_env_override() -> None:
    result = load_config([], environ={"ERRORTAG_CONFIG__LOGGING__LOG_LEVEL": "LOUD"})

    assert is_err(result)
    error = result.err_value
    assert isinstance(error, ConfigValidationError)
    assert error.path is None
