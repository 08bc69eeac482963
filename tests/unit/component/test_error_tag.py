from __future__ import annotations

import textwrap
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from errortag import error_tag, get_registry
from errortag.component import ErrorTag
from errortag.config import ConfigRegistry
from errortag.context import FieldContext
from errortag.errors import MissingFieldError, MissingFormError, TranslatorResolutionError
from errortag.forms import ErrorRecord, FormState

FORM = FormState.from_errors(
    "user",
    [
        ("password", ("can't be blank", {})),
        ("email", ("has invalid format", {"validation": "format"})),
        ("password", ("should be at least %{count} character(s)", {"count": 8})),
        ("password", ("can't be blank", {})),
    ],
)


def explicit_translator(_: ErrorRecord) -> str:
    return "explicit"


def configured_translator(_: ErrorRecord) -> str:
    return "configured"


@pytest.fixture
def registry() -> ConfigRegistry:
    return ConfigRegistry()


@pytest.fixture
def tag(registry: ConfigRegistry) -> ErrorTag:
    return ErrorTag(registry)


def test_one_node_per_error_in_storage_order(tag: ErrorTag) -> None:
    nodes = tag.render(FORM, "password")

    assert [node.text for node in nodes] == [
        "can't be blank",
        "should be at least 8 character(s)",
        "can't be blank",
    ]


def test_no_errors_renders_nothing(tag: ErrorTag) -> None:
    assert tag.render(FORM, "name") == []
    assert tag.render_html(FORM, "name") == ""


def test_default_markup(tag: ErrorTag) -> None:
    html = tag.render_html(FORM, "email")

    assert html == '<span phx-feedback-for="user_email">has invalid format</span>'


def test_no_class_attribute_without_explicit_or_config(tag: ErrorTag) -> None:
    node = tag.render(FORM, "email")[0]

    assert "class" not in node.attributes


def test_configured_default_class(tag: ErrorTag, registry: ConfigRegistry) -> None:
    registry.update("ErrorTag", default_class="invalid-feedback")

    assert tag.render(FORM, "email")[0].get("class") == "invalid-feedback"


def test_explicit_class_overrides_config(tag: ErrorTag, registry: ConfigRegistry) -> None:
    registry.update("ErrorTag", default_class="invalid-feedback")

    assert tag.render(FORM, "email", css_class="custom-css-classes")[0].get("class") == "custom-css-classes"


def test_feedback_binding_derived_from_form_and_field(tag: ErrorTag) -> None:
    form = FormState.from_errors("user", [("email", ("has invalid format", {}))], id="signup")

    assert tag.render(form, "email")[0].get("phx-feedback-for") == "signup_email"


def test_explicit_feedback_for_overrides_derived_id(tag: ErrorTag) -> None:
    nodes = tag.render(FORM, "password", feedback_for="confirm_password_for_reset")

    assert {node.get("phx-feedback-for") for node in nodes} == {"confirm_password_for_reset"}


def test_custom_id_deriver(registry: ConfigRegistry) -> None:
    tag = ErrorTag(registry, id_deriver=lambda form, field: f"{form.name}-{field}-input")

    assert tag.render(FORM, "email")[0].get("phx-feedback-for") == "user-email-input"


def test_translator_precedence(tag: ErrorTag, registry: ConfigRegistry) -> None:
    assert tag.render(FORM, "email")[0].text == "has invalid format"

    registry.update("ErrorTag", default_translator=configured_translator)
    assert tag.render(FORM, "email")[0].text == "configured"

    assert tag.render(FORM, "email", translator=explicit_translator)[0].text == "explicit"


def test_configured_translator_reference(
    tag: ErrorTag,
    registry: ConfigRegistry,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    (tmp_path / "app_error_helpers.py").write_text(
        textwrap.dedent(
            """
            def translate_error(error):
                return error.message_template.upper()
            """
        ),
        encoding="utf-8",
    )
    monkeypatch.syspath_prepend(str(tmp_path))
    registry.update("ErrorTag", default_translator=("app_error_helpers", "translate_error"))

    assert tag.render(FORM, "email")[0].text == "HAS INVALID FORMAT"


def test_broken_translator_reference_propagates(tag: ErrorTag, registry: ConfigRegistry) -> None:
    registry.update("ErrorTag", default_translator="errortag_missing_module:translate")

    with pytest.raises(TranslatorResolutionError):
        tag.render(FORM, "email")


def test_field_from_context(tag: ErrorTag) -> None:
    context = FieldContext.for_form(FORM).field_scope("password")

    assert len(tag.render(context=context)) == 3


def test_explicit_field_overrides_context(tag: ErrorTag) -> None:
    context = FieldContext.for_form(FORM).field_scope("password")

    assert [node.text for node in tag.render(field="email", context=context)] == ["has invalid format"]


def test_missing_field_raises(tag: ErrorTag) -> None:
    with pytest.raises(MissingFieldError):
        tag.render(FORM)


def test_missing_form_raises(tag: ErrorTag) -> None:
    with pytest.raises(MissingFormError):
        tag.render(field="email")


def test_render_does_not_mutate_form(tag: ErrorTag) -> None:
    before = FORM.model_dump()

    tag.render(FORM, "password", css_class="a", feedback_for="b")

    assert FORM.model_dump() == before


def test_resolve_config_is_fresh_per_render(tag: ErrorTag, registry: ConfigRegistry) -> None:
    first = tag.render(FORM, "email")[0]
    registry.update("ErrorTag", default_class="after-change")
    second = tag.render(FORM, "email")[0]

    assert first.get("class") is None
    assert second.get("class") == "after-change"


def test_concurrent_renders_are_independent(registry: ConfigRegistry) -> None:
    registry.update("ErrorTag", default_class="invalid-feedback")
    tag = ErrorTag(registry)
    account = FormState.from_errors(
        "account",
        [("iban", ("should be %{count} character(s)", {"count": 22}))],
    )
    jobs = [(FORM, "password"), (account, "iban")] * 50

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda job: tag.render_html(*job), jobs))

    password_html = tag.render_html(FORM, "password")
    iban_html = tag.render_html(account, "iban")
    assert results == [password_html, iban_html] * 50
    assert 'phx-feedback-for="account_iban"' in iban_html
    assert "should be 22 character(s)" in iban_html


def test_custom_tag_and_feedback_attribute(registry: ConfigRegistry) -> None:
    tag = ErrorTag(registry, tag="p", feedback_attribute="data-feedback-for")

    assert tag.render_html(FORM, "email") == '<p data-feedback-for="user_email">has invalid format</p>'


def test_error_tag_uses_process_registry() -> None:
    registry = get_registry()
    previous = registry.snapshot()
    try:
        registry.update("ErrorTag", default_class="global-class")

        assert error_tag(FORM, "email")[0].get("class") == "global-class"
    finally:
        registry.replace(previous)
