"""The ErrorTag component: renders one element per error of a form field.

Examples::

    tag = ErrorTag()
    tag.render(form, "password")
    tag.render(context=FieldContext.for_form(form).field_scope("password"))
    tag.render(form, "password", feedback_for="confirm_password_for_reset")
    tag.render(form, "password", css_class="custom-css-classes")
    tag.render(form, "password", translator=gettext_translate_error)

Without ``css_class`` the configured ``default_class`` is used, and without
``translator`` the configured ``default_translator`` or ``translate_error``.
"""

from __future__ import annotations

from dataclasses import dataclass

from errortag.common import create_logger
from errortag.config import ConfigRegistry, get_registry
from errortag.constants import ERROR_TAG_COMPONENT, FEEDBACK_ATTRIBUTE
from errortag.context import FieldContext, ResolvedContext, resolve_context
from errortag.forms import FormState, IdDeriver, Translator, input_id
from errortag.markup import ErrorNode, render_nodes
from errortag.translators import resolve_translator_with_source

logger = create_logger("render")


@dataclass(frozen=True, slots=True)
class ResolvedConfig:
    """Settings in effect for a single render. Never reused across renders."""

    css_class: str | None
    translator: Translator
    feedback_target: str


class ErrorTag:
    name = ERROR_TAG_COMPONENT

    def __init__(
        self,
        registry: ConfigRegistry | None = None,
        *,
        id_deriver: IdDeriver = input_id,
        tag: str = "span",
        feedback_attribute: str = FEEDBACK_ATTRIBUTE,
    ) -> None:
        self._registry = registry
        self.id_deriver = id_deriver
        self.tag = tag
        self.feedback_attribute = feedback_attribute

    @property
    def registry(self) -> ConfigRegistry:
        return self._registry or get_registry()

    def resolve_config(
        self,
        resolved: ResolvedContext,
        *,
        css_class: str | None = None,
        translator: Translator | None = None,
        feedback_for: str | None = None,
    ) -> ResolvedConfig:
        snapshot = self.registry.snapshot()
        settings = snapshot.settings_for(self.name)
        chosen_translator, source = resolve_translator_with_source(translator, snapshot, self.name)

        config = ResolvedConfig(
            css_class=css_class if css_class is not None else settings.default_class,
            translator=chosen_translator,
            feedback_target=(
                feedback_for if feedback_for is not None else self.id_deriver(resolved.form, resolved.field)
            ),
        )
        logger.debug(
            "Render config resolved",
            field=resolved.field,
            css_class=config.css_class,
            translator_source=source,
            feedback_target=config.feedback_target,
        )
        return config

    def render(
        self,
        form: FormState | None = None,
        field: object | None = None,
        *,
        context: FieldContext | None = None,
        css_class: str | None = None,
        translator: Translator | None = None,
        feedback_for: str | None = None,
    ) -> list[ErrorNode]:
        """Return one node per error recorded for the field, in storage order.

        Raises:
            MissingFieldError: no field given and none in ``context``.
            MissingFormError: no form given and none in ``context``.
            TranslatorResolutionError: the configured translator cannot be loaded.
        """
        resolved = resolve_context(form, field, context, component=self.name)
        config = self.resolve_config(
            resolved,
            css_class=css_class,
            translator=translator,
            feedback_for=feedback_for,
        )

        errors = resolved.form.errors_for(resolved.field)
        if not errors:
            logger.debug("No errors to render", form=resolved.form.name, field=resolved.field)
            return []

        attributes: dict[str, str] = {}
        if config.css_class is not None:
            attributes["class"] = config.css_class
        attributes[self.feedback_attribute] = config.feedback_target

        nodes = [ErrorNode(text=config.translator(error), attributes=attributes, tag=self.tag) for error in errors]
        logger.debug("Rendered errors", form=resolved.form.name, field=resolved.field, count=len(nodes))
        return nodes

    def render_html(
        self,
        form: FormState | None = None,
        field: object | None = None,
        *,
        context: FieldContext | None = None,
        css_class: str | None = None,
        translator: Translator | None = None,
        feedback_for: str | None = None,
    ) -> str:
        return render_nodes(
            self.render(
                form,
                field,
                context=context,
                css_class=css_class,
                translator=translator,
                feedback_for=feedback_for,
            )
        )


def error_tag(
    form: FormState | None = None,
    field: object | None = None,
    *,
    context: FieldContext | None = None,
    css_class: str | None = None,
    translator: Translator | None = None,
    feedback_for: str | None = None,
) -> list[ErrorNode]:
    """Render with a component bound to the process-wide registry."""
    return ErrorTag().render(
        form,
        field,
        context=context,
        css_class=css_class,
        translator=translator,
        feedback_for=feedback_for,
    )
