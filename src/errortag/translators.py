"""Translation of error records into display strings.

The translator used for a render is the first available of:

1. a translator passed to the render call,
2. the component's configured ``default_translator``,
3. ``translate_error``, the built-in substitution translator.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Protocol, TypeAlias

from errortag.common import create_logger
from errortag.config import ConfigRegistry, ErrortagConfig, TranslatorReference, get_registry
from errortag.constants import ERROR_TAG_COMPONENT
from errortag.forms import ErrorRecord, RawError, Translator

logger = create_logger("translators")

TranslatorSource: TypeAlias = Literal["explicit", "config", "fallback"]


def translate_error(error: ErrorRecord | RawError) -> str:
    """Replace each ``%{key}`` token in the template with its substitution value.

    Tokens without a matching key stay in the output as written; keys without
    a matching token are ignored.
    """
    record = error if isinstance(error, ErrorRecord) else ErrorRecord.from_tuple(error)
    message = record.message_template
    for key, value in record.substitutions.items():
        message = message.replace(f"%{{{key}}}", _to_string(value))
    return message


def _to_string(value: object) -> str:
    match value:
        case None:
            return ""
        case bool():
            return "true" if value else "false"
        case Enum():
            return _to_string(value.value)
        case _:
            return str(value)


class TranslatorProvider(Protocol):
    """Supplies a translator, or ``None`` when it has nothing to offer."""

    def resolve(self) -> Translator | None: ...


class StaticTranslatorProvider:
    def __init__(self, translator: Translator | None) -> None:
        self.translator = translator

    def resolve(self) -> Translator | None:
        return self.translator


class ConfiguredTranslatorProvider:
    """Reads ``default_translator`` from configuration each time it resolves.

    ``source`` is a registry (its current snapshot is read), a fixed config
    snapshot, or ``None`` for the process-wide registry. References are
    imported on every call, so configuration changes take effect on the next
    render.
    """

    def __init__(
        self,
        source: ConfigRegistry | ErrortagConfig | None = None,
        component: str = ERROR_TAG_COMPONENT,
    ) -> None:
        self.source = source
        self.component = component

    def resolve(self) -> Translator | None:
        configured = _current_config(self.source).settings_for(self.component).default_translator
        if isinstance(configured, TranslatorReference):
            return configured.load()
        return configured


def _current_config(source: ConfigRegistry | ErrortagConfig | None) -> ErrortagConfig:
    if isinstance(source, ErrortagConfig):
        return source
    return (source or get_registry()).snapshot()


class FallbackTranslatorProvider:
    def resolve(self) -> Translator:
        return translate_error


def resolve_translator(
    explicit: Translator | None = None,
    config: ConfigRegistry | ErrortagConfig | None = None,
    component: str = ERROR_TAG_COMPONENT,
) -> Translator:
    """Return the translator to use for one render.

    Raises:
        TranslatorResolutionError: the configured reference cannot be loaded.
    """
    translator, source = resolve_translator_with_source(explicit, config, component)
    logger.debug("Translator resolved", component=component, source=source)
    return translator


def resolve_translator_with_source(
    explicit: Translator | None = None,
    config: ConfigRegistry | ErrortagConfig | None = None,
    component: str = ERROR_TAG_COMPONENT,
) -> tuple[Translator, TranslatorSource]:
    providers: list[tuple[TranslatorSource, TranslatorProvider]] = [
        ("explicit", StaticTranslatorProvider(explicit)),
        ("config", ConfiguredTranslatorProvider(config, component)),
    ]
    for source, provider in providers:
        if (translator := provider.resolve()) is not None:
            return translator, source
    return FallbackTranslatorProvider().resolve(), "fallback"


__all__ = [
    "ConfiguredTranslatorProvider",
    "FallbackTranslatorProvider",
    "StaticTranslatorProvider",
    "TranslatorProvider",
    "TranslatorReference",
    "TranslatorSource",
    "resolve_translator",
    "resolve_translator_with_source",
    "translate_error",
]
