"""Fullname orchestration: template source selection and the fallback chain."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, List, Mapping, Optional

from alternatename.domain.fullname.fields import (
    NAME_FIELDS,
    PersonRecord,
    field_value,
    record_value,
    snapshot,
)
from alternatename.domain.fullname.language import format_language_name
from alternatename.domain.fullname.normalizer import (
    normalize_template,
    placeholder_fields,
    split_templates,
)
from alternatename.domain.fullname.renderer import render_raw, render_template
from alternatename.infra.config.settings import Settings, settings as default_settings
from alternatename.shared.enums import FallbackStage, TemplateSource
from alternatename.shared.errors import ConfigurationError
from alternatename.shared.logging import get_logger

logger = get_logger(__name__)

LANGUAGE_SENTINEL = "language"

LanguageFormatter = Callable[[PersonRecord], str]

# Ключі конфігурації: camelCase з адмінки та snake_case для Python-коду
_CONFIG_KEYS: Dict[str, str] = {
    "forceFirstName": "force_first_name",
    "forceLastName": "force_last_name",
    "sessionFormatOverride": "session_format_override",
    "defaultTemplate": "default_template",
    "alternateTemplate": "alternate_template",
    "language": "language",
    "shortCircuitEmpty": "short_circuit_empty",
}
_CONFIG_KEYS.update({name: name for name in list(_CONFIG_KEYS.values())})


@dataclass(frozen=True)
class FullnameConfig:
    """
    Explicit configuration for one fullname call.

    ``default_template``/``alternate_template`` left as None fall back to
    the global templates from settings; an empty string is a configured
    empty format and delegates to the language pack.
    """

    force_first_name: Optional[str] = None
    force_last_name: Optional[str] = None
    session_format_override: Optional[str] = None
    default_template: Optional[str] = None
    alternate_template: Optional[str] = None
    language: Optional[str] = None
    short_circuit_empty: bool = False

    @classmethod
    def from_settings(cls, source: Settings | None = None) -> "FullnameConfig":
        source = source or default_settings
        return cls(
            force_first_name=source.force_firstname,
            force_last_name=source.force_lastname,
            language=source.fullname_language,
            short_circuit_empty=source.fullname_short_circuit_empty,
        )

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        base: "FullnameConfig | None" = None,
    ) -> "FullnameConfig":
        """
        Build a config from recognised keys, on top of ``base``.

        Raises:
            ConfigurationError: unknown key or a value of the wrong type.
        """
        changes: Dict[str, Any] = {}
        for key, value in data.items():
            attr = _CONFIG_KEYS.get(key)
            if attr is None:
                raise ConfigurationError(f"Unknown configuration key: {key}", code="unknown_config_key")
            if attr == "short_circuit_empty":
                if not isinstance(value, bool):
                    raise ConfigurationError(f"{key} must be a boolean", code="invalid_config_value")
            elif value is not None and not isinstance(value, str):
                raise ConfigurationError(f"{key} must be a string", code="invalid_config_value")
            changes[attr] = value
        return replace(base or cls(), **changes)


@dataclass(frozen=True)
class FullnameResult:
    text: str
    source: TemplateSource
    template: Optional[str]
    stage: FallbackStage


def _select_format(
    config: FullnameConfig,
    override: bool,
    source_settings: Settings,
) -> tuple[str, TemplateSource]:
    if not override and config.session_format_override:
        return config.session_format_override, TemplateSource.SESSION
    if override:
        configured = config.alternate_template
        fallback = source_settings.alternative_fullname_template
        source = TemplateSource.ALTERNATE
    else:
        configured = config.default_template
        fallback = source_settings.fullname_display_template
        source = TemplateSource.DEFAULT
    return (fallback if configured is None else configured), source


def _referenced_fields(templates: List[str]) -> List[str]:
    fields: List[str] = []
    for template in templates:
        for name in placeholder_fields(template):
            if name not in fields:
                fields.append(name)
    return fields


def resolve_fullname(
    record: PersonRecord,
    override: bool = False,
    options: Optional[Mapping[str, Any]] = None,
    config: Optional[FullnameConfig] = None,
    language_formatter: Optional[LanguageFormatter] = None,
    source_settings: Optional[Settings] = None,
) -> FullnameResult:
    """
    Produce the display name for ``record`` and describe how it was chosen.

    Never raises for record content; every failure degrades to a simpler
    fallback and finally to an empty string.
    """
    source_settings = source_settings or default_settings
    config = config or FullnameConfig.from_settings(source_settings)
    if options and "override" in options:
        override = bool(options["override"])

    if override:
        user = snapshot(record)
    else:
        user = snapshot(record, {
            "firstname": config.force_first_name,
            "lastname": config.force_last_name,
        })

    format_string, source = _select_format(config, override, source_settings)

    if not format_string or format_string == LANGUAGE_SENTINEL:
        logger.debug("Using language pack format (source=%s)", source.value)
        if language_formatter is not None:
            text = language_formatter(user)
        else:
            text = format_language_name(user, config.language)
        return FullnameResult(text or "", TemplateSource.LANGUAGE, None, FallbackStage.LANGUAGE)

    templates = [normalize_template(t, user) for t in split_templates(format_string)]
    fields = _referenced_fields(templates)

    if config.short_circuit_empty and fields and not any(field_value(f, user) for f in fields):
        logger.debug("All %d referenced fields are empty", len(fields))
        return FullnameResult("", source, None, FallbackStage.SHORT_CIRCUIT)

    for index, template in enumerate(templates):
        display = render_template(template, user)
        if display:
            logger.debug("Template #%d produced the name (source=%s)", index, source.value)
            return FullnameResult(display, source, template, FallbackStage.TEMPLATE)

    joined = " ".join(v for v in (field_value(f, user) for f in fields) if v)
    if joined:
        return FullnameResult(joined, source, None, FallbackStage.FIELD_VALUES)

    first_last = f"{record_value(user, 'firstname')} {record_value(user, 'lastname')}".strip()
    if first_last:
        return FullnameResult(first_last, source, None, FallbackStage.FIRST_LAST)

    for name in NAME_FIELDS:
        value = record_value(user, name)
        if value:
            return FullnameResult(value, source, None, FallbackStage.NAME_FIELD)

    return FullnameResult("", source, None, FallbackStage.EMPTY)


def get_fullname(
    record: PersonRecord,
    override: bool = False,
    options: Optional[Mapping[str, Any]] = None,
    config: Optional[FullnameConfig] = None,
    language_formatter: Optional[LanguageFormatter] = None,
) -> str:
    """Display name for ``record``; always a string, possibly empty."""
    return resolve_fullname(record, override, options, config, language_formatter).text


def preview_template(template: str, record: PersonRecord) -> Dict[str, Any]:
    """Show how a single template is normalized and rendered for ``record``."""
    user = snapshot(record)
    normalized = normalize_template(template, user)
    return {
        "template": template,
        "normalized": normalized,
        "fields": placeholder_fields(normalized),
        "rendered": render_raw(normalized, user),
        "display": render_template(normalized, user),
    }
