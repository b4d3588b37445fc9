"""Language packs: fallback fullname formats and localized setting strings."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from alternatename.domain.fullname.fields import PersonRecord
from alternatename.domain.fullname.normalizer import normalize_template
from alternatename.domain.fullname.renderer import render_template
from alternatename.shared.logging import get_logger
from alternatename.shared.registry import Registry

logger = get_logger(__name__)

DEFAULT_LANGUAGE = "en"

PLACEHOLDER_VOCABULARY: List[str] = [
    "alternatename",
    "firstname",
    "lastname",
    "middlename",
    "title",
    "prefix",
    "suffix",
    "username",
    "email",
    "idnumber",
    "fullname",
]


@dataclass(frozen=True)
class LanguagePack:
    """Per-language fullname format and UI strings."""

    code: str
    fullname_format: str
    strings: Dict[str, str] = field(default_factory=dict)

    def get_string(self, key: str, **params: str) -> str:
        template = self.strings.get(key)
        if template is None:
            return f"[[{key}]]"
        return template.format(**params) if params else template


language_packs: Registry[LanguagePack] = Registry(name="LanguagePackRegistry")

language_packs.register("en", LanguagePack(
    code="en",
    fullname_format="{firstname} {lastname}",
    strings={
        "pluginname": "Alternate name format",
        "settingspagetitle": "Name display format",
        "setting_fullname_label": "Full name template",
        "setting_fullname_desc": (
            "Template used to display the standard full name. "
            "Supported placeholders: {placeholders}."
        ),
        "setting_alternative_label": "Alternative full name template",
        "setting_alternative_desc": (
            "Template used for the alternative full name. "
            "Supported placeholders: {placeholders}."
        ),
        "privacy:metadata": "The Alternate name format plugin does not store any personal data.",
    },
))

language_packs.register("uk", LanguagePack(
    code="uk",
    fullname_format="{firstname} {lastname}",
    strings={
        "pluginname": "Формат альтернативного імені",
        "settingspagetitle": "Формат відображення імені",
        "setting_fullname_label": "Шаблон повного імені",
        "setting_fullname_desc": (
            "Шаблон для відображення стандартного повного імені. "
            "Підтримуються плейсхолдери: {placeholders}."
        ),
        "setting_alternative_label": "Шаблон альтернативного повного імені",
        "setting_alternative_desc": (
            "Шаблон для альтернативного повного імені. "
            "Підтримуються плейсхолдери: {placeholders}."
        ),
        "privacy:metadata": "Плагін «Формат альтернативного імені» не зберігає персональних даних.",
    },
))


def get_language_pack(code: str | None) -> LanguagePack:
    """Language pack for ``code``; unknown codes fall back to English."""
    pack = language_packs.get(code or DEFAULT_LANGUAGE)
    if pack is None:
        logger.debug("Unknown language %r, falling back to %s", code, DEFAULT_LANGUAGE)
        pack = language_packs.get(DEFAULT_LANGUAGE)
    return pack


def format_language_name(record: PersonRecord, language: str | None = None) -> str:
    """Render the language pack's own fullname format for ``record``."""
    pack = get_language_pack(language)
    return render_template(normalize_template(pack.fullname_format, record), record)


def placeholders_hint() -> str:
    return ", ".join("{" + name + "}" for name in PLACEHOLDER_VOCABULARY)
