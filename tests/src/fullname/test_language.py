"""Tests for language packs."""
from alternatename.domain.fullname.language import (
    format_language_name,
    get_language_pack,
    language_packs,
    placeholders_hint,
)


def test_language_lookup_is_case_insensitive():
    assert get_language_pack("UK").code == "uk"


def test_unknown_language_falls_back_to_english():
    assert get_language_pack("xx").code == "en"
    assert get_language_pack(None).code == "en"


def test_registered_languages():
    assert language_packs.names() == ["en", "uk"]


def test_get_string_with_placeholders():
    pack = get_language_pack("uk")
    desc = pack.get_string("setting_fullname_desc", placeholders=placeholders_hint())
    assert desc.startswith("Шаблон для відображення стандартного повного імені.")
    assert "{alternatename}, {firstname}" in desc


def test_get_string_missing_key():
    assert get_language_pack("en").get_string("nope") == "[[nope]]"


def test_format_language_name():
    assert format_language_name({"firstname": "Jane", "lastname": "Doe"}, "uk") == "Jane Doe"
    assert format_language_name({"lastname": "Doe"}) == "Doe"
