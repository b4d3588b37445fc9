"""Tests for configuration settings."""
from alternatename.infra.config.settings import (
    DEFAULT_ALTERNATIVE_TEMPLATE,
    DEFAULT_FULLNAME_TEMPLATE,
    Settings,
)


def test_settings_template_defaults(clean_env):  # noqa: ARG001
    """Test settings template defaults."""
    s = Settings()
    assert s.fullname_display_template == DEFAULT_FULLNAME_TEMPLATE == "{firstname} {lastname}"
    assert s.alternative_fullname_template == DEFAULT_ALTERNATIVE_TEMPLATE
    assert s.force_firstname is None
    assert s.fullname_language == "en"
    assert s.fullname_short_circuit_empty is False


def test_settings_env_override(clean_env):
    clean_env.setenv("ALTERNATIVE_FULLNAME_TEMPLATE", "A;firstname lastname")
    clean_env.setenv("FORCE_LASTNAME", "Guest")
    clean_env.setenv("FULLNAME_LANGUAGE", " UK ")
    s = Settings()
    assert s.alternative_fullname_template == "A;firstname lastname"
    assert s.force_lastname == "Guest"
    assert s.fullname_language == "uk"


def test_settings_malformed_bool_uses_default(clean_env):
    clean_env.setenv("FULLNAME_SHORT_CIRCUIT_EMPTY", "maybe")
    assert Settings().fullname_short_circuit_empty is False


def test_settings_cors_origins_parse(clean_env):
    """Test settings CORS origins parse."""
    clean_env.setenv("CORS_ORIGINS", "http://example.com, http://foo")
    s = Settings()
    assert s.cors_origins == ["http://example.com", "http://foo"]
    assert s.cors_allow_credentials is True


def test_settings_prod_env(clean_env):
    clean_env.setenv("ENV", "production")
    s = Settings()
    assert s.is_prod is True
    assert s.is_dev is False
