"""Pytest configuration and fixtures for test suite."""
# pylint: disable=redefined-outer-name
import sys
from pathlib import Path

import pytest

# Додаємо корінь проєкту в sys.path, щоб імпорти alternatename.* працювали без інсталяції пакету
PROJECT_ROOT = Path(__file__).resolve().parents[1]
ROOT_STR = str(PROJECT_ROOT)
if ROOT_STR in sys.path:
    sys.path.remove(ROOT_STR)
sys.path.insert(0, ROOT_STR)

from alternatename.domain.fullname.orchestrator import FullnameConfig  # noqa: E402


@pytest.fixture
def jane():
    """A typical record with every name field filled."""
    return {
        "firstname": "Jane",
        "lastname": "Doe",
        "alternatename": "Janey",
        "middlename": "Q",
        "prefix": "Dr.",
        "email": "jane@example.com",
    }


@pytest.fixture
def jane_without_nickname():
    return {"firstname": "Jane", "lastname": "Doe", "alternatename": ""}


@pytest.fixture
def clean_env(monkeypatch):
    """Removes fullname-related variables so Settings() sees defaults."""
    for name in (
        "FULLNAME_DISPLAY_TEMPLATE",
        "ALTERNATIVE_FULLNAME_TEMPLATE",
        "FORCE_FIRSTNAME",
        "FORCE_LASTNAME",
        "FULLNAME_LANGUAGE",
        "FULLNAME_SHORT_CIRCUIT_EMPTY",
        "CORS_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def make_config(**overrides) -> FullnameConfig:
    """Config with explicit templates so tests do not depend on the environment."""
    values = {
        "default_template": "{firstname} {lastname}",
        "alternate_template": "{alternatename} ({firstname} {lastname})",
        "language": "en",
    }
    values.update(overrides)
    return FullnameConfig(**values)
