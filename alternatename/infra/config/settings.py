from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv


BASE_DIR = Path(__file__).resolve().parents[3]

# Автоматично підтягуємо змінні з .env у корені проєкту.
# ENV змінні з оточення мають пріоритет (override=False за замовчуванням).
load_dotenv(BASE_DIR / ".env")

DEFAULT_FULLNAME_TEMPLATE = "{firstname} {lastname}"
DEFAULT_ALTERNATIVE_TEMPLATE = "{alternatename} ({firstname} {lastname})"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


class Settings:
    def __init__(self) -> None:
        self.env: str = os.getenv("ENV", "dev").lower()
        self.is_prod: bool = self.env in {"prod", "production"}
        self.is_dev: bool = not self.is_prod

        # Глобальні шаблони повного імені. Використовуються, коли
        # конфігурація виклику не задає власних шаблонів.
        self.fullname_display_template: str = os.getenv(
            "FULLNAME_DISPLAY_TEMPLATE", DEFAULT_FULLNAME_TEMPLATE
        )
        self.alternative_fullname_template: str = os.getenv(
            "ALTERNATIVE_FULLNAME_TEMPLATE", DEFAULT_ALTERNATIVE_TEMPLATE
        )

        # Примусові ім'я/прізвище для всього сайту (порожньо = вимкнено)
        self.force_firstname: str | None = os.getenv("FORCE_FIRSTNAME") or None
        self.force_lastname: str | None = os.getenv("FORCE_LASTNAME") or None

        # Мовний пакет для значення "language" або порожнього формату
        self.fullname_language: str = (os.getenv("FULLNAME_LANGUAGE") or "en").strip().lower()

        # Повертати порожній рядок, якщо всі поля з шаблонів порожні
        self.fullname_short_circuit_empty: bool = _env_bool("FULLNAME_SHORT_CIRCUIT_EMPTY", False)

        # CORS (origins для фронтенду)
        _cors_origins_env = os.getenv("CORS_ORIGINS")
        if _cors_origins_env:
            self.cors_origins: list[str] = [
                origin.strip()
                for origin in _cors_origins_env.split(",")
                if origin.strip()
            ]
        else:
            self.cors_origins: list[str] = [
                "http://localhost:5173",
                "http://127.0.0.1:5173",
                "*",
            ]

        # Якщо дозволено "*", вимикаємо allow_credentials.
        self.cors_allow_credentials: bool = "*" not in self.cors_origins


settings = Settings()
