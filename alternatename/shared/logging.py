"""Logging configuration and utilities."""
from __future__ import annotations

import logging
import os
import re


_EMAIL_RE = re.compile(r"[\w.+-]+@[\w-]+(?:\.[\w-]+)+")


class _LoggingState:
    """
    Module-level logging state container.
    """

    configured: bool = False

    def reset(self) -> None:
        """Reset state for testing."""
        self.configured = False


_state = _LoggingState()


def redact_contacts(text: str) -> str:
    """Replace e-mail addresses with a fixed tag."""
    return _EMAIL_RE.sub("[EMAIL]", text)


class ContactRedactionFilter(logging.Filter):
    """
    Фільтр, який вирізає e-mail адреси з тексту логів.

    Записи користувачів містять поле email; якщо воно випадково потрапить
    у повідомлення, адреса замінюється тегом [EMAIL]. Якщо щось іде
    не так — лог не змінюється.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            msg = record.getMessage()
        except (TypeError, ValueError):
            # Некоректні аргументи форматування не блокують лог
            return True
        redacted = redact_contacts(str(msg))
        if redacted != msg:
            record.msg = redacted
            record.args = ()
        return True

    def __repr__(self) -> str:
        return "ContactRedactionFilter()"


class ColorFormatter(logging.Formatter):
    """
    Додає кольори до рівнів логування для виводу в термінал.
    Працює як звичайний Formatter, але підміняє record.levelname.
    """

    RESET = "\033[0m"
    COLORS = {
        "DEBUG": "\033[36m",  # cyan
        "INFO": "\033[32m",  # green
        "WARNING": "\033[33m",  # yellow
        "ERROR": "\033[31m",  # red
        "CRITICAL": "\033[35m",  # magenta
    }

    def format(self, record: logging.LogRecord) -> str:
        original_levelname = record.levelname
        color = self.COLORS.get(original_levelname, "")
        if color:
            record.levelname = f"{color}{original_levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original_levelname


def setup_logging(default_level: int = logging.INFO) -> None:
    """
    Налаштовує єдиний root-логгер для всієї системи.
    Викликається один раз; усі інші логгери (у тому числі uvicorn)
    використовують той самий формат і хендлери.
    """
    root_logger = logging.getLogger()
    # Якщо хендлерів немає (pytest очистив), переналаштовуємо.
    if _state.configured and root_logger.handlers:
        return

    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, default_level)
    if not isinstance(level, int):
        level = default_level

    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.addFilter(ContactRedactionFilter())
    formatter = ColorFormatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # Менше шуму від HTTP-доступів, але залишаємо помилки uvicorn
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    _state.configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name."""
    setup_logging()
    return logging.getLogger(name)
