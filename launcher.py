"""Application launcher for the fullname HTTP API."""
from __future__ import annotations

import argparse
import os
import sys
from typing import Optional

import uvicorn

from alternatename.shared.logging import get_logger, setup_logging


logger = get_logger(__name__)


def run_app(
    host: str = "0.0.0.0",
    port: int = 8000,
    reload: bool = False,
) -> None:
    """
    Запускає FastAPI-сервер (alternatename.api.http.server:app) через uvicorn.
    """
    setup_logging()

    logger.info("Starting API server on %s:%d", host, port)
    uvicorn.run(
        "alternatename.api.http.server:app",
        host=host,
        port=port,
        reload=reload,
        # Використовуємо наше глобальне налаштування logging,
        # uvicorn не перестворює власні хендлери/форматери
        log_config=None,
        timeout_keep_alive=5,
    )


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the launcher CLI."""
    parser = argparse.ArgumentParser(
        description="Запуск FastAPI-сервера для відображення імен.",
    )
    parser.add_argument(
        "--host",
        default=os.getenv("APP_HOST", "0.0.0.0"),
        help="Хост для HTTP-сервера (за замовчуванням APP_HOST або 0.0.0.0).",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("APP_PORT", os.getenv("PORT", "8000"))),
        help="Порт для HTTP-сервера (APP_PORT, PORT або 8000).",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        default=os.getenv("APP_RELOAD", "false").lower() == "true",
        help="Увімкнути авто-перезапуск uvicorn (тільки для девелопмента).",
    )

    args = parser.parse_args(argv if argv is not None else sys.argv[1:])
    run_app(host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
