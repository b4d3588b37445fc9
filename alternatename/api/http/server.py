"""FastAPI HTTP server exposing the fullname engine."""
from __future__ import annotations

import time
from typing import Any, Dict, Optional
from uuid import uuid4

from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from alternatename.domain.fullname.language import get_language_pack, placeholders_hint
from alternatename.domain.fullname.orchestrator import (
    FullnameConfig,
    preview_template,
    resolve_fullname,
)
from alternatename.infra.config.settings import settings
from alternatename.shared.errors import ConfigurationError
from alternatename.shared.logging import get_logger, setup_logging


setup_logging()
logger = get_logger(__name__)

app = FastAPI(title="Alternate Name Display")

# CORS для фронтенду / зовнішніх клієнтів
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    """Log HTTP requests with timing."""
    request_id = request.headers.get("X-Request-ID") or str(uuid4())
    request.state.request_id = request_id
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s -> %s (%.1f ms) request_id=%s",
        request.method, request.url.path, response.status_code, elapsed_ms, request_id,
    )
    response.headers["X-Request-ID"] = request_id
    return response


class FullnameRequest(BaseModel):
    record: Dict[str, Optional[Any]]
    override: bool = False
    options: Dict[str, Any] = Field(default_factory=dict)
    config: Dict[str, Any] = Field(default_factory=dict)


class FullnameResponse(BaseModel):
    fullname: str
    source: str
    template: Optional[str] = None
    stage: str


class PreviewRequest(BaseModel):
    template: str
    record: Dict[str, Optional[Any]] = Field(default_factory=dict)


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(_request: Request, exc: ConfigurationError) -> JSONResponse:
    """Invalid per-call configuration is a client error."""
    logger.warning("Rejected fullname config: %s", exc)
    return JSONResponse(status_code=400, content={"detail": str(exc), "code": exc.code})


@app.get("/healthz")
async def healthz() -> Dict[str, str]:
    """Basic health-check endpoint."""
    return {"status": "ok"}


@app.post("/fullname", response_model=FullnameResponse)
async def fullname(req: FullnameRequest) -> FullnameResponse:
    """Render the display name of one person record."""
    config = FullnameConfig.from_mapping(req.config, base=FullnameConfig.from_settings(settings))
    result = resolve_fullname(req.record, override=req.override, options=req.options, config=config)
    return FullnameResponse(
        fullname=result.text,
        source=result.source.value,
        template=result.template,
        stage=result.stage.value,
    )


@app.post("/templates/preview")
async def templates_preview(req: PreviewRequest) -> Dict[str, Any]:
    """Show how one template is normalized and rendered."""
    return preview_template(req.template, req.record)


@app.get("/settings")
async def describe_settings(lang: str = Query("en")) -> Dict[str, Any]:
    """Localized description of the two fullname settings and their defaults."""
    pack = get_language_pack(lang)
    hint = placeholders_hint()
    return {
        "language": pack.code,
        "title": pack.get_string("settingspagetitle"),
        "settings": [
            {
                "name": "fullnamedisplay_template",
                "label": pack.get_string("setting_fullname_label"),
                "description": pack.get_string("setting_fullname_desc", placeholders=hint),
                "default": settings.fullname_display_template,
            },
            {
                "name": "alternativefullname_template",
                "label": pack.get_string("setting_alternative_label"),
                "description": pack.get_string("setting_alternative_desc", placeholders=hint),
                "default": settings.alternative_fullname_template,
            },
        ],
    }
