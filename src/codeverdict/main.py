"""FastAPI application with lifespan startup."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from codeverdict import __version__
from codeverdict.api.routes import analyze, health
from codeverdict.api.schemas import APIResponse
from codeverdict.config import Settings
from codeverdict.logger import AnalysisLogger
from codeverdict.logging_config import setup_logging

_settings = Settings()
setup_logging(_settings.effective_log_level)

_logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = _settings

    app.state.settings = settings
    app.state.logger = AnalysisLogger(
        log_dir=settings.log_dir, level=settings.effective_log_level
    )

    if not settings.api_key:
        _logger.warning(
            "event=no_api_key action=all_endpoints_public"
        )

    yield


app = FastAPI(
    title="codeverdict",
    description=(
        "Heuristic AI-authorship scoring, pattern detection"
        " and suggestions for source code"
    ),
    version=__version__,
    openapi_url="/api/openapi.json",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_origin_list,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "X-API-Key"],
    allow_credentials=False,
)


@app.exception_handler(HTTPException)
async def _http_error(
    request: Request, exc: HTTPException
) -> JSONResponse:
    """Wrap HTTP errors in the standard response envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content=APIResponse(
            success=False, error=str(exc.detail)
        ).model_dump(),
        headers=exc.headers,
    )


app.include_router(health.router)
app.include_router(analyze.router)
