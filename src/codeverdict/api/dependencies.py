"""FastAPI dependencies for app-level singletons and API key checks."""

from __future__ import annotations

import hmac

from fastapi import Depends, HTTPException, Request

from codeverdict.config import Settings
from codeverdict.logger import AnalysisLogger

API_KEY_HEADER = "X-API-Key"


def get_settings(request: Request) -> Settings:
    """Settings stored on app.state during lifespan startup."""
    return request.app.state.settings


def get_request_logger(request: Request) -> AnalysisLogger:
    """Structured request logger stored on app.state."""
    return request.app.state.logger


def require_api_key(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> None:
    """Reject the request unless X-API-Key matches ``settings.api_key``.

    With no key configured every request passes.
    """
    if not settings.api_key:
        return
    provided = request.headers.get(API_KEY_HEADER, "")
    if not hmac.compare_digest(provided, settings.api_key):
        raise HTTPException(
            status_code=401, detail="Invalid or missing API key"
        )
