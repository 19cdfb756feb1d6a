"""Request/response schemas for the HTTP API."""

from typing import Any

from pydantic import BaseModel, Field

from codeverdict.constants import DEFAULT_LANGUAGE


class APIResponse(BaseModel):
    """Standard response envelope for all API endpoints."""

    success: bool
    data: Any | None = None
    error: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class AnalyzeRequest(BaseModel):
    """Request body for POST /api/analyze.

    ``code`` may be empty; its upper bound comes from
    ``Settings.max_code_chars`` and is checked by the route.
    """

    code: str
    language: str = Field(default=DEFAULT_LANGUAGE, min_length=1, max_length=50)
    file_name: str = Field(default="", max_length=255)
