"""Code analysis route."""

from __future__ import annotations

import asyncio
import logging
import time
import uuid

from fastapi import APIRouter, Depends

from codeverdict.api.dependencies import (
    get_request_logger,
    get_settings,
    require_api_key,
)
from codeverdict.api.schemas import AnalyzeRequest, APIResponse
from codeverdict.config import Settings
from codeverdict.constants import likelihood_band
from codeverdict.logger import AnalysisLogger
from codeverdict.services.analysis_service import analyze_code

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["analysis"],
    dependencies=[Depends(require_api_key)],
)


@router.post("/analyze")
async def analyze(
    body: AnalyzeRequest,
    settings: Settings = Depends(get_settings),
    request_logger: AnalysisLogger = Depends(get_request_logger),
) -> APIResponse:
    """Score a code snippet and list its patterns and suggestions."""
    if len(body.code) > settings.max_code_chars:
        return APIResponse(
            success=False,
            error=(
                f"Code exceeds {settings.max_code_chars} characters"
            ),
        )

    request_id = uuid.uuid4().hex[:12]
    start = time.perf_counter()
    # CPU-bound regex scans run off the event loop
    try:
        result = await asyncio.to_thread(
            analyze_code, body.code, body.language, body.file_name
        )
    except Exception as exc:  # noqa: BLE001
        logger.exception("event=analyze_failed request_id=%s", request_id)
        request_logger.log_error(request_id, "analysis", str(exc))
        return APIResponse(
            success=False,
            error="Analysis failed",
            metadata={"request_id": request_id},
        )
    duration_ms = (time.perf_counter() - start) * 1000

    request_logger.log_analysis(
        request_id=request_id,
        language=body.language,
        file_name=body.file_name,
        code_chars=len(body.code),
        ai_probability=result.ai_probability,
        pattern_count=len(result.patterns),
        suggestion_count=len(result.suggestions),
        duration_ms=round(duration_ms, 2),
    )
    logger.info(
        "event=analyze request_id=%s probability=%.2f duration_ms=%.1f",
        request_id,
        result.ai_probability,
        duration_ms,
    )

    return APIResponse(
        success=True,
        data=result.model_dump(mode="json"),
        metadata={
            "request_id": request_id,
            "likelihood": str(likelihood_band(result.ai_probability)),
        },
    )
