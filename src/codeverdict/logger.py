"""Structured JSON logger for analysis requests and errors."""

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

from codeverdict.constants import ERROR_TRUNCATION_CHARS
from codeverdict.logging_config import LOG_DATEFMT, LOG_FORMAT

__all__ = ["AnalysisLogger", "LOG_FORMAT", "LOG_DATEFMT"]


class AnalysisLogger:
    """Structured JSON-lines logger with request_id correlation."""

    def __init__(self, log_dir: Path, level: str = "INFO") -> None:
        self._log_dir = log_dir
        self._log_dir.mkdir(parents=True, exist_ok=True)
        self._logger = logging.getLogger("codeverdict.requests")
        self._logger.setLevel(getattr(logging, level.upper()))

        if not self._logger.handlers:
            handler = logging.FileHandler(log_dir / "analysis.log")
            handler.setFormatter(logging.Formatter("%(message)s"))
            self._logger.addHandler(handler)

    def log_analysis(
        self,
        request_id: str,
        language: str,
        file_name: str,
        code_chars: int,
        ai_probability: float,
        pattern_count: int,
        suggestion_count: int,
        duration_ms: float,
    ) -> None:
        self._logger.info(
            json.dumps({
                "type": "analysis",
                "timestamp": datetime.now(UTC).isoformat(),
                "request_id": request_id,
                "language": language,
                "file_name": file_name[:ERROR_TRUNCATION_CHARS],
                "code_chars": code_chars,
                "ai_probability": ai_probability,
                "pattern_count": pattern_count,
                "suggestion_count": suggestion_count,
                "duration_ms": duration_ms,
            })
        )

    def log_error(
        self,
        request_id: str,
        component: str,
        error: str,
    ) -> None:
        self._logger.error(
            json.dumps({
                "type": "error",
                "timestamp": datetime.now(UTC).isoformat(),
                "request_id": request_id,
                "component": component,
                "error": error[:ERROR_TRUNCATION_CHARS],
            })
        )
