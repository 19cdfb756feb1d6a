"""Tests for the structured request logger."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from codeverdict.logger import AnalysisLogger


def _entries(caplog: pytest.LogCaptureFixture) -> list[dict]:
    return [
        json.loads(r.getMessage())
        for r in caplog.records
        if r.name == "codeverdict.requests"
    ]


def test_log_dir_created(tmp_path: Path) -> None:
    AnalysisLogger(log_dir=tmp_path / "nested" / "logs")
    assert (tmp_path / "nested" / "logs").is_dir()


def test_log_analysis_is_json(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    request_logger = AnalysisLogger(log_dir=tmp_path)
    with caplog.at_level(logging.INFO, logger="codeverdict.requests"):
        request_logger.log_analysis(
            request_id="abc123",
            language="javascript",
            file_name="app.js",
            code_chars=31,
            ai_probability=48.25,
            pattern_count=1,
            suggestion_count=1,
            duration_ms=1.5,
        )
    (entry,) = _entries(caplog)
    assert entry["type"] == "analysis"
    assert entry["request_id"] == "abc123"
    assert entry["ai_probability"] == 48.25
    assert "timestamp" in entry


def test_log_error_truncates(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    request_logger = AnalysisLogger(log_dir=tmp_path)
    with caplog.at_level(logging.INFO, logger="codeverdict.requests"):
        request_logger.log_error("abc123", "analysis", "x" * 500)
    (entry,) = _entries(caplog)
    assert entry["type"] == "error"
    assert entry["component"] == "analysis"
    assert len(entry["error"]) == 200
