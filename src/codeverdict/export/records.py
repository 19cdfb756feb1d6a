"""Flatten an analysis result into the row shapes of the result store.

The store keeps four record kinds keyed by a submission id:
``code_submissions``, ``detection_results``, ``code_patterns`` and
``developer_suggestions``. Storage itself happens elsewhere; these
helpers only produce JSON-compatible rows.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeAlias

from codeverdict.analysis.schemas import (
    AnalysisResult,
    CodePattern,
    CodeSubmission,
    DeveloperSuggestion,
)

Row: TypeAlias = dict[str, Any]


@dataclass(frozen=True)
class ResultRecords:
    """Rows derived from one :class:`AnalysisResult`."""

    detection_result: Row
    code_patterns: list[Row] = field(default_factory=lambda: list[Row]())
    developer_suggestions: list[Row] = field(
        default_factory=lambda: list[Row]()
    )


def submission_record(submission: CodeSubmission, user_id: str) -> Row:
    """Row for ``code_submissions``; the store assigns the id."""
    return {
        "user_id": user_id,
        "code_content": submission.code,
        "language": submission.language,
        "file_name": submission.file_name,
    }


def to_records(result: AnalysisResult, submission_id: str) -> ResultRecords:
    """Split ``result`` into detection, pattern and suggestion rows."""
    return ResultRecords(
        detection_result={
            "submission_id": submission_id,
            "ai_probability": result.ai_probability,
            "detection_method": result.detection_method,
            "confidence_score": result.confidence_score,
            "analysis_details": result.analysis_details.model_dump(),
        },
        code_patterns=[
            _pattern_row(p, submission_id) for p in result.patterns
        ],
        developer_suggestions=[
            _suggestion_row(s, submission_id) for s in result.suggestions
        ],
    )


def _pattern_row(pattern: CodePattern, submission_id: str) -> Row:
    return {
        "submission_id": submission_id,
        "pattern_type": str(pattern.pattern_type),
        "pattern_name": pattern.pattern_name,
        "severity": str(pattern.severity),
        "description": pattern.description,
        "line_numbers": list(pattern.line_numbers),
    }


def _suggestion_row(
    suggestion: DeveloperSuggestion, submission_id: str
) -> Row:
    return {
        "submission_id": submission_id,
        "suggestion_type": str(suggestion.suggestion_type),
        "title": suggestion.title,
        "description": suggestion.description,
        "code_snippet": suggestion.code_snippet,
        "priority": str(suggestion.priority),
        "applied": False,
    }
