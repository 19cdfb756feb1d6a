"""JSON export: structured envelope."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Any

from codeverdict.analysis.schemas import AnalysisResult
from codeverdict.constants import likelihood_band


def export_json(result: AnalysisResult) -> str:
    """Export a result as structured JSON."""
    payload: dict[str, Any] = {
        "generated_at": datetime.now(UTC).isoformat(),
        "file_name": result.file_name,
        "language": result.language,
        "verdict": {
            "ai_probability": result.ai_probability,
            "confidence_score": result.confidence_score,
            "likelihood": str(likelihood_band(result.ai_probability)),
            "detection_method": result.detection_method,
        },
        "analysis_details": result.analysis_details.model_dump(),
        "pattern_count": len(result.patterns),
        "patterns": [
            p.model_dump(mode="json") for p in result.patterns
        ],
        "suggestion_count": len(result.suggestions),
        "suggestions": [
            s.model_dump(mode="json") for s in result.suggestions
        ],
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)
