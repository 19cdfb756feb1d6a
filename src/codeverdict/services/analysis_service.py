"""Analysis coordinator: runs the three engines and merges their output."""

from __future__ import annotations

import logging

from codeverdict.analysis.detection import DetectionEngine, detection_engine
from codeverdict.analysis.patterns import PatternAnalyzer, pattern_analyzer
from codeverdict.analysis.schemas import AnalysisResult, CodeSubmission
from codeverdict.analysis.suggestions import (
    SuggestionGenerator,
    suggestion_generator,
)

logger = logging.getLogger(__name__)


def analyze_code(
    code: str,
    language: str,
    file_name: str = "",
    *,
    detector: DetectionEngine = detection_engine,
    analyzer: PatternAnalyzer = pattern_analyzer,
    generator: SuggestionGenerator = suggestion_generator,
) -> AnalysisResult:
    """Analyze one code submission.

    Each engine runs exactly once on the unmodified ``code``.
    ``language`` and ``file_name`` are carried through to the result
    untouched; no rule depends on them.
    """
    detection = detector.analyze_code(code, language)
    patterns = analyzer.detect_patterns(code, language)
    suggestions = generator.generate_suggestions(code, language)

    logger.debug(
        "event=analysis_complete file=%s language=%s chars=%d "
        "probability=%.2f patterns=%d suggestions=%d",
        file_name or "-",
        language,
        len(code),
        detection.ai_probability,
        len(patterns),
        len(suggestions),
    )

    return AnalysisResult(
        ai_probability=detection.ai_probability,
        confidence_score=detection.confidence_score,
        detection_method=detection.detection_method,
        analysis_details=detection.analysis_details,
        patterns=patterns,
        suggestions=suggestions,
        language=language,
        file_name=file_name,
    )


def analyze_submission(submission: CodeSubmission) -> AnalysisResult:
    """Analyze a :class:`CodeSubmission` record."""
    return analyze_code(
        submission.code,
        submission.language,
        submission.file_name,
    )
