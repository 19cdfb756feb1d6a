"""Heuristic engines: detection, pattern analysis, suggestions."""

from codeverdict.analysis.detection import DetectionEngine, detection_engine
from codeverdict.analysis.patterns import PatternAnalyzer, pattern_analyzer
from codeverdict.analysis.schemas import (
    AnalysisResult,
    CodePattern,
    CodeSubmission,
    DetectionResult,
    DeveloperSuggestion,
    MetricBundle,
)
from codeverdict.analysis.suggestions import (
    SuggestionGenerator,
    suggestion_generator,
)

__all__ = [
    "AnalysisResult",
    "CodePattern",
    "CodeSubmission",
    "DetectionEngine",
    "DetectionResult",
    "DeveloperSuggestion",
    "MetricBundle",
    "PatternAnalyzer",
    "SuggestionGenerator",
    "detection_engine",
    "pattern_analyzer",
    "suggestion_generator",
]
