"""Pydantic models for the analysis data flow."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from codeverdict.constants import (
    DETECTION_METHOD,
    PatternType,
    Priority,
    Severity,
    SuggestionType,
)


class CodeSubmission(BaseModel):
    """Input to the coordinator; never mutated or persisted here."""

    model_config = ConfigDict(frozen=True)

    code: str
    language: str
    file_name: str = ""


class MetricBundle(BaseModel):
    """The five bucketed sub-scores behind an AI probability."""

    model_config = ConfigDict(frozen=True)

    comment_density: float
    code_structure_score: float
    naming_pattern_score: float
    complexity_score: float
    uniformity_score: float

    def bucket_values(self) -> list[float]:
        """Bucket values in canonical order."""
        return [
            self.comment_density,
            self.code_structure_score,
            self.naming_pattern_score,
            self.complexity_score,
            self.uniformity_score,
        ]


class DetectionResult(BaseModel):
    """Output of the detection engine."""

    model_config = ConfigDict(frozen=True)

    ai_probability: float = Field(ge=0, le=100)
    detection_method: str = DETECTION_METHOD
    confidence_score: float = Field(ge=50, le=100)
    analysis_details: MetricBundle


class CodePattern(BaseModel):
    """A named, severity-tagged observation about the code text.

    ``line_numbers`` semantics depend on the rule that produced it and
    are not always true source positions.
    """

    model_config = ConfigDict(frozen=True)

    pattern_type: PatternType
    pattern_name: str
    severity: Severity
    description: str
    line_numbers: list[int] = Field(
        default_factory=lambda: list[int]()
    )


class DeveloperSuggestion(BaseModel):
    """A templated improvement recommendation."""

    model_config = ConfigDict(frozen=True)

    suggestion_type: SuggestionType
    title: str
    description: str
    code_snippet: str
    priority: Priority


class AnalysisResult(BaseModel):
    """Coordinator output, one per analyzed submission."""

    ai_probability: float
    confidence_score: float
    detection_method: str = DETECTION_METHOD
    analysis_details: MetricBundle
    patterns: list[CodePattern] = Field(
        default_factory=lambda: list[CodePattern]()
    )
    suggestions: list[DeveloperSuggestion] = Field(
        default_factory=lambda: list[DeveloperSuggestion]()
    )
    language: str = ""
    file_name: str = ""
