"""Detection engine: combine bucketed metrics into an AI likelihood."""

from __future__ import annotations

import logging

from codeverdict.analysis import metrics
from codeverdict.analysis.schemas import DetectionResult, MetricBundle
from codeverdict.analysis.text import (
    clamp,
    population_stddev,
    round_half_up,
)
from codeverdict.constants import (
    CONFIDENCE_CEILING,
    CONFIDENCE_FLOOR,
    CONFIDENCE_SPREAD_PENALTY,
    DETECTION_METHOD,
    PROBABILITY_CEILING,
    PROBABILITY_FLOOR,
    MetricWeight,
)

logger = logging.getLogger(__name__)


def extract_metrics(code: str) -> MetricBundle:
    """Run all five extractors over ``code``."""
    return MetricBundle(
        comment_density=metrics.comment_density(code),
        code_structure_score=metrics.code_structure_score(code),
        naming_pattern_score=metrics.naming_pattern_score(code),
        complexity_score=metrics.complexity_score(code),
        uniformity_score=metrics.uniformity_score(code),
    )


def ai_probability(bundle: MetricBundle) -> float:
    """Weighted sum of the buckets, clamped to [0, 100]."""
    probability = (
        bundle.comment_density * MetricWeight.COMMENT_DENSITY
        + bundle.code_structure_score * MetricWeight.CODE_STRUCTURE
        + bundle.naming_pattern_score * MetricWeight.NAMING_PATTERN
        + bundle.complexity_score * MetricWeight.COMPLEXITY
        + bundle.uniformity_score * MetricWeight.UNIFORMITY
    )
    return clamp(probability, PROBABILITY_FLOOR, PROBABILITY_CEILING)


def confidence(bundle: MetricBundle) -> float:
    """High when the five buckets agree, floored at 50."""
    spread = population_stddev(bundle.bucket_values())
    return clamp(
        100 - spread * CONFIDENCE_SPREAD_PENALTY,
        CONFIDENCE_FLOOR,
        CONFIDENCE_CEILING,
    )


class DetectionEngine:
    """Stateless scorer; one shared instance is enough."""

    def analyze_code(self, code: str, language: str) -> DetectionResult:
        """Score ``code``. ``language`` is accepted but not consulted."""
        bundle = extract_metrics(code)
        probability = round_half_up(ai_probability(bundle))
        score = round_half_up(confidence(bundle))
        logger.debug(
            "event=detection language=%s probability=%.2f confidence=%.2f",
            language,
            probability,
            score,
        )
        return DetectionResult(
            ai_probability=probability,
            detection_method=DETECTION_METHOD,
            confidence_score=score,
            analysis_details=MetricBundle(
                **{
                    name: round_half_up(value)
                    for name, value in bundle.model_dump().items()
                }
            ),
        )


detection_engine = DetectionEngine()
