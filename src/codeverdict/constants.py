"""Shared constants: single source of truth for cross-module values.

All magic strings and numbers that appear in 2+ files belong here.
StrEnum members are str-compatible, so downstream code (JSON rows,
API payloads) serializes them as their literal values.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import PurePath

# ── String Enums ─────────────────────────────────────────


class PatternType(StrEnum):
    """Families of patterns reported by the pattern analyzer."""

    AI_INDICATOR = "ai-indicator"
    STYLE = "style"
    COMPLEXITY = "complexity"
    SECURITY = "security"


class Severity(StrEnum):
    """Severity attached to a detected pattern."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class SuggestionType(StrEnum):
    """Families of developer suggestions."""

    REFACTOR = "refactor"
    SECURITY = "security"
    PERFORMANCE = "performance"
    STYLE = "style"


class Priority(StrEnum):
    """Priority attached to a developer suggestion."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ReportFormat(StrEnum):
    """Supported result export formats."""

    TEXT = "text"
    JSON = "json"
    MARKDOWN = "markdown"


class LikelihoodBand(StrEnum):
    """Qualitative label for an AI probability."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# ── Detection ────────────────────────────────────────────

DETECTION_METHOD = "hybrid-analysis"


class MetricWeight:
    """Weights of each bucketed metric in the AI probability."""

    COMMENT_DENSITY = 0.15
    CODE_STRUCTURE = 0.25
    NAMING_PATTERN = 0.20
    COMPLEXITY = 0.20
    UNIFORMITY = 0.20


PROBABILITY_FLOOR = 0.0
PROBABILITY_CEILING = 100.0
CONFIDENCE_FLOOR = 50.0
CONFIDENCE_CEILING = 100.0
CONFIDENCE_SPREAD_PENALTY = 1.5  # per point of bucket stddev

# Likelihood bands (inclusive lower bounds)
LIKELIHOOD_HIGH_THRESHOLD = 70.0
LIKELIHOOD_MEDIUM_THRESHOLD = 40.0

# ── Text Rules ───────────────────────────────────────────

LONG_LINE_CHARS = 120
LONG_FUNCTION_LINES = 50

# ── Language Mapping ─────────────────────────────────────

DEFAULT_LANGUAGE = "javascript"
UNKNOWN_LANGUAGE = "text"

# File extension → language tag (metadata only, never changes a rule)
EXTENSION_MAP: dict[str, str] = {
    # Python
    ".py": "python",
    ".pyi": "python",
    # JavaScript
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".jsx": "javascript",
    # TypeScript
    ".ts": "typescript",
    ".tsx": "typescript",
    # Java
    ".java": "java",
    # Go
    ".go": "go",
    # Rust
    ".rs": "rust",
    # C / C++
    ".c": "c",
    ".h": "c",
    ".cpp": "cpp",
    ".cc": "cpp",
    ".hpp": "cpp",
    # C#
    ".cs": "csharp",
    # Ruby
    ".rb": "ruby",
    # PHP
    ".php": "php",
    # Kotlin
    ".kt": "kotlin",
    # Swift
    ".swift": "swift",
    # Shell
    ".sh": "bash",
}

# ── Misc ─────────────────────────────────────────────────

ERROR_TRUNCATION_CHARS = 200


def language_for_file(file_name: str) -> str:
    """Map a file name to a language tag via its extension."""
    suffix = PurePath(file_name).suffix.lower()
    return EXTENSION_MAP.get(suffix, UNKNOWN_LANGUAGE)


def likelihood_band(probability: float) -> LikelihoodBand:
    """Map an AI probability to high (>=70), medium (>=40) or low."""
    if probability >= LIKELIHOOD_HIGH_THRESHOLD:
        return LikelihoodBand.HIGH
    if probability >= LIKELIHOOD_MEDIUM_THRESHOLD:
        return LikelihoodBand.MEDIUM
    return LikelihoodBand.LOW
