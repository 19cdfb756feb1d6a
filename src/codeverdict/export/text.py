"""Plain-text summary for terminal output."""

from __future__ import annotations

from codeverdict.analysis.schemas import AnalysisResult
from codeverdict.constants import likelihood_band


def export_text(result: AnalysisResult) -> str:
    """Short human-readable verdict, one finding per line."""
    band = likelihood_band(result.ai_probability)
    lines = [
        f"{result.file_name or '<stdin>'} ({result.language})",
        f"  AI probability: {result.ai_probability:.2f}% [{band}]",
        f"  Confidence:     {result.confidence_score:.2f}%",
    ]
    if result.patterns:
        lines.append("  Patterns:")
        lines.extend(
            f"    [{p.severity}] {p.pattern_name} ({p.pattern_type})"
            for p in result.patterns
        )
    if result.suggestions:
        lines.append("  Suggestions:")
        lines.extend(
            f"    [{s.priority}] {s.title}" for s in result.suggestions
        )
    return "\n".join(lines)
