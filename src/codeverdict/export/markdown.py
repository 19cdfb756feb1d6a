"""Markdown export: a readable report with metadata header."""

from __future__ import annotations

from datetime import UTC, datetime

from codeverdict.analysis.schemas import AnalysisResult
from codeverdict.constants import likelihood_band

_METRIC_LABELS: dict[str, str] = {
    "comment_density": "Comment density",
    "code_structure_score": "Code structure",
    "naming_pattern_score": "Naming patterns",
    "complexity_score": "Complexity",
    "uniformity_score": "Uniformity",
}


def export_markdown(result: AnalysisResult) -> str:
    """Export a result as a single Markdown document."""
    parts: list[str] = []

    # Metadata header
    parts.append("---")
    parts.append(f"file: {result.file_name or 'untitled'}")
    parts.append(f"language: {result.language}")
    parts.append(f"generated: {datetime.now(UTC).isoformat()}")
    parts.append("---\n")

    band = likelihood_band(result.ai_probability)
    parts.append("# Code Analysis\n")
    parts.append(
        f"**AI probability:** {result.ai_probability:.2f}% ({band})  "
    )
    parts.append(f"**Confidence:** {result.confidence_score:.2f}%  ")
    parts.append(f"**Method:** {result.detection_method}\n")

    parts.append("## Metrics\n")
    parts.append("| Metric | Score |")
    parts.append("|---|---|")
    for name, value in result.analysis_details.model_dump().items():
        parts.append(f"| {_METRIC_LABELS.get(name, name)} | {value:g} |")
    parts.append("")

    parts.append(f"## Patterns ({len(result.patterns)})\n")
    if not result.patterns:
        parts.append("_No patterns detected._\n")
    for pattern in result.patterns:
        parts.append(
            f"- **{pattern.pattern_name}** "
            f"[{pattern.pattern_type}, {pattern.severity}]: "
            f"{pattern.description}"
        )
        if pattern.line_numbers:
            parts.append(
                f"  - lines: {_format_lines(pattern.line_numbers)}"
            )
    parts.append("")

    parts.append(f"## Suggestions ({len(result.suggestions)})\n")
    if not result.suggestions:
        parts.append("_No suggestions._\n")
    for suggestion in result.suggestions:
        parts.append(
            f"### {suggestion.title} "
            f"({suggestion.suggestion_type}, {suggestion.priority})\n"
        )
        parts.append(suggestion.description + "\n")
        parts.append("```")
        parts.append(suggestion.code_snippet)
        parts.append("```\n")

    return "\n".join(parts)


def _format_lines(line_numbers: list[int]) -> str:
    """Collapse consecutive runs: [1, 2, 3, 7] → '1-3, 7'."""
    ranges: list[str] = []
    start = prev = line_numbers[0]
    for n in line_numbers[1:]:
        if n == prev + 1:
            prev = n
            continue
        ranges.append(f"{start}-{prev}" if start != prev else str(start))
        start = prev = n
    ranges.append(f"{start}-{prev}" if start != prev else str(start))
    return ", ".join(ranges)
