"""Tests for the analysis coordinator."""

from __future__ import annotations

from codeverdict.analysis.detection import detection_engine
from codeverdict.analysis.patterns import pattern_analyzer
from codeverdict.analysis.schemas import CodeSubmission
from codeverdict.analysis.suggestions import (
    AVOID_EVAL,
    PREFER_CONST_LET,
    suggestion_generator,
)
from codeverdict.constants import PatternType
from codeverdict.services.analysis_service import (
    analyze_code,
    analyze_submission,
)
from tests.conftest import make_long_function


class _CountingGenerator:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def generate_suggestions(self, code: str, language: str) -> list:
        self.calls.append((code, language))
        return []


class TestAnalyzeCode:
    def test_merges_engine_outputs(self, eval_snippet: str) -> None:
        result = analyze_code(eval_snippet, "javascript", "app.js")
        detection = detection_engine.analyze_code(eval_snippet, "javascript")
        assert result.ai_probability == detection.ai_probability
        assert result.confidence_score == detection.confidence_score
        assert result.detection_method == "hybrid-analysis"
        assert result.analysis_details == detection.analysis_details
        assert result.patterns == pattern_analyzer.detect_patterns(
            eval_snippet, "javascript"
        )
        assert result.suggestions == [AVOID_EVAL]

    def test_language_and_file_name_pass_through(self) -> None:
        result = analyze_code("x = 1", "rust", "lib.rs")
        assert result.language == "rust"
        assert result.file_name == "lib.rs"

    def test_empty_input(self) -> None:
        result = analyze_code("", "javascript")
        assert result.ai_probability == 36.5
        assert result.confidence_score == 69.63
        assert result.patterns == []
        assert result.suggestions == []
        assert result.file_name == ""

    def test_idempotent(self) -> None:
        code = make_long_function(60) + "\nvar x=eval(y);"
        assert analyze_code(code, "javascript") == analyze_code(
            code, "javascript"
        )

    def test_pattern_groups_in_order(self) -> None:
        code = "// a\n// b\n" + make_long_function(60) + "\nx=eval(y)"
        result = analyze_code(code, "javascript")
        types = [p.pattern_type for p in result.patterns]
        order = [
            PatternType.AI_INDICATOR,
            PatternType.STYLE,
            PatternType.COMPLEXITY,
            PatternType.SECURITY,
        ]
        assert types == sorted(types, key=order.index)

    def test_each_engine_runs_once_on_raw_code(self) -> None:
        generator = _CountingGenerator()
        code = "  raw\r\n\tcode  "
        analyze_code(code, "go", generator=generator)  # type: ignore[arg-type]
        assert generator.calls == [(code, "go")]


class TestAnalyzeSubmission:
    def test_uses_submission_fields(self, var_snippet: str) -> None:
        submission = CodeSubmission(
            code=var_snippet, language="javascript", file_name="a.js"
        )
        result = analyze_submission(submission)
        assert result.file_name == "a.js"
        assert result.suggestions == [PREFER_CONST_LET]
        assert result.suggestions == suggestion_generator.generate_suggestions(
            var_snippet, "javascript"
        )
