"""Pattern analyzer: named ai-indicator, style, complexity and security patterns.

Each detector group runs independently over the full text; results are
concatenated in group order with no deduplication. Rules are generic
text patterns and do not vary with the declared language.
"""

from __future__ import annotations

import logging
import re

from codeverdict.analysis.schemas import CodePattern
from codeverdict.analysis.text import (
    BLOCK_COMMENT_PREFIXES,
    compile_js,
    is_comment_line,
    js_length,
    js_trim,
    leading_whitespace,
    split_lines,
)
from codeverdict.constants import (
    LONG_FUNCTION_LINES,
    LONG_LINE_CHARS,
    PatternType,
    Severity,
)

logger = logging.getLogger(__name__)

EXCESSIVE_COMMENT_RATIO = 0.3
PERFECT_FORMATTING_MIN_LINES = 10
DESCRIPTIVE_DECLARATION_LIMIT = 5
DEEP_NESTING_LIMIT = 3
MANY_FUNCTIONS_LIMIT = 10

DESCRIPTIVE_DECLARATION_RE = compile_js(
    r"(?:const|let|var)\s+([a-z][a-zA-Z]{8,})"
)
INCONSISTENT_SPACING_RE = compile_js(
    r"\w+\+\w+|\w+\-\w+|\w+=\w+"
)
NESTED_BLOCK_RE = compile_js(
    r"\{\s*if|if.*\{\s*if|for.*\{\s*for"
)
FUNCTION_DECLARATION_RE = compile_js(
    r"function\s+\w+|const\s+\w+\s*=\s*\("
)
HARDCODED_SECRET_RE = compile_js(
    r"""(?:password|secret|apikey|token)\s*=\s*['"][^'"]+['"]""",
    re.IGNORECASE,
)
SQL_CONCATENATION_RE = compile_js(
    r"""['"]\s*\+\s*\w+\s*\+\s*['"].*(?:SELECT|INSERT|UPDATE|DELETE)""",
    re.IGNORECASE,
)
EVAL_CALL_RE = compile_js(r"eval\s*\(")


# ── Predicates ───────────────────────────────────────────


def comment_positions(lines: list[str]) -> list[int]:
    """Positional indices 1..n for the n ``//``/``/*`` comment lines.

    These are ordinals, not the comments' source line numbers.
    """
    count = sum(
        1 for line in lines if is_comment_line(line, BLOCK_COMMENT_PREFIXES)
    )
    return list(range(1, count + 1))


def has_even_indentation(lines: list[str]) -> bool:
    """Every non-blank line is indented by an even width."""
    return all(
        leading_whitespace(line) % 2 == 0
        for line in lines
        if js_trim(line)
    )


def descriptive_declaration_count(code: str) -> int:
    return len(DESCRIPTIVE_DECLARATION_RE.findall(code))


def long_line_numbers(lines: list[str]) -> list[int]:
    """1-based indices of lines longer than 120 characters."""
    return [
        idx
        for idx, line in enumerate(lines, 1)
        if js_length(line) > LONG_LINE_CHARS
    ]


def has_unspaced_operator(code: str) -> bool:
    return INCONSISTENT_SPACING_RE.search(code) is not None


def nested_block_count(code: str) -> int:
    return len(NESTED_BLOCK_RE.findall(code))


def function_declaration_count(code: str) -> int:
    return len(FUNCTION_DECLARATION_RE.findall(code))


def long_function_lines(lines: list[str]) -> list[int]:
    """Line numbers covered by functions longer than 50 lines.

    Brace-balance scan. A header seen while already inside a function
    restarts tracking from that header, so nested bodies are attributed
    to the innermost header only. Each reported range runs from the
    header line to one past the closing line.
    """
    line_numbers: list[int] = []
    in_function = False
    start = 0
    balance = 0

    for idx, line in enumerate(lines):
        stripped = js_trim(line)

        if FUNCTION_DECLARATION_RE.search(stripped):
            in_function = True
            start = idx + 1
            balance = 0

        if not in_function:
            continue

        balance += line.count("{") - line.count("}")
        if balance == 0 and "}" in stripped:
            if idx - start + 2 > LONG_FUNCTION_LINES:
                line_numbers.extend(range(start, idx + 2))
            in_function = False

    return line_numbers


def has_hardcoded_secret(code: str) -> bool:
    return HARDCODED_SECRET_RE.search(code) is not None


def has_sql_concatenation(code: str) -> bool:
    return SQL_CONCATENATION_RE.search(code) is not None


def has_eval_call(code: str) -> bool:
    return EVAL_CALL_RE.search(code) is not None


# ── Detector groups ──────────────────────────────────────


def detect_ai_patterns(code: str) -> list[CodePattern]:
    patterns: list[CodePattern] = []
    lines = split_lines(code)

    positions = comment_positions(lines)
    if len(positions) > len(lines) * EXCESSIVE_COMMENT_RATIO:
        patterns.append(
            CodePattern(
                pattern_type=PatternType.AI_INDICATOR,
                pattern_name="Excessive Comments",
                severity=Severity.MEDIUM,
                description=(
                    "High comment density may indicate AI-generated code"
                ),
                line_numbers=positions,
            )
        )

    if (
        has_even_indentation(lines)
        and len(lines) > PERFECT_FORMATTING_MIN_LINES
    ):
        patterns.append(
            CodePattern(
                pattern_type=PatternType.AI_INDICATOR,
                pattern_name="Perfect Formatting",
                severity=Severity.LOW,
                description=(
                    "Consistently perfect formatting across all lines"
                ),
            )
        )

    if descriptive_declaration_count(code) > DESCRIPTIVE_DECLARATION_LIMIT:
        patterns.append(
            CodePattern(
                pattern_type=PatternType.AI_INDICATOR,
                pattern_name="Overly Descriptive Names",
                severity=Severity.LOW,
                description=(
                    "Variable names are unusually descriptive and verbose"
                ),
            )
        )

    return patterns


def detect_style_patterns(code: str) -> list[CodePattern]:
    patterns: list[CodePattern] = []

    long_lines = long_line_numbers(split_lines(code))
    if long_lines:
        patterns.append(
            CodePattern(
                pattern_type=PatternType.STYLE,
                pattern_name="Long Lines",
                severity=Severity.LOW,
                description=(
                    "Lines exceed recommended length of 120 characters"
                ),
                line_numbers=long_lines,
            )
        )

    if has_unspaced_operator(code):
        patterns.append(
            CodePattern(
                pattern_type=PatternType.STYLE,
                pattern_name="Inconsistent Spacing",
                severity=Severity.LOW,
                description="Operators lack proper spacing",
            )
        )

    return patterns


def detect_complexity_patterns(code: str) -> list[CodePattern]:
    patterns: list[CodePattern] = []

    if nested_block_count(code) > DEEP_NESTING_LIMIT:
        patterns.append(
            CodePattern(
                pattern_type=PatternType.COMPLEXITY,
                pattern_name="Deep Nesting",
                severity=Severity.HIGH,
                description=(
                    "Multiple levels of nested blocks increase complexity"
                ),
            )
        )

    if function_declaration_count(code) > MANY_FUNCTIONS_LIMIT:
        patterns.append(
            CodePattern(
                pattern_type=PatternType.COMPLEXITY,
                pattern_name="Many Functions",
                severity=Severity.MEDIUM,
                description=(
                    "File contains many functions, "
                    "consider splitting into modules"
                ),
            )
        )

    long_function = long_function_lines(split_lines(code))
    if long_function:
        patterns.append(
            CodePattern(
                pattern_type=PatternType.COMPLEXITY,
                pattern_name="Long Function",
                severity=Severity.MEDIUM,
                description=(
                    "Function exceeds 50 lines, consider refactoring"
                ),
                line_numbers=long_function,
            )
        )

    return patterns


def detect_security_patterns(code: str) -> list[CodePattern]:
    patterns: list[CodePattern] = []

    if has_hardcoded_secret(code):
        patterns.append(
            CodePattern(
                pattern_type=PatternType.SECURITY,
                pattern_name="Hardcoded Credentials",
                severity=Severity.HIGH,
                description="Potential hardcoded credentials detected",
            )
        )

    if has_sql_concatenation(code):
        patterns.append(
            CodePattern(
                pattern_type=PatternType.SECURITY,
                pattern_name="SQL Injection Risk",
                severity=Severity.HIGH,
                description="String concatenation in SQL queries detected",
            )
        )

    if has_eval_call(code):
        patterns.append(
            CodePattern(
                pattern_type=PatternType.SECURITY,
                pattern_name="Eval Usage",
                severity=Severity.HIGH,
                description="Use of eval() is a security risk",
            )
        )

    return patterns


class PatternAnalyzer:
    """Stateless pattern scanner; one shared instance is enough."""

    def detect_patterns(self, code: str, language: str) -> list[CodePattern]:
        patterns: list[CodePattern] = []
        patterns.extend(detect_ai_patterns(code))
        patterns.extend(detect_style_patterns(code))
        patterns.extend(detect_complexity_patterns(code))
        patterns.extend(detect_security_patterns(code))
        logger.debug(
            "event=patterns language=%s count=%d", language, len(patterns)
        )
        return patterns


pattern_analyzer = PatternAnalyzer()
