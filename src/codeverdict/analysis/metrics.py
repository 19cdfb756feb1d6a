"""Five bucketed metric extractors feeding the detection engine.

Each extractor maps code text to one of a small set of bucket
constants. Raw measurements (densities, ratios, flags) are exposed as
separate functions so each threshold can be tested on its own.

Regexes go through ``compile_js`` and line lengths through ``js_length``,
so whitespace, word characters and lengths behave as in ECMAScript.
"""

from __future__ import annotations

import re

from codeverdict.analysis.text import (
    compile_js,
    is_comment_line,
    js_length,
    leading_whitespace,
    mean,
    non_blank_lines,
    population_stddev,
    split_lines,
)

# ── Comment density ──────────────────────────────────────

COMMENT_DENSITY_HIGH = 75
COMMENT_DENSITY_MID = 50
COMMENT_DENSITY_LOW = 20

# ── Code structure ───────────────────────────────────────

STRUCTURE_HIGH = 70
STRUCTURE_MID = 50
STRUCTURE_LOW = 30

INDENTATION_WEIGHT = 33
SPACING_WEIGHT = 33
BLOCKS_WEIGHT = 34

MAX_DISTINCT_INDENTS = 6
MIN_SPACING_MATCHES = 3

# Operator presence checks; the last two look at the end of the text.
SPACING_PATTERNS: tuple[re.Pattern[str], ...] = (
    compile_js(r"\s*=\s*"),
    compile_js(r"\s*\+\s*"),
    compile_js(r"\s*-\s*"),
    compile_js(r"\s*\*\s*"),
    compile_js(r"\{\s*\Z"),
    compile_js(r"\}\s*\Z"),
)

LOGICAL_BLOCK_RE = compile_js(
    r"function\s+\w+|const\s+\w+\s*=\s*\(|class\s+\w+"
)

# ── Naming patterns ──────────────────────────────────────

NAMING_HIGH = 65
NAMING_MID = 50
NAMING_LOW = 35

CAMEL_CASE_RE = compile_js(r"\b[a-z][a-zA-Z0-9]*\b")
DESCRIPTIVE_NAME_RE = compile_js(r"\b[a-z]{4,}[A-Z][a-z]+\b")

# ── Complexity ───────────────────────────────────────────

COMPLEXITY_HIGH = 70
COMPLEXITY_MID = 55
COMPLEXITY_LOW = 40

CONTROL_FLOW_KEYWORDS = ("if", "else", "for", "while", "switch", "case")
_CONTROL_FLOW_RES = tuple(
    compile_js(rf"\b{kw}\b") for kw in CONTROL_FLOW_KEYWORDS
)

# ── Uniformity ───────────────────────────────────────────

UNIFORMITY_HIGH = 75
UNIFORMITY_MID = 55
UNIFORMITY_LOW = 40


def comment_density_percent(code: str) -> float:
    """Share of non-blank lines that are comments, in percent."""
    lines = split_lines(code)
    comment_lines = sum(1 for line in lines if is_comment_line(line))
    total = len(non_blank_lines(code))
    if total == 0:
        return 0.0
    return comment_lines / total * 100


def comment_density(code: str) -> float:
    """Bucket: >30% → 75, <5% → 20, else 50; 0 for blank text."""
    if not non_blank_lines(code):
        return 0
    density = comment_density_percent(code)
    if density > 30:
        return COMMENT_DENSITY_HIGH
    if density < 5:
        return COMMENT_DENSITY_LOW
    return COMMENT_DENSITY_MID


def has_consistent_indentation(code: str) -> bool:
    """At most six distinct non-zero indentation widths."""
    indents = {
        leading_whitespace(line) for line in non_blank_lines(code)
    }
    indents.discard(0)
    return len(indents) <= MAX_DISTINCT_INDENTS


def spacing_match_count(code: str) -> int:
    return sum(1 for pattern in SPACING_PATTERNS if pattern.search(code))


def has_proper_spacing(code: str) -> bool:
    return spacing_match_count(code) >= MIN_SPACING_MATCHES


def has_logical_blocks(code: str) -> bool:
    """At least one function-like or class-like declaration."""
    return LOGICAL_BLOCK_RE.search(code) is not None


def structure_points(code: str) -> int:
    points = 0
    if has_consistent_indentation(code):
        points += INDENTATION_WEIGHT
    if has_proper_spacing(code):
        points += SPACING_WEIGHT
    if has_logical_blocks(code):
        points += BLOCKS_WEIGHT
    return points


def code_structure_score(code: str) -> float:
    """Bucket: >80 points → 70, <40 → 30, else 50."""
    points = structure_points(code)
    if points > 80:
        return STRUCTURE_HIGH
    if points < 40:
        return STRUCTURE_LOW
    return STRUCTURE_MID


def descriptive_name_ratio(code: str) -> float:
    """Descriptive identifiers per lowercase-leading identifier, capped at 100."""
    camel = len(CAMEL_CASE_RE.findall(code))
    descriptive = len(DESCRIPTIVE_NAME_RE.findall(code))
    return min(descriptive / max(camel, 1) * 100, 100)


def naming_pattern_score(code: str) -> float:
    """Bucket: >40 → 65, <10 → 35, else 50."""
    ratio = descriptive_name_ratio(code)
    if ratio > 40:
        return NAMING_HIGH
    if ratio < 10:
        return NAMING_LOW
    return NAMING_MID


def control_flow_count(code: str) -> int:
    """Whole-word occurrences of the control-flow keywords."""
    return sum(len(regex.findall(code)) for regex in _CONTROL_FLOW_RES)


def complexity_score(code: str) -> float:
    """Bucket on average line length and control-flow density."""
    lines = non_blank_lines(code)
    if not lines:
        return COMPLEXITY_MID
    avg_line_length = mean([js_length(line) for line in lines])
    ratio = control_flow_count(code) / len(lines)
    if avg_line_length > 80 and ratio > 0.2:
        return COMPLEXITY_HIGH
    if avg_line_length < 30 and ratio < 0.1:
        return COMPLEXITY_LOW
    return COMPLEXITY_MID


def line_length_stddev(code: str) -> float | None:
    """Population stddev of non-blank line lengths; None if none."""
    lines = non_blank_lines(code)
    if not lines:
        return None
    return population_stddev([js_length(line) for line in lines])


def uniformity_score(code: str) -> float:
    """Bucket: stddev <20 → 75, >50 → 40, else 55."""
    spread = line_length_stddev(code)
    if spread is None:
        return UNIFORMITY_MID
    if spread < 20:
        return UNIFORMITY_HIGH
    if spread > 50:
        return UNIFORMITY_LOW
    return UNIFORMITY_MID
