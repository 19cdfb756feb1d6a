"""Suggestion generator: templated improvement advice keyed on text triggers.

Every trigger is a whole-text check; each fires at most once. Snippets
are fixed examples and never derived from the submitted code.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from typing import TypeAlias

from codeverdict.analysis.schemas import DeveloperSuggestion
from codeverdict.analysis.text import (
    compile_js,
    js_length,
    split_lines,
    utf16_units,
)
from codeverdict.constants import LONG_LINE_CHARS, Priority, SuggestionType

logger = logging.getLogger(__name__)

LARGE_FILE_CHARS = 500
REPEATED_LOOP_MIN = 3
CONDITIONAL_LIMIT = 5
DOM_QUERY_LIMIT = 3

LARGE_LOOP_BODY_RE = compile_js(
    r"for\s*\([^)]+\)\s*\{[^}]{50,}\}"
)
CONDITIONAL_OPEN_RE = compile_js(r"if\s*\(")
# Narrower than the pattern analyzer's credential rule: no ``token``.
CREDENTIAL_ASSIGNMENT_RE = compile_js(
    r"""(?:password|secret|apikey)\s*=\s*['"][^'"]+['"]""",
    re.IGNORECASE,
)
EVAL_CALL_RE = compile_js(r"eval\s*\(")
INNER_HTML_RE = compile_js(r"innerHTML\s*=")
NESTED_LOOP_RE = compile_js(
    r"for\s*\([^)]+\)\s*\{[^}]*for\s*\("
)
MAP_FILTER_RE = compile_js(r"\.map\([^)]+\)\.filter\(")
DOM_QUERY_RE = compile_js(
    r"document\.querySelector|document\.getElementById"
)
VAR_DECLARATION_RE = compile_js(r"var\s+\w+")
SHORT_FUNCTION_RE = compile_js(
    r"function\s+\w+\s*\([^)]*\)\s*\{[^}]{0,50}\}"
)

# ── Templates ────────────────────────────────────────────

EXTRACT_FUNCTIONS = DeveloperSuggestion(
    suggestion_type=SuggestionType.REFACTOR,
    title="Extract Functions",
    description=(
        "Consider breaking down large functions into smaller, "
        "reusable components for better maintainability."
    ),
    code_snippet=(
        "// Before:\n"
        "function largeFunction() {\n"
        "  // 100+ lines\n"
        "}\n"
        "\n"
        "// After:\n"
        "function mainFunction() {\n"
        "  validateInput();\n"
        "  processData();\n"
        "  formatOutput();\n"
        "}\n"
        "\n"
        "function validateInput() { ... }\n"
        "function processData() { ... }"
    ),
    priority=Priority.MEDIUM,
)

EXTRACT_REPEATED_LOGIC = DeveloperSuggestion(
    suggestion_type=SuggestionType.REFACTOR,
    title="Extract Repeated Logic",
    description=(
        "Similar code blocks detected. "
        "Consider extracting into a reusable helper function."
    ),
    code_snippet=(
        "// Extract common logic:\n"
        "function processItem(item) {\n"
        "  // Common processing logic\n"
        "  return transformedItem;\n"
        "}\n"
        "\n"
        "// Use in multiple places:\n"
        "items.forEach(item => processItem(item));"
    ),
    priority=Priority.MEDIUM,
)

SIMPLIFY_CONDITIONALS = DeveloperSuggestion(
    suggestion_type=SuggestionType.REFACTOR,
    title="Simplify Conditional Logic",
    description=(
        "Multiple conditional statements detected. "
        "Consider using strategy pattern or lookup tables."
    ),
    code_snippet=(
        "// Instead of multiple ifs:\n"
        "const handlers = {\n"
        "  'type1': handleType1,\n"
        "  'type2': handleType2,\n"
        "  'type3': handleType3\n"
        "};\n"
        "\n"
        "handlers[type]?.();"
    ),
    priority=Priority.LOW,
)

REMOVE_HARDCODED_CREDENTIALS = DeveloperSuggestion(
    suggestion_type=SuggestionType.SECURITY,
    title="Remove Hardcoded Credentials",
    description=(
        "Credentials should be stored in environment variables, "
        "not hardcoded in source code."
    ),
    code_snippet=(
        "// Instead of:\n"
        'const apiKey = "hardcoded-key";\n'
        "\n"
        "// Use:\n"
        "const apiKey = import.meta.env.VITE_API_KEY;"
    ),
    priority=Priority.HIGH,
)

AVOID_EVAL = DeveloperSuggestion(
    suggestion_type=SuggestionType.SECURITY,
    title="Avoid eval()",
    description=(
        "Using eval() is dangerous and can lead to code injection "
        "attacks. Use safer alternatives."
    ),
    code_snippet=(
        "// Instead of eval, use:\n"
        "const result = JSON.parse(jsonString);\n"
        "// or\n"
        "const fn = new Function('return ' + expression)();"
    ),
    priority=Priority.HIGH,
)

INNER_HTML_XSS = DeveloperSuggestion(
    suggestion_type=SuggestionType.SECURITY,
    title="XSS Risk with innerHTML",
    description=(
        "Using innerHTML with user input can lead to XSS attacks. "
        "Use textContent or sanitize input."
    ),
    code_snippet=(
        "// Safer approach:\n"
        "element.textContent = userInput;\n"
        "// Or use a sanitization library:\n"
        "element.innerHTML = DOMPurify.sanitize(userInput);"
    ),
    priority=Priority.HIGH,
)

OPTIMIZE_NESTED_LOOPS = DeveloperSuggestion(
    suggestion_type=SuggestionType.PERFORMANCE,
    title="Optimize Nested Loops",
    description=(
        "Nested loops can have O(n²) complexity. "
        "Consider using hash maps or other data structures."
    ),
    code_snippet=(
        "// Instead of nested loops:\n"
        "const map = new Map();\n"
        "array1.forEach(item => map.set(item.id, item));\n"
        "array2.forEach(item => {\n"
        "  const match = map.get(item.id);\n"
        "});"
    ),
    priority=Priority.MEDIUM,
)

COMBINE_ARRAY_OPERATIONS = DeveloperSuggestion(
    suggestion_type=SuggestionType.PERFORMANCE,
    title="Combine Array Operations",
    description=(
        "Chaining map and filter creates multiple iterations. "
        "Combine them for better performance."
    ),
    code_snippet=(
        "// Instead of:\n"
        "array.map(x => x * 2).filter(x => x > 10);\n"
        "\n"
        "// Use reduce:\n"
        "array.reduce((acc, x) => {\n"
        "  const doubled = x * 2;\n"
        "  if (doubled > 10) acc.push(doubled);\n"
        "  return acc;\n"
        "}, []);"
    ),
    priority=Priority.LOW,
)

CACHE_DOM_QUERIES = DeveloperSuggestion(
    suggestion_type=SuggestionType.PERFORMANCE,
    title="Cache DOM Queries",
    description=(
        "Multiple DOM queries detected. "
        "Cache references to improve performance."
    ),
    code_snippet=(
        "// Cache DOM references:\n"
        "const element = document.querySelector('.my-element');\n"
        "// Reuse the cached reference\n"
        "element.classList.add('active');"
    ),
    priority=Priority.MEDIUM,
)

PREFER_CONST_LET = DeveloperSuggestion(
    suggestion_type=SuggestionType.STYLE,
    title="Use const/let Instead of var",
    description=(
        "Modern JavaScript uses const and let for better scoping "
        "and immutability."
    ),
    code_snippet=(
        "// Instead of:\n"
        "var count = 0;\n"
        "\n"
        "// Use:\n"
        "const count = 0; // for values that won't change\n"
        "let counter = 0; // for values that will change"
    ),
    priority=Priority.LOW,
)

CONSIDER_ARROW_FUNCTIONS = DeveloperSuggestion(
    suggestion_type=SuggestionType.STYLE,
    title="Consider Arrow Functions",
    description=(
        "For simple functions, arrow functions provide cleaner syntax."
    ),
    code_snippet=(
        "// Instead of:\n"
        "function add(a, b) {\n"
        "  return a + b;\n"
        "}\n"
        "\n"
        "// Use:\n"
        "const add = (a, b) => a + b;"
    ),
    priority=Priority.LOW,
)

LINE_LENGTH = DeveloperSuggestion(
    suggestion_type=SuggestionType.STYLE,
    title="Line Length",
    description=(
        "Some lines exceed 120 characters. "
        "Break them down for better readability."
    ),
    code_snippet=(
        "// Break long lines:\n"
        "const result = veryLongFunction(\n"
        "  parameter1,\n"
        "  parameter2,\n"
        "  parameter3\n"
        ");"
    ),
    priority=Priority.LOW,
)


# ── Triggers ─────────────────────────────────────────────


def is_large_function_file(code: str) -> bool:
    return "function" in code and js_length(code) > LARGE_FILE_CHARS


def has_repeated_loops(code: str) -> bool:
    loops = LARGE_LOOP_BODY_RE.findall(utf16_units(code))
    return len(loops) >= REPEATED_LOOP_MIN


def has_many_conditionals(code: str) -> bool:
    return len(CONDITIONAL_OPEN_RE.findall(code)) > CONDITIONAL_LIMIT


def has_credential_assignment(code: str) -> bool:
    return CREDENTIAL_ASSIGNMENT_RE.search(code) is not None


def has_eval_call(code: str) -> bool:
    return EVAL_CALL_RE.search(code) is not None


def has_inner_html_assignment(code: str) -> bool:
    return INNER_HTML_RE.search(code) is not None


def has_nested_loop(code: str) -> bool:
    return NESTED_LOOP_RE.search(code) is not None


def has_map_then_filter(code: str) -> bool:
    return MAP_FILTER_RE.search(code) is not None


def has_repeated_dom_queries(code: str) -> bool:
    return len(DOM_QUERY_RE.findall(code)) > DOM_QUERY_LIMIT


def has_var_declaration(code: str) -> bool:
    return VAR_DECLARATION_RE.search(code) is not None


def has_short_function(code: str) -> bool:
    return SHORT_FUNCTION_RE.search(utf16_units(code)) is not None


def has_long_line(code: str) -> bool:
    return any(
        js_length(line) > LONG_LINE_CHARS for line in split_lines(code)
    )


Rule: TypeAlias = tuple[Callable[[str], bool], DeveloperSuggestion]

# Trigger table per group, in emission order.
_REFACTOR_RULES: tuple[Rule, ...] = (
    (is_large_function_file, EXTRACT_FUNCTIONS),
    (has_repeated_loops, EXTRACT_REPEATED_LOGIC),
    (has_many_conditionals, SIMPLIFY_CONDITIONALS),
)
_SECURITY_RULES: tuple[Rule, ...] = (
    (has_credential_assignment, REMOVE_HARDCODED_CREDENTIALS),
    (has_eval_call, AVOID_EVAL),
    (has_inner_html_assignment, INNER_HTML_XSS),
)
_PERFORMANCE_RULES: tuple[Rule, ...] = (
    (has_nested_loop, OPTIMIZE_NESTED_LOOPS),
    (has_map_then_filter, COMBINE_ARRAY_OPERATIONS),
    (has_repeated_dom_queries, CACHE_DOM_QUERIES),
)
_STYLE_RULES: tuple[Rule, ...] = (
    (has_var_declaration, PREFER_CONST_LET),
    (has_short_function, CONSIDER_ARROW_FUNCTIONS),
    (has_long_line, LINE_LENGTH),
)


def _apply(rules: tuple[Rule, ...], code: str) -> list[DeveloperSuggestion]:
    return [suggestion for trigger, suggestion in rules if trigger(code)]


def generate_refactoring_suggestions(code: str) -> list[DeveloperSuggestion]:
    return _apply(_REFACTOR_RULES, code)


def generate_security_suggestions(code: str) -> list[DeveloperSuggestion]:
    return _apply(_SECURITY_RULES, code)


def generate_performance_suggestions(code: str) -> list[DeveloperSuggestion]:
    return _apply(_PERFORMANCE_RULES, code)


def generate_style_suggestions(code: str) -> list[DeveloperSuggestion]:
    return _apply(_STYLE_RULES, code)


class SuggestionGenerator:
    """Stateless suggestion engine; one shared instance is enough."""

    def generate_suggestions(
        self, code: str, language: str
    ) -> list[DeveloperSuggestion]:
        suggestions: list[DeveloperSuggestion] = []
        suggestions.extend(generate_refactoring_suggestions(code))
        suggestions.extend(generate_security_suggestions(code))
        suggestions.extend(generate_performance_suggestions(code))
        suggestions.extend(generate_style_suggestions(code))
        logger.debug(
            "event=suggestions language=%s count=%d",
            language,
            len(suggestions),
        )
        return suggestions


suggestion_generator = SuggestionGenerator()
