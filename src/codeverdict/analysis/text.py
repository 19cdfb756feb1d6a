"""Line-level text helpers shared by the heuristic engines.

The rules were written against ECMAScript semantics: ``\\s`` and
``trim()`` cover Unicode whitespace, ``.`` stops at line terminators,
``\\w``/``\\b`` are ASCII-only and ``.length`` counts UTF-16 code units.
The helpers here reproduce those semantics on Python strings.
"""

from __future__ import annotations

import math
import re

# Prefixes that mark a line as a comment when scoring comment density
COMMENT_PREFIXES = ("//", "/*", "*", "#")

# Narrower prefix set used by the excessive-comments pattern
BLOCK_COMMENT_PREFIXES = ("//", "/*")

# ECMAScript WhiteSpace and LineTerminator code points
JS_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    + "".join(chr(cp) for cp in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_JS_WHITESPACE_SET = (
    r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a"
    r"\u2028\u2029\u202f\u205f\u3000\ufeff"
)
JS_SPACE = f"[{_JS_WHITESPACE_SET}]"
JS_DOT = r"[^\n\r\u2028\u2029]"


def compile_js(pattern: str, flags: int = 0) -> re.Pattern[str]:
    """Compile a regex written with ECMAScript ``\\s`` and ``.`` meaning.

    ``\\s`` becomes :data:`JS_SPACE` and an unescaped ``.`` outside a
    character class becomes :data:`JS_DOT`. Everything else compiles
    with ``re.ASCII``, so ``\\w``, ``\\d`` and ``\\b`` stay ASCII-only.
    """
    out: list[str] = []
    in_class = False
    i = 0
    while i < len(pattern):
        ch = pattern[i]
        if ch == "\\":
            escape = pattern[i : i + 2]
            if escape == r"\s":
                escape = _JS_WHITESPACE_SET if in_class else JS_SPACE
            out.append(escape)
            i += 2
            continue
        if in_class:
            if ch == "]":
                in_class = False
        elif ch == "[":
            in_class = True
        elif ch == ".":
            ch = JS_DOT
        out.append(ch)
        i += 1
    return re.compile("".join(out), flags | re.ASCII)


def js_trim(text: str) -> str:
    """``String.prototype.trim`` over :data:`JS_WHITESPACE`."""
    return text.strip(JS_WHITESPACE)


def js_length(text: str) -> int:
    """Length in UTF-16 code units, as ECMAScript ``.length`` reports."""
    return len(text) + sum(1 for ch in text if ord(ch) > 0xFFFF)


def utf16_units(text: str) -> str:
    """Split astral characters into surrogate pairs.

    Regex quantifiers over the result count UTF-16 code units.
    """
    if all(ord(ch) <= 0xFFFF for ch in text):
        return text
    units: list[str] = []
    for ch in text:
        cp = ord(ch)
        if cp <= 0xFFFF:
            units.append(ch)
            continue
        cp -= 0x10000
        units.append(chr(0xD800 + (cp >> 10)))
        units.append(chr(0xDC00 + (cp & 0x3FF)))
    return "".join(units)


def split_lines(code: str) -> list[str]:
    """Split on ``\\n`` only; the empty string yields one empty line."""
    return code.split("\n")


def non_blank_lines(code: str) -> list[str]:
    """Lines whose trimmed content is non-empty (untrimmed)."""
    return [line for line in split_lines(code) if js_trim(line)]


def is_comment_line(
    line: str, prefixes: tuple[str, ...] = COMMENT_PREFIXES
) -> bool:
    return js_trim(line).startswith(prefixes)


def leading_whitespace(line: str) -> int:
    """Length of the line's leading whitespace run."""
    return len(line) - len(line.lstrip(JS_WHITESPACE))


def mean(values: list[float]) -> float:
    """Arithmetic mean; callers guarantee a non-empty list."""
    return sum(values) / len(values)


def population_stddev(values: list[float]) -> float:
    """Population standard deviation (divides by n, not n - 1)."""
    avg = mean(values)
    variance = sum((v - avg) ** 2 for v in values) / len(values)
    return math.sqrt(variance)


def round_half_up(value: float, places: int = 2) -> float:
    """Round half toward positive infinity at ``places`` decimals.

    Unlike ``round()``, halves never go to the even neighbour:
    ``round_half_up(0.125) == 0.13``.
    """
    factor = 10**places
    return math.floor(value * factor + 0.5) / factor


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
