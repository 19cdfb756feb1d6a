"""Exceptions raised at the outer surfaces (CLI input, API input).

The analysis engines themselves never raise for ``str`` input.
"""

from __future__ import annotations


class CodeVerdictError(Exception):
    """Base class for codeverdict errors."""


class SubmissionError(CodeVerdictError):
    """A code submission could not be read or is not valid text."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason
