"""Export module: result reports and store rows."""

from collections.abc import Callable

from codeverdict.analysis.schemas import AnalysisResult
from codeverdict.constants import ReportFormat
from codeverdict.export.json_export import export_json
from codeverdict.export.markdown import export_markdown
from codeverdict.export.records import (
    ResultRecords,
    submission_record,
    to_records,
)
from codeverdict.export.text import export_text

__all__ = [
    "ResultRecords",
    "export_json",
    "export_markdown",
    "export_result",
    "export_text",
    "submission_record",
    "to_records",
]

_EXPORTERS: dict[str, Callable[[AnalysisResult], str]] = {
    ReportFormat.TEXT: export_text,
    ReportFormat.JSON: export_json,
    ReportFormat.MARKDOWN: export_markdown,
}


def export_result(result: AnalysisResult, fmt: str = "text") -> str:
    """Dispatch export by format string."""
    exporter = _EXPORTERS.get(fmt)
    if exporter is None:
        valid = ", ".join(_EXPORTERS)
        msg = f"Unsupported format: {fmt}. Use: {valid}"
        raise ValueError(msg)
    return exporter(result)
