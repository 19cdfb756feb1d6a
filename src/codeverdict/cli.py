"""CLI entry point: ``codeverdict analyze`` and ``codeverdict serve``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from codeverdict import __version__
from codeverdict.analysis.schemas import CodeSubmission
from codeverdict.config import Settings
from codeverdict.constants import (
    UNKNOWN_LANGUAGE,
    ReportFormat,
    language_for_file,
)
from codeverdict.errors import SubmissionError
from codeverdict.export import export_result
from codeverdict.logging_config import setup_logging
from codeverdict.services.analysis_service import analyze_submission

logger = logging.getLogger(__name__)

STDIN_PATH = "-"
STDIN_LABEL = "<stdin>"


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"codeverdict {__version__}")
        return

    if args.command == "analyze":
        _run_analyze(args)
    elif args.command == "serve":
        _run_serve(args)
    else:
        parser.print_help()


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="codeverdict",
        description=(
            "Heuristic AI-authorship scoring, pattern detection "
            "and suggestions for source code."
        ),
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )

    sub = parser.add_subparsers(dest="command")

    analyze = sub.add_parser(
        "analyze",
        help="Analyze a source file",
    )
    analyze.add_argument(
        "path",
        type=str,
        help="Path to a source file, or '-' for stdin",
    )
    analyze.add_argument(
        "--language",
        "-l",
        default=None,
        help="Language tag (default: from file extension)",
    )
    analyze.add_argument(
        "--format",
        "-f",
        choices=[f.value for f in ReportFormat],
        default=ReportFormat.TEXT.value,
        help="Report format (default: text)",
    )
    analyze.add_argument(
        "--output",
        "-o",
        default=None,
        help="Write the report to this file instead of stdout",
    )
    analyze.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    serve = sub.add_parser(
        "serve",
        help="Start the HTTP API",
    )
    serve.add_argument(
        "--host",
        default=None,
        help="Bind address (default: from settings)",
    )
    serve.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port (default: from settings)",
    )

    return parser


def read_submission(path: str, language: str | None) -> CodeSubmission:
    """Load a file (or stdin) into a :class:`CodeSubmission`.

    Raises SubmissionError if the file is missing or not UTF-8 text.
    """
    from_stdin = path == STDIN_PATH
    source = STDIN_LABEL if from_stdin else path
    file_path = Path(path)
    if not from_stdin and not file_path.is_file():
        raise SubmissionError(source, "file not found")
    try:
        # Bytes, so CRLF line endings reach the rules unchanged
        raw = (
            sys.stdin.buffer.read() if from_stdin else file_path.read_bytes()
        )
        code = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise SubmissionError(source, "not valid UTF-8 text") from exc
    except OSError as exc:
        raise SubmissionError(source, f"cannot read input ({exc})") from exc

    if from_stdin:
        return CodeSubmission(
            code=code,
            language=language or UNKNOWN_LANGUAGE,
            file_name="",
        )
    return CodeSubmission(
        code=code,
        language=language or language_for_file(file_path.name),
        file_name=file_path.name,
    )


def _run_analyze(args: argparse.Namespace) -> None:
    """Execute the analyze command."""
    settings = Settings()
    level = "DEBUG" if args.verbose else settings.effective_log_level
    setup_logging(level)

    try:
        submission = read_submission(args.path, args.language)
    except SubmissionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    result = analyze_submission(submission)
    report = export_result(result, args.format)

    if args.output:
        output = Path(args.output)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(report + "\n", encoding="utf-8")
        logger.info("event=report_written path=%s", output)
    else:
        print(report)


def _run_serve(args: argparse.Namespace) -> None:
    """Run the HTTP API under uvicorn."""
    import uvicorn

    settings = Settings()
    setup_logging(settings.effective_log_level)
    uvicorn.run(
        "codeverdict.main:app",
        host=args.host or settings.api_host,
        port=args.port or settings.api_port,
        log_level=settings.effective_log_level.lower(),
    )


if __name__ == "__main__":
    main()
