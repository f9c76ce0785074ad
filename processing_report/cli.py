"""
Typer-based CLI for replaying recorded message streams through a processing report.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from .config import ReportConfig, load_config
from .core_types import ProcessingError
from .loader import load_messages
from .logging_utils import ReportLogger, VerbosityLevel
from .reporting.console import render_console
from .reporting.json_report import generate_json
from .reporting.markdown import generate_markdown
from .reporting.sinks import list_report
from .settings import LogLevel

app = typer.Typer(help="Processing report CLI")
console = Console()

EXIT_FAILED = 1
EXIT_ESCALATED = 2


def _emit(line: str) -> None:
    console.print(line, markup=False, highlight=False, soft_wrap=True)


def _parse_level(value: Optional[str]) -> Optional[LogLevel]:
    if value is None:
        return None
    try:
        return LogLevel.parse(value)
    except ValueError as exc:
        raise typer.BadParameter(f"Unknown level: {value}") from exc


def _parse_verbosity(value: str) -> VerbosityLevel:
    try:
        return VerbosityLevel(value.lower())
    except ValueError as exc:
        raise typer.BadParameter(
            "Verbosity must be one of quiet, normal, verbose."
        ) from exc


@app.command()
def replay(
    input_path: Path = typer.Option(
        ...,
        "--input",
        "-i",
        help="JSON list or JSON-lines file of messages.",
        exists=True,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to threshold configuration file (YAML or JSON).",
    ),
    report_threshold: Optional[str] = typer.Option(
        None,
        "--report-threshold",
        help="Minimum level to record (overrides config).",
    ),
    exception_threshold: Optional[str] = typer.Option(
        None,
        "--exception-threshold",
        help="Minimum level that aborts processing (overrides config).",
    ),
    output_format: str = typer.Option(
        "console",
        "--output",
        "-o",
        help="Output format: console, json, markdown.",
    ),
    verbosity: str = typer.Option(
        VerbosityLevel.QUIET.value,
        "--verbosity",
        "-v",
        help="Verbosity level: quiet (default), normal, verbose.",
        show_default=True,
    ),
) -> None:
    """Dispatch every message of a file into a fresh report and render the result."""
    if output_format not in ("console", "json", "markdown"):
        raise typer.BadParameter("Unsupported output format.")
    verbosity_level = _parse_verbosity(verbosity)
    logger = ReportLogger(verbosity=verbosity_level, emit=_emit)

    report_config = ReportConfig()
    if config:
        try:
            report_config = load_config(config)
        except (FileNotFoundError, ValueError, RuntimeError) as e:
            logger.log(LogLevel.ERROR, f"Error loading config: {e}")
            raise typer.Exit(code=EXIT_FAILED)
    report_config = report_config.with_overrides(
        report_threshold=_parse_level(report_threshold),
        exception_threshold=_parse_level(exception_threshold),
    )

    try:
        messages = load_messages(input_path)
    except ValueError as e:
        logger.log(LogLevel.ERROR, f"Error reading messages: {e}")
        raise typer.Exit(code=EXIT_FAILED)

    report = list_report(config=report_config, logger=logger)
    logger.info(
        f"Replaying {len(messages)} message(s) report>={report_config.report_threshold.value} "
        f"abort>={report_config.exception_threshold.value}"
    )

    escalation: Optional[ProcessingError] = None
    try:
        for message in messages:
            report.dispatch(message)
    except ProcessingError as exc:
        escalation = exc

    recorded = list(report)
    if output_format == "console":
        render_console(recorded, console=console)
    elif output_format == "json":
        console.print(generate_json(recorded), markup=False, soft_wrap=True)
    else:
        console.print(generate_markdown(recorded), markup=False, soft_wrap=True)

    if escalation is not None:
        logger.log(LogLevel.FATAL, f"Processing aborted: {escalation}")
        raise typer.Exit(code=EXIT_ESCALATED)
    logger.info(f"Worst level: {report.worst_level.value}")
    if not report.is_success():
        raise typer.Exit(code=EXIT_FAILED)


@app.command()
def levels() -> None:
    """List levels from lowest to highest."""
    for level in LogLevel:
        console.print(level.value)


def run() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    run()
