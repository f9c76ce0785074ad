"""
Concrete sinks for ProcessingReport, plus factories picking one at construction time.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from rich.console import Console
from rich.text import Text

from ..config import ReportConfig
from ..core_types import MessageLike
from ..logging_utils import ReportLogger
from ..report import ProcessingReport
from ..settings import LogLevel

LEVEL_STYLES = {
    LogLevel.DEBUG: "dim",
    LogLevel.INFO: "cyan",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
    LogLevel.FATAL: "bold red",
}


class ListSink:
    """Keeps every recorded message, in record order."""

    def __init__(self) -> None:
        self._messages: List[MessageLike] = []

    def record(self, level: LogLevel, message: MessageLike) -> None:
        self._messages.append(message)

    def __iter__(self) -> Iterator[MessageLike]:
        yield from self._messages

    def __len__(self) -> int:
        return len(self._messages)


class ConsoleSink:
    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(stderr=True)

    def record(self, level: LogLevel, message: MessageLike) -> None:
        text = getattr(message, "message", str(message))
        line = Text(f"[{level.value.upper()}] {text}", style=LEVEL_STYLES.get(level, ""))
        for key, value in (getattr(message, "fields", {}) or {}).items():
            line.append(f"\n    {key}: {value}")
        self.console.print(line)


class DevNullSink:
    def record(self, level: LogLevel, message: MessageLike) -> None:
        pass


def list_report(
    config: Optional[ReportConfig] = None, logger: Optional[ReportLogger] = None
) -> ProcessingReport:
    return ProcessingReport(sink=ListSink(), config=config, logger=logger)


def console_report(
    config: Optional[ReportConfig] = None,
    console: Optional[Console] = None,
    logger: Optional[ReportLogger] = None,
) -> ProcessingReport:
    return ProcessingReport(sink=ConsoleSink(console), config=config, logger=logger)


def dev_null_report(
    config: Optional[ReportConfig] = None, logger: Optional[ReportLogger] = None
) -> ProcessingReport:
    return ProcessingReport(sink=DevNullSink(), config=config, logger=logger)
