"""
Processing report: accumulates leveled messages, tracks the worst level seen, and
aborts processing once a message reaches the exception threshold.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Protocol, runtime_checkable

from .config import ReportConfig
from .core_types import MessageLike, ProcessingMessage
from .logging_utils import ReportLogger, VerbosityLevel
from .settings import SUCCESS_CEILING, LogLevel


class ReportSink(Protocol):
    def record(self, level: LogLevel, message: MessageLike) -> None:
        ...


@runtime_checkable
class RetainingSink(Protocol):
    def record(self, level: LogLevel, message: MessageLike) -> None:
        ...

    def __iter__(self) -> Iterator[MessageLike]:
        ...


class DispatchOutcome(str, Enum):
    RECORDED = "recorded"
    SUPPRESSED = "suppressed"
    ESCALATED = "escalated"


@dataclass(frozen=True)
class DispatchResult:
    outcome: DispatchOutcome
    level: LogLevel
    failure: Optional[BaseException] = None

    @property
    def escalated(self) -> bool:
        return self.outcome is DispatchOutcome.ESCALATED

    def unwrap(self) -> None:
        if self.failure is not None:
            raise self.failure


class ProcessingReport:
    """
    Base processing report.

    Recording is delegated to the sink chosen at construction. A report is meant for
    a single pipeline run on a single thread; it is never reset.
    """

    def __init__(
        self,
        sink: Optional[ReportSink] = None,
        config: Optional[ReportConfig] = None,
        logger: Optional[ReportLogger] = None,
    ) -> None:
        self.config = config or ReportConfig()
        self._sink = sink
        self.logger = logger or ReportLogger(verbosity=VerbosityLevel.QUIET)
        self.worst_level: LogLevel = LogLevel.lowest()

    @property
    def report_threshold(self) -> LogLevel:
        return self.config.report_threshold

    @property
    def exception_threshold(self) -> LogLevel:
        return self.config.exception_threshold

    @property
    def sink(self) -> Optional[ReportSink]:
        return self._sink

    def debug(self, message: MessageLike) -> None:
        self.dispatch(message.set_log_level(LogLevel.DEBUG))

    def info(self, message: MessageLike) -> None:
        self.dispatch(message.set_log_level(LogLevel.INFO))

    def warn(self, message: MessageLike) -> None:
        self.dispatch(message.set_log_level(LogLevel.WARNING))

    def error(self, message: MessageLike) -> None:
        self.dispatch(message.set_log_level(LogLevel.ERROR))

    def is_success(self) -> bool:
        return self.worst_level < SUCCESS_CEILING

    def dispatch(self, message: MessageLike) -> None:
        """Dispatch a message whose level is already set; raises on escalation."""
        self.offer(message).unwrap()

    def offer(self, message: MessageLike) -> DispatchResult:
        """
        Run the dispatch algorithm and describe what happened instead of raising.

        Order matters: an escalating message never touches worst_level or the sink.
        Sink errors are not caught.
        """
        level = message.log_level

        if level >= self.exception_threshold:
            self.logger.debug(f"Escalating {level.value} message (threshold {self.exception_threshold.value})")
            return DispatchResult(DispatchOutcome.ESCALATED, level, message.as_exception())
        if level > self.worst_level:
            self.worst_level = level
        if level >= self.report_threshold:
            self._record(level, message.set_log_level(level))
            return DispatchResult(DispatchOutcome.RECORDED, level)
        self.logger.debug(f"Suppressed {level.value} message below {self.report_threshold.value}")
        return DispatchResult(DispatchOutcome.SUPPRESSED, level)

    def merge_with(self, other: "ProcessingReport") -> None:
        """Replay the messages retained by ``other`` into this report, in order."""
        replayed = 0
        # Snapshot first: merging a report into itself must not loop.
        for message in list(other):
            self.dispatch(message)
            replayed += 1
        self.logger.debug(f"Merged {replayed} message(s)")

    def new_message(self) -> ProcessingMessage:
        return ProcessingMessage()

    def _record(self, level: LogLevel, message: MessageLike) -> None:
        if self._sink is not None:
            self._sink.record(level, message)

    def __iter__(self) -> Iterator[MessageLike]:
        if isinstance(self._sink, RetainingSink):
            yield from self._sink
