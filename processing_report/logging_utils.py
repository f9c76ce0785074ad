from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .settings import LogLevel


class VerbosityLevel(str, Enum):
    QUIET = "quiet"
    NORMAL = "normal"
    VERBOSE = "verbose"

    @property
    def minimum_level(self) -> LogLevel:
        return _MINIMUM_LEVELS[self]


_MINIMUM_LEVELS = {
    VerbosityLevel.QUIET: LogLevel.WARNING,
    VerbosityLevel.NORMAL: LogLevel.INFO,
    VerbosityLevel.VERBOSE: LogLevel.DEBUG,
}

Emitter = Callable[[str], None]


@dataclass
class ReportLogger:
    """
    Operational log for reports and the CLI, leveled with the same LogLevel as messages.

    Quiet shows warnings and above, normal adds info, verbose adds debug traces.
    """

    verbosity: VerbosityLevel = VerbosityLevel.QUIET
    emit: Emitter = print

    def enabled_for(self, level: LogLevel) -> bool:
        return level >= self.verbosity.minimum_level

    def log(self, level: LogLevel, message: str) -> None:
        if self.enabled_for(level):
            self.emit(f"[{level.value}] {message}")

    def debug(self, message: str) -> None:
        self.log(LogLevel.DEBUG, message)

    def info(self, message: str) -> None:
        self.log(LogLevel.INFO, message)
