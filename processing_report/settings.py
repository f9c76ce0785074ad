from __future__ import annotations

from enum import Enum


class LogLevel(str, Enum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"

    @property
    def rank(self) -> int:
        return _ORDER.index(self)

    @classmethod
    def lowest(cls) -> "LogLevel":
        return _ORDER[0]

    @classmethod
    def parse(cls, value: str) -> "LogLevel":
        """Parse a level name, case-insensitively. ``warn`` is accepted for WARNING."""
        name = value.strip().lower()
        if name == "warn":
            name = cls.WARNING.value
        return cls(name)

    # Ordering is by rank; str comparison would sort alphabetically.
    def __lt__(self, other):
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.rank >= other.rank


_ORDER = [LogLevel.DEBUG, LogLevel.INFO, LogLevel.WARNING, LogLevel.ERROR, LogLevel.FATAL]

DEFAULT_REPORT_THRESHOLD = LogLevel.INFO
DEFAULT_EXCEPTION_THRESHOLD = LogLevel.FATAL
SUCCESS_CEILING = LogLevel.ERROR
