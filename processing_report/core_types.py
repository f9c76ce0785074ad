from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Protocol, runtime_checkable

from .settings import LogLevel


class ProcessingError(Exception):
    """
    Terminal failure raised when a message reaches a report's exception threshold.

    The originating message stays attached so callers can inspect its level and fields.
    """

    def __init__(self, message: Optional["ProcessingMessage"] = None, text: str | None = None) -> None:
        self.processing_message = message
        if text is None:
            text = message.message if message is not None else ""
        super().__init__(text)


ExceptionProvider = Callable[["ProcessingMessage"], ProcessingError]


@runtime_checkable
class MessageLike(Protocol):
    log_level: LogLevel

    def set_log_level(self, level: LogLevel) -> "MessageLike":
        ...

    def as_exception(self) -> BaseException:
        ...


class ProcessingMessage:
    def __init__(
        self,
        message: str = "",
        log_level: LogLevel = LogLevel.INFO,
        **fields: Any,
    ) -> None:
        self.message = message
        self.log_level = log_level
        self._fields: Dict[str, Any] = dict(fields)
        self._exception_provider: ExceptionProvider = ProcessingError

    def set_log_level(self, level: LogLevel) -> "ProcessingMessage":
        self.log_level = level
        return self

    def set_message(self, message: str) -> "ProcessingMessage":
        self.message = message
        return self

    def put(self, key: str, value: Any) -> "ProcessingMessage":
        if key in ("level", "message"):
            raise ValueError(f"Reserved message field: {key}")
        self._fields[key] = value
        return self

    def get(self, key: str, default: Any = None) -> Any:
        return self._fields.get(key, default)

    @property
    def fields(self) -> Dict[str, Any]:
        return dict(self._fields)

    def set_exception_provider(self, provider: ExceptionProvider) -> "ProcessingMessage":
        """Choose how as_exception() builds the failure; defaults to ProcessingError."""
        self._exception_provider = provider
        return self

    def as_exception(self) -> ProcessingError:
        return self._exception_provider(self)

    def as_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "level": self.log_level.value,
            "message": self.message,
        }
        payload.update(self._fields)
        return payload

    def __str__(self) -> str:
        lines = [f"{self.log_level.value}: {self.message}"]
        for key, value in self._fields.items():
            lines.append(f"    {key}: {value}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"ProcessingMessage(level={self.log_level.value!r}, message={self.message!r})"
