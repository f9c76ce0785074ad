"""
Processing report: leveled diagnostic accumulation for multi-step pipelines.
"""

from .config import ReportConfig
from .core_types import ProcessingError, ProcessingMessage
from .report import DispatchOutcome, DispatchResult, ProcessingReport
from .settings import LogLevel

__all__ = [
    "DispatchOutcome",
    "DispatchResult",
    "LogLevel",
    "ProcessingError",
    "ProcessingMessage",
    "ProcessingReport",
    "ReportConfig",
]
