from .sinks import ConsoleSink, DevNullSink, ListSink, console_report, dev_null_report, list_report

__all__ = [
    "ConsoleSink",
    "DevNullSink",
    "ListSink",
    "console_report",
    "dev_null_report",
    "list_report",
]
