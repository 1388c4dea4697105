from .logging import JsonlLogSink, LogMessage, LogSink, MemoryLogSink, NullLogSink, StdoutLogSink, log

__all__ = [
    "JsonlLogSink",
    "LogMessage",
    "LogSink",
    "MemoryLogSink",
    "NullLogSink",
    "StdoutLogSink",
    "log",
]
