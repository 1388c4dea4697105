from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import Protocol, TextIO


@dataclass(frozen=True, slots=True)
class LogMessage:
    # Structured log payload for build and federation diagnostics.
    level: str
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
    fields: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.level or not self.message:
            raise ValueError("LogMessage requires non-empty level/message")


class LogSink(Protocol):
    def emit(self, message: LogMessage) -> None: ...


class StdoutLogSink:
    # Writes to the given stream, or to whatever sys.stdout is at emit time.
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def emit(self, message: LogMessage) -> None:
        print(
            json.dumps(_log_to_dict(message), separators=(",", ":"), ensure_ascii=False, default=str),
            file=self._stream if self._stream is not None else sys.stdout,
        )


class JsonlLogSink:
    # File-backed sink, one JSON object per line.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self._path.open("a", encoding="utf-8")

    def emit(self, message: LogMessage) -> None:
        payload = json.dumps(_log_to_dict(message), separators=(",", ":"), ensure_ascii=False, default=str)
        self._file.write(payload + "\n")
        self._file.flush()

    def close(self) -> None:
        self._file.close()


class MemoryLogSink:
    def __init__(self) -> None:
        self.messages: list[LogMessage] = []

    def emit(self, message: LogMessage) -> None:
        self.messages.append(message)

    def by_level(self, level: str) -> list[LogMessage]:
        return [item for item in self.messages if item.level == level]


class NullLogSink:
    def emit(self, message: LogMessage) -> None:
        _ = message


def log(sink: LogSink, level: str, message: str, **fields: object) -> None:
    sink.emit(LogMessage(level=level, message=message, fields=dict(fields)))


def _log_to_dict(message: LogMessage) -> dict[str, object]:
    return {
        "level": message.level,
        "message": message.message,
        "timestamp": message.timestamp.isoformat().replace("+00:00", "Z"),
        "fields": message.fields,
    }
