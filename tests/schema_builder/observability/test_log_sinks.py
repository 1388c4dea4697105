from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from schema_builder.observability.logging import JsonlLogSink, LogMessage, MemoryLogSink, StdoutLogSink, log


def test_jsonl_sink_writes_one_object_per_line(tmp_path: Path) -> None:
    path = tmp_path / "out" / "build.jsonl"
    sink = JsonlLogSink(path)

    log(sink, "info", "wiring built", resolvers=2)
    log(sink, "error", "scan member failed", member="users")
    sink.close()

    lines = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert [line["message"] for line in lines] == ["wiring built", "scan member failed"]
    assert lines[0]["fields"] == {"resolvers": 2}
    assert lines[0]["timestamp"].endswith("Z")


def test_stdout_sink_prints_json(capsys: pytest.CaptureFixture[str]) -> None:
    log(StdoutLogSink(), "warning", "entity representation unresolved", typename="User")

    payload = json.loads(capsys.readouterr().out)
    assert payload["level"] == "warning"
    assert payload["fields"] == {"typename": "User"}


def test_stdout_sink_accepts_another_stream() -> None:
    stream = io.StringIO()
    log(StdoutLogSink(stream), "info", "wiring built")

    assert json.loads(stream.getvalue())["message"] == "wiring built"


def test_memory_sink_filters_by_level() -> None:
    sink = MemoryLogSink()
    log(sink, "info", "a")
    log(sink, "error", "b")

    assert [item.message for item in sink.by_level("error")] == ["b"]


def test_log_message_requires_level_and_message() -> None:
    with pytest.raises(ValueError):
        LogMessage(level="", message="x")
