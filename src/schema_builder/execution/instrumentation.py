from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from graphql import ExecutionResult


@dataclass(slots=True)
class ExecutionState:
    # Per-request state shared by every instrumentation in a chain.
    context: dict[str, Any]
    data: dict[str, Any] = field(default_factory=dict)


class Instrumentation:
    # Observer over one query execution; every hook is a no-op by default.
    def begin_execution(self, state: ExecutionState) -> None:
        _ = state

    def on_batch(self, state: ExecutionState, loader_name: str, keys: list[Any]) -> None:
        _ = (state, loader_name, keys)

    def end_execution(self, state: ExecutionState, result: ExecutionResult) -> None:
        _ = (state, result)


class ChainedInstrumentation(Instrumentation):
    # Begins in chain order and ends in reverse order, so the first instrumentation wraps the rest.
    def __init__(self, instrumentations: Iterable[Instrumentation] = ()) -> None:
        self.instrumentations = list(instrumentations)

    def begin_execution(self, state: ExecutionState) -> None:
        for instrumentation in self.instrumentations:
            instrumentation.begin_execution(state)

    def on_batch(self, state: ExecutionState, loader_name: str, keys: list[Any]) -> None:
        for instrumentation in self.instrumentations:
            instrumentation.on_batch(state, loader_name, keys)

    def end_execution(self, state: ExecutionState, result: ExecutionResult) -> None:
        for instrumentation in reversed(self.instrumentations):
            instrumentation.end_execution(state, result)


@dataclass(slots=True)
class LoaderStatistics:
    batch_invoke_count: int = 0
    batch_load_count: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "batchInvokeCount": self.batch_invoke_count,
            "batchLoadCount": self.batch_load_count,
        }


class DataLoaderStatisticsInstrumentation(Instrumentation):
    # Counts batch dispatches and batched keys per loader for one request.
    EXTENSION_KEY = "dataloader"

    def __init__(self, *, include_statistics: bool = True) -> None:
        self.include_statistics = include_statistics

    def begin_execution(self, state: ExecutionState) -> None:
        state.data[self.EXTENSION_KEY] = {}

    def on_batch(self, state: ExecutionState, loader_name: str, keys: list[Any]) -> None:
        per_loader = state.data.setdefault(self.EXTENSION_KEY, {})
        stats = per_loader.setdefault(loader_name, LoaderStatistics())
        stats.batch_invoke_count += 1
        stats.batch_load_count += len(keys)

    def end_execution(self, state: ExecutionState, result: ExecutionResult) -> None:
        if not self.include_statistics:
            return
        extensions = dict(result.extensions or {})
        extensions[self.EXTENSION_KEY] = {
            name: stats.to_dict() for name, stats in self.statistics(state).items()
        }
        result.extensions = extensions

    def statistics(self, state: ExecutionState) -> dict[str, LoaderStatistics]:
        return dict(state.data.get(self.EXTENSION_KEY, {}))


def default_instrumentation() -> ChainedInstrumentation:
    return ChainedInstrumentation([DataLoaderStatisticsInstrumentation(include_statistics=True)])
