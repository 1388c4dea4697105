from __future__ import annotations

from types import SimpleNamespace

import pytest
from graphql import ExecutionResult

from schema_builder.execution.context import LOADERS_KEY, loaders_from
from schema_builder.execution.instrumentation import (
    ChainedInstrumentation,
    DataLoaderStatisticsInstrumentation,
    ExecutionState,
    Instrumentation,
)
from schema_builder.loaders.repository import DataLoaderRepository


class Recorder(Instrumentation):
    def __init__(self, name: str, calls: list[str]) -> None:
        self.name = name
        self.calls = calls

    def begin_execution(self, state: ExecutionState) -> None:
        self.calls.append(f"begin:{self.name}")

    def end_execution(self, state: ExecutionState, result: ExecutionResult) -> None:
        self.calls.append(f"end:{self.name}")


def test_chain_ends_in_reverse_order() -> None:
    calls: list[str] = []
    chain = ChainedInstrumentation([Recorder("outer", calls), Recorder("inner", calls)])
    state = ExecutionState(context={})

    chain.begin_execution(state)
    chain.end_execution(state, ExecutionResult(data={}))

    assert calls == ["begin:outer", "begin:inner", "end:inner", "end:outer"]


def test_statistics_count_dispatches_and_keys_per_loader() -> None:
    stats = DataLoaderStatisticsInstrumentation()
    state = ExecutionState(context={})
    result = ExecutionResult(data={}, extensions={"other": True})

    stats.begin_execution(state)
    stats.on_batch(state, "users", ["1", "2"])
    stats.on_batch(state, "users", ["3"])
    stats.on_batch(state, "orders", ["A"])
    stats.end_execution(state, result)

    assert result.extensions == {
        "other": True,
        "dataloader": {
            "users": {"batchInvokeCount": 2, "batchLoadCount": 3},
            "orders": {"batchInvokeCount": 1, "batchLoadCount": 1},
        },
    }


def test_statistics_can_stay_out_of_the_response() -> None:
    stats = DataLoaderStatisticsInstrumentation(include_statistics=False)
    state = ExecutionState(context={})
    result = ExecutionResult(data={})

    stats.begin_execution(state)
    stats.on_batch(state, "users", ["1"])
    stats.end_execution(state, result)

    assert result.extensions is None
    assert stats.statistics(state)["users"].batch_invoke_count == 1


def test_loaders_are_created_once_when_context_has_none() -> None:
    repository = DataLoaderRepository()
    info = SimpleNamespace(context={})

    loaders = loaders_from(info, repository)

    assert info.context[LOADERS_KEY] is loaders
    assert loaders_from(info) is loaders


def test_missing_loaders_without_repository_is_an_error() -> None:
    with pytest.raises(LookupError):
        loaders_from(SimpleNamespace(context=SimpleNamespace()))
