from __future__ import annotations

import asyncio

import pytest

from schema_builder.loaders.batch import BatchLoader, BatchLoadError, MappedBatchLoader, is_loader_function


def test_batch_loader_accepts_sync_functions() -> None:
    loader = BatchLoader(lambda keys: [key.upper() for key in keys])
    assert asyncio.run(loader.load_many(["a", "b"])) == ["A", "B"]


def test_batch_loader_accepts_async_functions() -> None:
    async def _load(keys: list[str]) -> list[int]:
        return [len(key) for key in keys]

    assert asyncio.run(BatchLoader(_load).load_many(["a", "bbb"])) == [1, 3]


def test_batch_loader_rejects_length_mismatch() -> None:
    # Positional results must line up with the keys.
    loader = BatchLoader(lambda keys: [1])
    with pytest.raises(BatchLoadError):
        asyncio.run(loader.load_many(["a", "b"]))


def test_mapped_batch_loader_fills_missing_keys_with_none() -> None:
    seen: list[set[str]] = []

    def _load(keys: set[str]) -> dict[str, str]:
        seen.append(keys)
        return {"a": "alpha"}

    result = asyncio.run(MappedBatchLoader(_load).load_many(["a", "b"]))
    assert result == ["alpha", None]
    assert seen == [{"a", "b"}]


def test_mapped_batch_loader_requires_mapping() -> None:
    with pytest.raises(BatchLoadError):
        asyncio.run(MappedBatchLoader(lambda keys: ["x"]).load_many(["a"]))


def test_is_loader_function_only_accepts_loader_shapes() -> None:
    assert is_loader_function(BatchLoader(lambda keys: keys))
    assert is_loader_function(MappedBatchLoader(lambda keys: {}))
    assert not is_loader_function(lambda keys: keys)
