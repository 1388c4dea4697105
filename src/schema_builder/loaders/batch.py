from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Hashable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

# List form: keys in, values out in the same positions.
BatchLoadFn = Callable[[list[Any]], Union[Sequence[Any], Awaitable[Sequence[Any]]]]
# Keyed form: a set of keys in, a mapping out; absent keys load as None.
MappedBatchLoadFn = Callable[[set[Any]], Union[Mapping[Any, Any], Awaitable[Mapping[Any, Any]]]]


class BatchLoadError(RuntimeError):
    # Raised when a batch function returns a result that cannot be matched to its keys.
    pass


@dataclass(frozen=True, slots=True)
class BatchLoader:
    fn: BatchLoadFn

    async def load_many(self, keys: list[Hashable]) -> list[Any]:
        values = await _maybe_await(self.fn(list(keys)))
        if not isinstance(values, Sequence) or isinstance(values, (str, bytes)):
            raise BatchLoadError("BatchLoader function must return a sequence")
        values = list(values)
        if len(values) != len(keys):
            raise BatchLoadError(
                f"BatchLoader returned {len(values)} values for {len(keys)} keys"
            )
        return values


@dataclass(frozen=True, slots=True)
class MappedBatchLoader:
    fn: MappedBatchLoadFn

    async def load_many(self, keys: list[Hashable]) -> list[Any]:
        mapping = await _maybe_await(self.fn(set(keys)))
        if not isinstance(mapping, Mapping):
            raise BatchLoadError("MappedBatchLoader function must return a mapping")
        return [mapping.get(key) for key in keys]


LoaderFunction = Union[BatchLoader, MappedBatchLoader]


def is_loader_function(value: object) -> bool:
    return isinstance(value, (BatchLoader, MappedBatchLoader))


async def _maybe_await(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value
