from __future__ import annotations

from collections.abc import Callable, Hashable, Iterator
from dataclasses import dataclass, field
from typing import Any

from strawberry.dataloader import DataLoader

from schema_builder.loaders.batch import LoaderFunction, is_loader_function


# Called with (loader name, keys) each time a batch function is dispatched.
BatchListener = Callable[[str, list[Any]], None]


class LoaderRepositoryError(KeyError):
    # Raised when a resolver asks for a loader name nobody registered.
    pass


@dataclass(frozen=True, slots=True)
class LoaderEntry:
    field_name: str
    loader_function: LoaderFunction


@dataclass(slots=True)
class DataLoaderRepository:
    # Field name -> batch loader. Written during the scan phase, read-only afterwards.
    _entries: dict[str, LoaderEntry] = field(default_factory=dict)

    def add_batch_loader(self, field_name: str, loader_function: LoaderFunction) -> LoaderEntry:
        if not field_name:
            raise ValueError("loader field name must be a non-empty string")
        if not is_loader_function(loader_function):
            raise TypeError(
                f"loader '{field_name}' must be a BatchLoader or MappedBatchLoader, "
                f"got {type(loader_function).__name__}"
            )
        # Re-registration replaces the previous entry.
        entry = LoaderEntry(field_name=field_name, loader_function=loader_function)
        self._entries[field_name] = entry
        return entry

    def find(self, field_name: str) -> LoaderEntry | None:
        return self._entries.get(field_name)

    def get(self, field_name: str) -> LoaderEntry:
        entry = self._entries.get(field_name)
        if entry is None:
            raise LoaderRepositoryError(field_name)
        return entry

    def names(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, field_name: object) -> bool:
        return field_name in self._entries

    def __iter__(self) -> Iterator[LoaderEntry]:
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)

    def for_request(self, on_batch: BatchListener | None = None) -> RequestLoaders:
        # One set of DataLoader instances per request keeps batching and caching request-scoped.
        return RequestLoaders(repository=self, on_batch=on_batch)


@dataclass(slots=True)
class RequestLoaders:
    # Request-scoped DataLoader instances, created lazily per loader name.
    repository: DataLoaderRepository
    on_batch: BatchListener | None = None
    _loaders: dict[str, DataLoader[Any, Any]] = field(default_factory=dict)

    def find(self, field_name: str) -> DataLoader[Any, Any] | None:
        loader = self._loaders.get(field_name)
        if loader is not None:
            return loader
        entry = self.repository.find(field_name)
        if entry is None:
            return None
        loader = DataLoader(load_fn=self._load_fn(entry))
        self._loaders[field_name] = loader
        return loader

    def get(self, field_name: str) -> DataLoader[Any, Any]:
        loader = self.find(field_name)
        if loader is None:
            raise LoaderRepositoryError(field_name)
        return loader

    def _load_fn(self, entry: LoaderEntry):
        on_batch = self.on_batch

        async def _load(keys: list[Hashable]) -> list[Any]:
            if on_batch is not None:
                on_batch(entry.field_name, list(keys))
            return await entry.loader_function.load_many(keys)

        return _load
