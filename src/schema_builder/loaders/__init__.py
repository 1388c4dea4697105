from .batch import BatchLoadError, BatchLoader, LoaderFunction, MappedBatchLoader, is_loader_function
from .repository import BatchListener, DataLoaderRepository, LoaderEntry, LoaderRepositoryError, RequestLoaders

__all__ = [
    "BatchListener",
    "BatchLoadError",
    "BatchLoader",
    "DataLoaderRepository",
    "LoaderEntry",
    "LoaderFunction",
    "LoaderRepositoryError",
    "MappedBatchLoader",
    "RequestLoaders",
    "is_loader_function",
]
