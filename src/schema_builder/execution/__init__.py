from .context import LOADERS_KEY, loader_from, loaders_from
from .executor import GraphQL
from .instrumentation import (
    ChainedInstrumentation,
    DataLoaderStatisticsInstrumentation,
    ExecutionState,
    Instrumentation,
    LoaderStatistics,
    default_instrumentation,
)

__all__ = [
    "LOADERS_KEY",
    "ChainedInstrumentation",
    "DataLoaderStatisticsInstrumentation",
    "ExecutionState",
    "GraphQL",
    "Instrumentation",
    "LoaderStatistics",
    "default_instrumentation",
    "loader_from",
    "loaders_from",
]
