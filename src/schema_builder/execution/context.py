from __future__ import annotations

from typing import Any

from strawberry.dataloader import DataLoader

from schema_builder.loaders.repository import DataLoaderRepository, RequestLoaders

LOADERS_KEY = "loaders"


def loaders_from(info: Any, repository: DataLoaderRepository | None = None) -> RequestLoaders:
    # Request loaders live in the execution context under "loaders".
    context = info.context
    if isinstance(context, dict):
        loaders = context.get(LOADERS_KEY)
    else:
        loaders = getattr(context, LOADERS_KEY, None)
    if isinstance(loaders, RequestLoaders):
        return loaders
    if repository is None:
        raise LookupError("execution context carries no request loaders")
    # Executed outside GraphQL.execute: create them once and keep them for the rest of the request.
    loaders = repository.for_request()
    if isinstance(context, dict):
        context[LOADERS_KEY] = loaders
    return loaders


def loader_from(info: Any, name: str) -> DataLoader[Any, Any]:
    return loaders_from(info).get(name)
