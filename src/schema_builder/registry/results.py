from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from schema_builder.loaders.repository import DataLoaderRepository
from schema_builder.registry.types import TypeRegistry

Resolver = Callable[..., Any]


@dataclass(slots=True)
class ParsedResults:
    # Everything the parser strategies register during one builder run.
    types: TypeRegistry = field(default_factory=TypeRegistry)
    loaders: DataLoaderRepository = field(default_factory=DataLoaderRepository)
    resolvers: dict[tuple[str, str], Resolver] = field(default_factory=dict)

    def add_resolver(self, type_name: str, field_name: str, resolver: Resolver) -> None:
        if not type_name or not field_name:
            raise ValueError("resolver coordinates must be non-empty strings")
        if not callable(resolver):
            raise TypeError(f"resolver for {type_name}.{field_name} must be callable")
        # Same coordinate registered twice: last registration wins.
        self.resolvers[(type_name, field_name)] = resolver
