from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Iterable, Mapping
from typing import Any

from graphql import GraphQLObjectType, GraphQLSchema, GraphQLUnionType

from schema_builder.execution.context import loaders_from
from schema_builder.federation.exclusions import DEFAULT_EXCLUSIONS, ExclusionRule, first_match
from schema_builder.loaders.repository import RequestLoaders
from schema_builder.observability.logging import LogSink, NullLogSink, log
from schema_builder.registry.results import ParsedResults
from schema_builder.registry.types import EntityTypeResolver

ENTITY_UNION = "_Entity"
ENTITIES_FIELD = "_entities"
REPRESENTATIONS_ARGUMENT = "representations"


class FederationTransformer:
    # Adds entity type resolution and batched entity fetching to a built schema.
    # Registries are read-only once the wiring is built; one transformer serves concurrent requests.
    def __init__(
        self,
        results: ParsedResults,
        *,
        exclusions: Iterable[ExclusionRule] = DEFAULT_EXCLUSIONS,
        log_sink: LogSink | None = None,
    ) -> None:
        self._results = results
        self._exclusions = tuple(exclusions)
        self._log_sink = log_sink or NullLogSink()
        self._type_resolver: EntityTypeResolver | None = None

    @property
    def exclusions(self) -> tuple[ExclusionRule, ...]:
        return self._exclusions

    def transform(self, schema: GraphQLSchema) -> GraphQLSchema:
        # Rebinds the federation hooks in place; schemas without @key types have neither hook.
        entity_union = schema.type_map.get(ENTITY_UNION)
        if isinstance(entity_union, GraphQLUnionType):
            entity_union.resolve_type = self._resolve_type
        query_type = schema.query_type
        if query_type is not None and ENTITIES_FIELD in query_type.fields:
            query_type.fields[ENTITIES_FIELD].resolve = self.resolve_entities
        return schema

    def resolve_entity_type(self, value: object, schema: GraphQLSchema) -> GraphQLObjectType | None:
        # Registration order decides between several matching supertypes: first registered wins.
        if self._type_resolver is None:
            # Built on first use; the registry is complete by the time requests arrive.
            self._type_resolver = EntityTypeResolver.from_registry(self._results.types)
        type_name = self._type_resolver.resolve(value)
        if type_name is None:
            return None
        graphql_type = schema.get_type(type_name)
        if isinstance(graphql_type, GraphQLObjectType):
            return graphql_type
        return None

    def fetch_entities(
        self,
        representations: Iterable[object],
        loaders: RequestLoaders,
    ) -> list[Awaitable[Any] | None]:
        # One slot per representation, in input order: a pending load, or None when nothing resolves.
        return [
            self._fetch_one(position, representation, loaders)
            for position, representation in enumerate(representations)
        ]

    async def resolve_entities(self, _obj: Any, info: Any, **kwargs: Any) -> list[Any]:
        representations = kwargs.get(REPRESENTATIONS_ARGUMENT) or []
        loaders = loaders_from(info, self._results.loaders)
        pending = self.fetch_entities(representations, loaders)
        outcomes = await asyncio.gather(*(_settle(item) for item in pending), return_exceptions=True)
        entities: list[Any] = []
        for position, outcome in enumerate(outcomes):
            if isinstance(outcome, BaseException) and not isinstance(outcome, Exception):
                raise outcome
            if isinstance(outcome, Exception):
                log(
                    self._log_sink,
                    "error",
                    "entity loader failed",
                    position=position,
                    error=f"{type(outcome).__name__}: {outcome}",
                )
                entities.append(None)
                continue
            entities.append(outcome)
        return entities

    def _fetch_one(
        self,
        position: int,
        representation: object,
        loaders: RequestLoaders,
    ) -> Awaitable[Any] | None:
        if not isinstance(representation, Mapping):
            self._unresolved(position, None, "representation is not a mapping")
            return None
        type_name = representation.get("__typename")
        if first_match(self._exclusions, representation) is not None:
            return None
        for metadata in self._results.types:
            if metadata.external_type_name != type_name:
                continue
            identifier = representation.get(metadata.identifier_field_name)
            if not isinstance(identifier, str):
                continue
            loader = loaders.find(metadata.loader_ref)
            if loader is None:
                self._unresolved(position, type_name, f"no loader named '{metadata.loader_ref}'")
                return None
            return loader.load(identifier)
        self._unresolved(position, type_name, "no registered type with a string identifier")
        return None

    def _resolve_type(self, value: Any, info: Any, abstract_type: Any) -> str | None:
        _ = abstract_type
        graphql_type = self.resolve_entity_type(value, info.schema)
        return graphql_type.name if graphql_type is not None else None

    def _unresolved(self, position: int, type_name: object, reason: str) -> None:
        log(
            self._log_sink,
            "warning",
            "entity representation unresolved",
            position=position,
            typename=type_name,
            reason=reason,
        )


async def _settle(item: Awaitable[Any] | None) -> Any:
    if item is None:
        return None
    return await item
