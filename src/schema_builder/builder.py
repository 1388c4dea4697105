from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path
from typing import ClassVar

from ariadne import make_executable_schema
from ariadne.contrib.federation import make_federated_schema
from graphql import GraphQLSchema

from schema_builder.config.loader import resolve_class
from schema_builder.config.models import BuilderConfig, LoggingConfig
from schema_builder.errors import SchemaBuildError
from schema_builder.execution.executor import GraphQL
from schema_builder.execution.instrumentation import Instrumentation, default_instrumentation
from schema_builder.federation.exclusions import DEFAULT_EXCLUSIONS, ExclusionRule
from schema_builder.federation.transformer import FederationTransformer
from schema_builder.loaders.batch import LoaderFunction
from schema_builder.observability.logging import (
    JsonlLogSink,
    LogSink,
    NullLogSink,
    StdoutLogSink,
)
from schema_builder.pipelines.building.wiring import RegistrationManifest, WiringBuilder
from schema_builder.pipelines.discovery import package_directory
from schema_builder.pipelines.parsing.strategy import ScanReport
from schema_builder.registry.results import ParsedResults, Resolver
from schema_builder.registry.types import TypeMetadata
from schema_builder.schema.bindables import apply_default_resolver, build_bindables
from schema_builder.schema.parser import DEFAULT_SCHEMA_FILE_EXTENSION, SchemaParser, normalize_extension
from schema_builder.wiring.instances import DefaultInstanceProvider, InstanceProvider


class GraphQLBuilder:
    # Builds an executable schema from SDL files and marked handler classes.
    # Each builder owns its registries; max_query_cost is process-wide and not enforced here.
    max_query_cost: ClassVar[int] = 0

    def __init__(
        self,
        *,
        provider: InstanceProvider,
        additional_classes: Iterable[type],
        base_package: str,
        schema_file_extension: str,
        schema_paths: Iterable[str | Path],
        instrumentation: Instrumentation,
        is_federated: bool,
        exclusions: Iterable[ExclusionRule],
        manifest: RegistrationManifest,
        log_sink: LogSink,
        max_query_cost: int,
    ) -> None:
        self.results = ParsedResults()
        self.is_federated = is_federated
        self.exclusions = tuple(exclusions)
        self._instrumentation = instrumentation
        self._log_sink = log_sink
        self._wiring_builder = WiringBuilder(
            results=self.results,
            provider=provider,
            base_package=base_package,
            additional_classes=additional_classes,
            manifest=manifest,
            log_sink=log_sink,
        )
        paths = list(schema_paths) or _default_schema_paths(base_package)
        self._schema_parser = SchemaParser(schema_file_extension, paths)
        GraphQLBuilder.max_query_cost = max_query_cost

    @staticmethod
    def new_graphql_builder() -> Builder:
        return Builder()

    @staticmethod
    def from_config(config: BuilderConfig) -> Builder:
        return Builder.from_config(config)

    @property
    def report(self) -> ScanReport:
        return self._wiring_builder.report

    @property
    def instrumentation(self) -> Instrumentation:
        return self._instrumentation

    def scan(self) -> ScanReport:
        # Discovery and parsing only; no schema files are read.
        self._wiring_builder.build_wiring()
        return self.report

    def generate_schema(self) -> GraphQLSchema:
        type_defs = self._schema_parser.type_defs()
        wiring = self._wiring_builder.build_wiring()
        bindables = build_bindables(wiring)
        try:
            if self.is_federated:
                schema = make_federated_schema(type_defs, *bindables)
            else:
                schema = make_executable_schema(type_defs, *bindables)
        except Exception as exc:  # noqa: BLE001 - wrap with explicit error
            raise SchemaBuildError(f"Failed to build executable schema: {exc}") from exc
        apply_default_resolver(schema, wiring.default_resolver)
        if self.is_federated:
            schema = FederationTransformer(
                self.results,
                exclusions=self.exclusions,
                log_sink=self._log_sink,
            ).transform(schema)
        return schema

    def generate_graphql(self) -> GraphQL:
        return GraphQL(
            self.generate_schema(),
            loaders=self.results.loaders,
            instrumentation=self._instrumentation,
        )


class Builder:
    # Fluent configuration surface; every setter returns the builder.
    def __init__(self) -> None:
        self._provider: InstanceProvider = DefaultInstanceProvider()
        self._additional_classes: list[type] = []
        self._base_package = ""
        self._schema_file_extension = DEFAULT_SCHEMA_FILE_EXTENSION
        self._schema_paths: list[str | Path] = []
        self._instrumentation: Instrumentation = default_instrumentation()
        self._max_query_cost = 100
        self._is_federated = False
        self._exclusions: tuple[ExclusionRule, ...] = DEFAULT_EXCLUSIONS
        self._manifest = RegistrationManifest()
        self._log_sink: LogSink = StdoutLogSink()

    @classmethod
    def from_config(cls, config: BuilderConfig) -> Builder:
        builder = (
            cls()
            .set_base_package(config.base_package)
            .set_schema_file_extension(config.schema_file_extension)
            .set_max_query_cost(config.max_query_cost)
            .set_is_federated(config.federated)
            .set_entity_exclusions(
                [ExclusionRule(type_name=item.type_name, key=item.key) for item in config.exclusions]
            )
            .set_log_sink(build_log_sink(config.logging))
        )
        for import_string in config.additional_classes:
            builder.add_class(resolve_class(import_string))
        for path in config.schema_paths:
            builder.add_schema_path(path)
        return builder

    def set_instance_provider(self, provider: InstanceProvider) -> Builder:
        self._provider = provider
        return self

    def add_class(self, cls: type) -> Builder:
        # Insertion order is kept; it decides registration order and thus entity resolution ties.
        if cls not in self._additional_classes:
            self._additional_classes.append(cls)
        return self

    def set_base_package(self, base_package: str) -> Builder:
        self._base_package = base_package
        return self

    def set_schema_file_extension(self, extension: str) -> Builder:
        self._schema_file_extension = normalize_extension(extension)
        return self

    def add_schema_path(self, path: str | Path) -> Builder:
        self._schema_paths.append(path)
        return self

    def set_instrumentation(self, instrumentation: Instrumentation) -> Builder:
        self._instrumentation = instrumentation
        return self

    def set_max_query_cost(self, max_query_cost: int) -> Builder:
        if max_query_cost < 0:
            raise ValueError("max_query_cost must be >= 0")
        self._max_query_cost = max_query_cost
        return self

    def set_is_federated(self, is_federated: bool) -> Builder:
        self._is_federated = is_federated
        return self

    def set_entity_exclusions(self, rules: Iterable[ExclusionRule]) -> Builder:
        self._exclusions = tuple(rules)
        return self

    def set_log_sink(self, sink: LogSink) -> Builder:
        self._log_sink = sink
        return self

    def add_loader(self, name: str, loader: LoaderFunction) -> Builder:
        self._manifest.loaders.append((name, loader))
        return self

    def add_resolver(self, type_name: str, field_name: str, resolver: Resolver) -> Builder:
        self._manifest.resolvers.append((type_name, field_name, resolver))
        return self

    def add_entity(
        self,
        source_type: type,
        type_name: str,
        id_field: str,
        loader_name: str,
    ) -> Builder:
        self._manifest.entities.append(
            TypeMetadata(
                source_type=source_type,
                external_type_name=type_name,
                identifier_field_name=id_field,
                loader_ref=loader_name,
            )
        )
        return self

    def build(self) -> GraphQLBuilder:
        return GraphQLBuilder(
            provider=self._provider,
            additional_classes=list(self._additional_classes),
            base_package=self._base_package,
            schema_file_extension=self._schema_file_extension,
            schema_paths=list(self._schema_paths),
            instrumentation=self._instrumentation,
            is_federated=self._is_federated,
            exclusions=self._exclusions,
            manifest=RegistrationManifest(
                loaders=list(self._manifest.loaders),
                resolvers=list(self._manifest.resolvers),
                entities=list(self._manifest.entities),
            ),
            log_sink=self._log_sink,
            max_query_cost=self._max_query_cost,
        )


def build_log_sink(config: LoggingConfig) -> LogSink:
    if config.sink == "jsonl":
        assert config.path is not None  # validated by config model
        return JsonlLogSink(Path(config.path))
    if config.sink == "none":
        return NullLogSink()
    return StdoutLogSink()


def _default_schema_paths(base_package: str) -> list[str | Path]:
    # SDL files ship next to the handler package by default.
    if base_package:
        directory = package_directory(base_package)
        if directory is not None:
            return [directory]
    return [Path(os.getcwd())]
