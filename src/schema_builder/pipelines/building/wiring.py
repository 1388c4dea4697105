from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from schema_builder.loaders.batch import LoaderFunction
from schema_builder.observability.logging import LogSink, NullLogSink, log
from schema_builder.pipelines.discovery import collect_classes
from schema_builder.pipelines.parsing import ClassParserStrategy, ScanReport, default_strategies
from schema_builder.pipelines.parsing.strategy import describe_error, member_result
from schema_builder.registry.results import ParsedResults, Resolver
from schema_builder.registry.types import TypeMetadata
from schema_builder.wiring.instances import FieldResolver, InstanceProvider


@dataclass(frozen=True, slots=True)
class WiringConfig:
    # Field coordinate (type name, field name) -> resolver, plus the fallback resolver.
    resolvers: Mapping[tuple[str, str], Resolver]
    default_resolver: FieldResolver

    def type_names(self) -> list[str]:
        names: list[str] = []
        for type_name, _ in self.resolvers:
            if type_name not in names:
                names.append(type_name)
        return names

    def fields_of(self, type_name: str) -> dict[str, Resolver]:
        return {
            field_name: resolver
            for (owner, field_name), resolver in self.resolvers.items()
            if owner == type_name
        }


@dataclass(slots=True)
class RegistrationManifest:
    # Explicit registrations applied after the class scan, in the order they were added.
    loaders: list[tuple[str, LoaderFunction]] = field(default_factory=list)
    resolvers: list[tuple[str, str, Resolver]] = field(default_factory=list)
    entities: list[TypeMetadata] = field(default_factory=list)

    def apply(self, results: ParsedResults) -> None:
        for name, loader in self.loaders:
            results.loaders.add_batch_loader(name, loader)
        for type_name, field_name, resolver in self.resolvers:
            results.add_resolver(type_name, field_name, resolver)
        for metadata in self.entities:
            results.types.register(metadata)

    def __len__(self) -> int:
        return len(self.loaders) + len(self.resolvers) + len(self.entities)


class WiringBuilder:
    # Runs every parser strategy over every discovered class and freezes the result into a WiringConfig.
    def __init__(
        self,
        *,
        results: ParsedResults,
        provider: InstanceProvider,
        base_package: str = "",
        additional_classes: Iterable[type] = (),
        strategies: list[ClassParserStrategy] | None = None,
        manifest: RegistrationManifest | None = None,
        log_sink: LogSink | None = None,
    ) -> None:
        self._results = results
        self._provider = provider
        self._base_package = base_package
        self._additional_classes = list(additional_classes)
        self._strategies = strategies if strategies is not None else default_strategies()
        self._manifest = manifest or RegistrationManifest()
        self._log_sink = log_sink or NullLogSink()
        self.report = ScanReport()

    @property
    def results(self) -> ParsedResults:
        return self._results

    def discover(self) -> list[type]:
        classes = collect_classes(self._additional_classes, self._base_package)
        log(
            self._log_sink,
            "info",
            "schema classes discovered",
            count=len(classes),
            base_package=self._base_package,
        )
        return classes

    def scan(self, classes: Iterable[type]) -> ScanReport:
        report = ScanReport()
        for cls in classes:
            for strategy in self._strategies:
                try:
                    report.extend(strategy.parse(cls, self._provider, self._results))
                except Exception as exc:  # noqa: BLE001 - failures stay local to one class
                    report.extend(
                        [member_result(strategy.name, cls, "<class>", "failed", error=describe_error(exc))]
                    )
        for failure in report.failures:
            log(
                self._log_sink,
                "error",
                "scan member failed",
                **{
                    "class": failure.class_name,
                    "member": failure.member,
                    "strategy": failure.strategy,
                    "error": failure.error,
                },
            )
        return report

    def build_wiring(self) -> WiringConfig:
        # Re-running overwrites registrations by name; nothing accumulates twice.
        self.report = self.scan(self.discover())
        self._manifest.apply(self._results)
        wiring = WiringConfig(
            resolvers=MappingProxyType(dict(self._results.resolvers)),
            default_resolver=self._provider.default_field_resolver(),
        )
        log(
            self._log_sink,
            "info",
            "wiring built",
            resolvers=len(wiring.resolvers),
            loaders=len(self._results.loaders),
            entities=len(self._results.types),
            failures=len(self.report.failures),
        )
        return wiring
