from __future__ import annotations

from schema_builder.annotations.graphql import (
    DATA_LOADER_ATTR,
    DataLoaderMeta,
    get_schema_configuration_meta,
)
from schema_builder.loaders.batch import is_loader_function
from schema_builder.pipelines.parsing.strategy import (
    MemberResult,
    declared_members,
    describe_error,
    member_result,
)
from schema_builder.registry.results import ParsedResults
from schema_builder.wiring.instances import InstanceProvider


class DataLoaderParser:
    # Registers every @data_loader member of a @schema_configuration class.
    name = "data_loader"

    def parse(
        self,
        cls: type,
        provider: InstanceProvider,
        results: ParsedResults,
    ) -> list[MemberResult]:
        if get_schema_configuration_meta(cls) is None:
            return []
        instance = provider.get_instance(cls)
        outcomes: list[MemberResult] = []
        for member_name, meta in declared_members(cls, DATA_LOADER_ATTR):
            if not isinstance(meta, DataLoaderMeta):
                continue
            field_name = meta.name or member_name
            try:
                produced = getattr(instance, member_name)()
            except Exception as exc:  # noqa: BLE001 - one bad member must not abort the scan
                outcomes.append(
                    member_result(self.name, cls, member_name, "failed", error=describe_error(exc))
                )
                continue
            if not is_loader_function(produced):
                # Only BatchLoader / MappedBatchLoader shapes are loaders; anything else is ignored.
                outcomes.append(
                    member_result(
                        self.name,
                        cls,
                        member_name,
                        "skipped",
                        error=f"unexpected loader shape: {type(produced).__name__}",
                    )
                )
                continue
            results.loaders.add_batch_loader(field_name, produced)
            outcomes.append(member_result(self.name, cls, member_name, "registered", registered_as=field_name))
        return outcomes
