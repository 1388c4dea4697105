from __future__ import annotations

from schema_builder.annotations.graphql import FIELD_ATTR, FieldMeta, get_type_configuration_meta
from schema_builder.pipelines.parsing.strategy import (
    MemberResult,
    declared_members,
    describe_error,
    member_result,
)
from schema_builder.registry.results import ParsedResults
from schema_builder.wiring.instances import InstanceProvider


class TypeConfigurationParser:
    # Binds every @field member of a @type_configuration class as a resolver of that type.
    name = "type_configuration"

    def parse(
        self,
        cls: type,
        provider: InstanceProvider,
        results: ParsedResults,
    ) -> list[MemberResult]:
        type_meta = get_type_configuration_meta(cls)
        if type_meta is None:
            return []
        instance = provider.get_instance(cls)
        outcomes: list[MemberResult] = []
        for member_name, meta in declared_members(cls, FIELD_ATTR):
            if not isinstance(meta, FieldMeta):
                continue
            field_name = meta.name or member_name
            coordinate = f"{type_meta.type_name}.{field_name}"
            try:
                resolver = getattr(instance, member_name)
                results.add_resolver(type_meta.type_name, field_name, resolver)
            except Exception as exc:  # noqa: BLE001 - one bad member must not abort the scan
                outcomes.append(
                    member_result(self.name, cls, member_name, "failed", error=describe_error(exc))
                )
                continue
            outcomes.append(member_result(self.name, cls, member_name, "registered", registered_as=coordinate))
        return outcomes
