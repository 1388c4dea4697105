from __future__ import annotations

from schema_builder.annotations.graphql import get_entity_metas
from schema_builder.pipelines.parsing.strategy import MemberResult, describe_error, member_result
from schema_builder.registry.results import ParsedResults
from schema_builder.registry.types import TypeMetadata
from schema_builder.wiring.instances import InstanceProvider


class EntityParser:
    # Registers federation TypeMetadata declared with @entity. Needs no handler instance.
    name = "entity"

    def parse(
        self,
        cls: type,
        provider: InstanceProvider,
        results: ParsedResults,
    ) -> list[MemberResult]:
        _ = provider
        outcomes: list[MemberResult] = []
        for meta in get_entity_metas(cls):
            member = f"@entity({meta.type_name})"
            try:
                results.types.register(
                    TypeMetadata(
                        source_type=meta.source,
                        external_type_name=meta.type_name,
                        identifier_field_name=meta.id_field,
                        loader_ref=meta.loader,
                    )
                )
            except ValueError as exc:
                outcomes.append(member_result(self.name, cls, member, "failed", error=describe_error(exc)))
                continue
            outcomes.append(member_result(self.name, cls, member, "registered", registered_as=meta.type_name))
        return outcomes
