from __future__ import annotations

from ariadne import ObjectType
from graphql import GraphQLObjectType, GraphQLSchema

from schema_builder.pipelines.building.wiring import WiringConfig
from schema_builder.wiring.instances import FieldResolver


def build_bindables(wiring: WiringConfig) -> list[ObjectType]:
    # One ariadne ObjectType per schema type that has at least one wired field.
    bindables: list[ObjectType] = []
    for type_name in wiring.type_names():
        object_type = ObjectType(type_name)
        for field_name, resolver in wiring.fields_of(type_name).items():
            object_type.set_field(field_name, resolver)
        bindables.append(object_type)
    return bindables


def apply_default_resolver(schema: GraphQLSchema, resolver: FieldResolver) -> None:
    # Fields nobody wired explicitly fall back to the provider's resolver.
    for name, graphql_type in schema.type_map.items():
        if name.startswith("__") or not isinstance(graphql_type, GraphQLObjectType):
            continue
        for graphql_field in graphql_type.fields.values():
            if graphql_field.resolve is None:
                graphql_field.resolve = resolver
