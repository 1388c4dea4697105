from .graphql import (
    DataLoaderMeta,
    EntityMeta,
    FieldMeta,
    SchemaConfigurationMeta,
    TypeConfigurationMeta,
    data_loader,
    entity,
    field,
    get_entity_metas,
    get_schema_configuration_meta,
    get_type_configuration_meta,
    has_markers,
    schema_configuration,
    type_configuration,
)

__all__ = [
    "DataLoaderMeta",
    "EntityMeta",
    "FieldMeta",
    "SchemaConfigurationMeta",
    "TypeConfigurationMeta",
    "data_loader",
    "entity",
    "field",
    "get_entity_metas",
    "get_schema_configuration_meta",
    "get_type_configuration_meta",
    "has_markers",
    "schema_configuration",
    "type_configuration",
]
