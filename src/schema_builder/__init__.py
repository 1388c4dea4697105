from .annotations import data_loader, entity, field, schema_configuration, type_configuration
from .builder import Builder, GraphQLBuilder
from .errors import DiscoveryError, SchemaBuildError
from .execution import GraphQL, loader_from
from .federation import ExclusionRule, FederationTransformer
from .loaders import BatchLoader, MappedBatchLoader
from .registry import ParsedResults, TypeMetadata

__all__ = [
    "BatchLoader",
    "Builder",
    "DiscoveryError",
    "ExclusionRule",
    "FederationTransformer",
    "GraphQL",
    "GraphQLBuilder",
    "MappedBatchLoader",
    "ParsedResults",
    "SchemaBuildError",
    "TypeMetadata",
    "data_loader",
    "entity",
    "field",
    "loader_from",
    "schema_configuration",
    "type_configuration",
]
