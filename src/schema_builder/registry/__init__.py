from .results import ParsedResults
from .types import EntityTypeResolver, TypeMetadata, TypeRegistry, TypeRule

__all__ = [
    "EntityTypeResolver",
    "ParsedResults",
    "TypeMetadata",
    "TypeRegistry",
    "TypeRule",
]
