from .bindables import apply_default_resolver, build_bindables
from .parser import DEFAULT_SCHEMA_FILE_EXTENSION, SchemaParser, normalize_extension

__all__ = [
    "DEFAULT_SCHEMA_FILE_EXTENSION",
    "SchemaParser",
    "apply_default_resolver",
    "build_bindables",
    "normalize_extension",
]
