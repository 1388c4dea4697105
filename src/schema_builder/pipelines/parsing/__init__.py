from .dataloaders import DataLoaderParser
from .entities import EntityParser
from .resolvers import TypeConfigurationParser
from .strategy import ClassParserStrategy, MemberResult, ScanReport


def default_strategies() -> list[ClassParserStrategy]:
    # Loaders first so resolvers and entities registered later can rely on them at request time.
    return [DataLoaderParser(), TypeConfigurationParser(), EntityParser()]


__all__ = [
    "ClassParserStrategy",
    "DataLoaderParser",
    "EntityParser",
    "MemberResult",
    "ScanReport",
    "TypeConfigurationParser",
    "default_strategies",
]
