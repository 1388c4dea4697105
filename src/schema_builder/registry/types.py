from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class TypeMetadata:
    # Federation metadata for one runtime type.
    source_type: type
    external_type_name: str
    identifier_field_name: str
    loader_ref: str

    def __post_init__(self) -> None:
        if not isinstance(self.source_type, type):
            raise ValueError("TypeMetadata.source_type must be a class")
        if not self.external_type_name:
            raise ValueError("TypeMetadata.external_type_name must be a non-empty string")
        if not self.identifier_field_name:
            raise ValueError("TypeMetadata.identifier_field_name must be a non-empty string")
        if not self.loader_ref:
            raise ValueError("TypeMetadata.loader_ref must be a non-empty string")


@dataclass(slots=True)
class TypeRegistry:
    # At most one entry per source type; iteration follows first-registration order.
    _types: dict[type, TypeMetadata] = field(default_factory=dict)

    def register(self, metadata: TypeMetadata) -> None:
        # Re-registering a source type replaces its metadata but keeps its original position.
        self._types[metadata.source_type] = metadata

    def get(self, source_type: type) -> TypeMetadata | None:
        return self._types.get(source_type)

    def entries(self) -> list[TypeMetadata]:
        return list(self._types.values())

    def __iter__(self) -> Iterator[TypeMetadata]:
        return iter(self.entries())

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, source_type: object) -> bool:
        return source_type in self._types


TypePredicate = Callable[[object], bool]


@dataclass(frozen=True, slots=True)
class TypeRule:
    predicate: TypePredicate
    type_name: str


@dataclass(frozen=True, slots=True)
class EntityTypeResolver:
    # Ordered (predicate, type name) rules; the first matching rule wins.
    rules: tuple[TypeRule, ...] = ()

    @classmethod
    def from_registry(cls, registry: TypeRegistry) -> EntityTypeResolver:
        return cls(
            rules=tuple(
                TypeRule(predicate=_subtype_of(metadata.source_type), type_name=metadata.external_type_name)
                for metadata in registry
            )
        )

    def resolve(self, value: object) -> str | None:
        for rule in self.rules:
            if rule.predicate(value):
                return rule.type_name
        return None


def _subtype_of(source_type: type) -> TypePredicate:
    def _predicate(value: object) -> bool:
        return issubclass(type(value), source_type)

    return _predicate
