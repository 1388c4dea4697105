from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")

SCHEMA_CONFIGURATION_ATTR = "__schema_configuration_meta__"
DATA_LOADER_ATTR = "__data_loader_meta__"
TYPE_CONFIGURATION_ATTR = "__type_configuration_meta__"
FIELD_ATTR = "__field_meta__"
ENTITY_ATTR = "__entity_metas__"


@dataclass(frozen=True, slots=True)
class SchemaConfigurationMeta:
    # Marks a handler class whose members expose batched loaders.
    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("SchemaConfigurationMeta.name must be a non-empty string")


@dataclass(frozen=True, slots=True)
class DataLoaderMeta:
    # Empty name means "use the member name".
    name: str = ""


@dataclass(frozen=True, slots=True)
class TypeConfigurationMeta:
    # Marks a handler class whose @field members resolve fields of one schema type.
    type_name: str

    def __post_init__(self) -> None:
        if not self.type_name:
            raise ValueError("TypeConfigurationMeta.type_name must be a non-empty string")


@dataclass(frozen=True, slots=True)
class FieldMeta:
    name: str = ""


@dataclass(frozen=True, slots=True)
class EntityMeta:
    # Federation metadata: runtime type <-> external type name <-> id field <-> loader name.
    source: type
    type_name: str
    id_field: str
    loader: str

    def __post_init__(self) -> None:
        if not isinstance(self.source, type):
            raise ValueError("EntityMeta.source must be a class")
        if not self.type_name:
            raise ValueError("EntityMeta.type_name must be a non-empty string")
        if not self.id_field:
            raise ValueError("EntityMeta.id_field must be a non-empty string")
        if not self.loader:
            raise ValueError("EntityMeta.loader must be a non-empty string")


def schema_configuration(*, name: str | None = None) -> Callable[[T], T]:
    def _decorate(target: T) -> T:
        if not isinstance(target, type):
            raise ValueError("@schema_configuration can only decorate classes")
        resolved_name = name if name is not None else target.__name__
        setattr(target, SCHEMA_CONFIGURATION_ATTR, SchemaConfigurationMeta(name=resolved_name))
        return target

    return _decorate


def data_loader(name: str = "") -> Callable[[T], T]:
    # Member must return a BatchLoader or MappedBatchLoader when invoked on the handler instance.
    meta = DataLoaderMeta(name=name)

    def _decorate(target: T) -> T:
        setattr(target, DATA_LOADER_ATTR, meta)
        return target

    return _decorate


def type_configuration(name: str) -> Callable[[T], T]:
    meta = TypeConfigurationMeta(type_name=name)

    def _decorate(target: T) -> T:
        if not isinstance(target, type):
            raise ValueError("@type_configuration can only decorate classes")
        setattr(target, TYPE_CONFIGURATION_ATTR, meta)
        return target

    return _decorate


def field(name: str = "") -> Callable[[T], T]:
    meta = FieldMeta(name=name)

    def _decorate(target: T) -> T:
        setattr(target, FIELD_ATTR, meta)
        return target

    return _decorate


def entity(
    source: type,
    *,
    loader: str,
    type_name: str | None = None,
    id_field: str = "id",
) -> Callable[[T], T]:
    # Stackable; metas keep the top-to-bottom order the decorators are written in.
    meta = EntityMeta(
        source=source,
        type_name=type_name if type_name is not None else getattr(source, "__name__", ""),
        id_field=id_field,
        loader=loader,
    )

    def _decorate(target: T) -> T:
        if not isinstance(target, type):
            raise ValueError("@entity can only decorate classes")
        # Read from the class's own namespace so subclasses do not inherit parent entities.
        existing = target.__dict__.get(ENTITY_ATTR, ())
        setattr(target, ENTITY_ATTR, (meta, *existing))
        return target

    return _decorate


def get_schema_configuration_meta(target: object) -> SchemaConfigurationMeta | None:
    meta = _own_attr(target, SCHEMA_CONFIGURATION_ATTR)
    return meta if isinstance(meta, SchemaConfigurationMeta) else None


def get_type_configuration_meta(target: object) -> TypeConfigurationMeta | None:
    meta = _own_attr(target, TYPE_CONFIGURATION_ATTR)
    return meta if isinstance(meta, TypeConfigurationMeta) else None


def get_entity_metas(target: object) -> tuple[EntityMeta, ...]:
    metas = _own_attr(target, ENTITY_ATTR)
    if not isinstance(metas, tuple):
        return ()
    return tuple(meta for meta in metas if isinstance(meta, EntityMeta))


def get_member_meta(member: object, attr: str) -> object | None:
    # Unwrap staticmethod/classmethod so markers applied under them are still visible.
    func = getattr(member, "__func__", member)
    return getattr(func, attr, None)


def has_markers(target: object) -> bool:
    return (
        get_schema_configuration_meta(target) is not None
        or get_type_configuration_meta(target) is not None
        or bool(get_entity_metas(target))
    )


def _own_attr(target: object, attr: str) -> object | None:
    # Class markers are not inherited: a subclass must be marked on its own.
    if isinstance(target, type):
        return target.__dict__.get(attr)
    return getattr(target, attr, None)
