from __future__ import annotations

import pytest

from schema_builder.annotations.graphql import (
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


class User:
    pass


class Admin(User):
    pass


def test_schema_configuration_defaults_to_class_name() -> None:
    # Marker name falls back to the class __name__.
    @schema_configuration()
    class Loaders:
        pass

    meta = get_schema_configuration_meta(Loaders)
    assert isinstance(meta, SchemaConfigurationMeta)
    assert meta.name == "Loaders"


def test_class_markers_reject_functions() -> None:
    # Class markers only make sense on classes.
    with pytest.raises(ValueError):
        schema_configuration()(lambda: None)
    with pytest.raises(ValueError):
        type_configuration("Query")(lambda: None)


def test_type_configuration_requires_type_name() -> None:
    with pytest.raises(ValueError):
        type_configuration("")


def test_member_markers_attach_meta() -> None:
    # Member markers keep the optional override name.
    @data_loader("users")
    def users_loader():
        return None

    @field()
    def me():
        return None

    assert users_loader.__data_loader_meta__ == DataLoaderMeta(name="users")
    assert me.__field_meta__ == FieldMeta(name="")


def test_entity_defaults_type_name_to_source_name() -> None:
    @entity(User, loader="users")
    class Handlers:
        pass

    assert get_entity_metas(Handlers) == (
        EntityMeta(source=User, type_name="User", id_field="id", loader="users"),
    )


def test_stacked_entities_keep_written_order() -> None:
    # Top-to-bottom decorator order is the registration order.
    @entity(Admin, loader="admins")
    @entity(User, loader="users", id_field="uid")
    class Handlers:
        pass

    metas = get_entity_metas(Handlers)
    assert [meta.type_name for meta in metas] == ["Admin", "User"]
    assert metas[1].id_field == "uid"


def test_entity_rejects_empty_loader() -> None:
    with pytest.raises(ValueError):
        entity(User, loader="")


def test_class_markers_are_not_inherited() -> None:
    # A subclass of a marked handler is not itself a handler.
    @type_configuration("Query")
    class Base:
        pass

    class Child(Base):
        pass

    assert get_type_configuration_meta(Base) == TypeConfigurationMeta(type_name="Query")
    assert get_type_configuration_meta(Child) is None
    assert has_markers(Base)
    assert not has_markers(Child)
