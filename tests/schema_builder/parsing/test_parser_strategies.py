from __future__ import annotations

from schema_builder.annotations.graphql import (
    data_loader,
    entity,
    field,
    schema_configuration,
    type_configuration,
)
from schema_builder.loaders.batch import BatchLoader, MappedBatchLoader
from schema_builder.pipelines.parsing import (
    DataLoaderParser,
    EntityParser,
    TypeConfigurationParser,
    default_strategies,
)
from schema_builder.registry.results import ParsedResults
from schema_builder.wiring.instances import DefaultInstanceProvider, MappingInstanceProvider


class User:
    def __init__(self, user_id: str) -> None:
        self.id = user_id


@schema_configuration()
class UserLoaders:
    @data_loader()
    def users(self) -> BatchLoader:
        return BatchLoader(lambda keys: [User(key) for key in keys])

    @data_loader("accounts")
    def account_loader(self) -> MappedBatchLoader:
        return MappedBatchLoader(lambda keys: {key: key for key in keys})

    def helper(self) -> str:
        return "not a loader"


@schema_configuration()
class BrokenLoaders:
    @data_loader()
    def explodes(self) -> BatchLoader:
        raise RuntimeError("database unavailable")

    @data_loader()
    def wrong_shape(self):
        return [1, 2, 3]

    @data_loader()
    def healthy(self) -> BatchLoader:
        return BatchLoader(lambda keys: keys)


@type_configuration("Query")
class QueryResolvers:
    def __init__(self) -> None:
        self.greeting = "hello"

    @field()
    def hello(self, _obj, _info) -> str:
        return self.greeting

    @field("currentUser")
    def me(self, _obj, _info) -> User:
        return User("1")


class Plain:
    def method(self) -> None:
        return None


def test_unmarked_class_registers_nothing() -> None:
    # Every strategy is a no-op for classes without its marker.
    results = ParsedResults()
    provider = DefaultInstanceProvider()
    for strategy in default_strategies():
        assert strategy.parse(Plain, provider, results) == []
    assert len(results.loaders) == 0
    assert results.resolvers == {}
    assert len(results.types) == 0


def test_data_loader_members_register_under_field_name() -> None:
    results = ParsedResults()
    outcomes = DataLoaderParser().parse(UserLoaders, DefaultInstanceProvider(), results)

    assert results.loaders.names() == ["users", "accounts"]
    assert [item.registered_as for item in outcomes] == ["users", "accounts"]
    assert all(item.status == "registered" for item in outcomes)


def test_failing_loader_member_does_not_block_siblings() -> None:
    # One broken member is reported; the rest of the class still registers.
    results = ParsedResults()
    outcomes = {item.member: item for item in DataLoaderParser().parse(BrokenLoaders, DefaultInstanceProvider(), results)}

    assert outcomes["explodes"].status == "failed"
    assert outcomes["explodes"].error == "RuntimeError: database unavailable"
    assert outcomes["wrong_shape"].status == "skipped"
    assert outcomes["wrong_shape"].ok
    assert "unexpected loader shape: list" in (outcomes["wrong_shape"].error or "")
    assert outcomes["healthy"].status == "registered"
    assert results.loaders.names() == ["healthy"]


def test_type_configuration_binds_fields_of_the_named_type() -> None:
    results = ParsedResults()
    instance = QueryResolvers()
    instance.greeting = "provided"
    provider = MappingInstanceProvider({QueryResolvers: instance})

    outcomes = TypeConfigurationParser().parse(QueryResolvers, provider, results)

    assert [item.registered_as for item in outcomes] == ["Query.hello", "Query.currentUser"]
    # Resolvers are bound to the provider's instance.
    assert results.resolvers[("Query", "hello")](None, None) == "provided"
    assert results.resolvers[("Query", "currentUser")](None, None).id == "1"


def test_entity_parser_registers_metadata_in_written_order() -> None:
    class Admin(User):
        pass

    @entity(Admin, loader="admins")
    @entity(User, loader="users", id_field="uid")
    class Entities:
        pass

    results = ParsedResults()
    outcomes = EntityParser().parse(Entities, DefaultInstanceProvider(), results)

    assert [item.member for item in outcomes] == ["@entity(Admin)", "@entity(User)"]
    assert [item.external_type_name for item in results.types] == ["Admin", "User"]
    user_meta = results.types.get(User)
    assert user_meta is not None
    assert user_meta.identifier_field_name == "uid"
    assert user_meta.loader_ref == "users"


def test_provider_instances_are_reused_across_strategies() -> None:
    constructed: list[object] = []

    @schema_configuration()
    @type_configuration("Query")
    class Combined:
        def __init__(self) -> None:
            constructed.append(self)

        @data_loader()
        def things(self) -> BatchLoader:
            return BatchLoader(lambda keys: keys)

        @field()
        def thing(self, _obj, _info) -> str:
            return "thing"

    results = ParsedResults()
    provider = DefaultInstanceProvider()
    for strategy in default_strategies():
        strategy.parse(Combined, provider, results)

    assert len(constructed) == 1
    assert "things" in results.loaders
    assert ("Query", "thing") in results.resolvers
