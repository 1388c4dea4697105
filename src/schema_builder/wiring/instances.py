from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, TypeVar

from graphql import default_field_resolver

T = TypeVar("T")

FieldResolver = Callable[..., Any]


class InstanceProvider(Protocol):
    # Supplies the singleton behind a handler class; the builder never constructs handlers itself.
    def get_instance(self, cls: type[T]) -> T: ...

    def default_field_resolver(self) -> FieldResolver: ...


class DefaultInstanceProvider:
    # Instantiates handler classes with no arguments, once per class.
    def __init__(self) -> None:
        self._instances: dict[type, object] = {}

    def get_instance(self, cls: type[T]) -> T:
        instance = self._instances.get(cls)
        if instance is None:
            instance = cls()
            self._instances[cls] = instance
        return instance  # type: ignore[return-value]

    def default_field_resolver(self) -> FieldResolver:
        # Mapping keys or attributes named after the field.
        return default_field_resolver


class MappingInstanceProvider(DefaultInstanceProvider):
    # Pre-built instances take precedence; anything else falls back to no-arg construction.
    def __init__(self, instances: dict[type, object] | None = None) -> None:
        super().__init__()
        for cls, instance in (instances or {}).items():
            if not isinstance(instance, cls):
                raise TypeError(f"instance for {cls.__name__} has type {type(instance).__name__}")
            self._instances[cls] = instance
