from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Literal, Protocol

from schema_builder.annotations.graphql import get_member_meta
from schema_builder.registry.results import ParsedResults
from schema_builder.wiring.instances import InstanceProvider

MemberStatus = Literal["registered", "skipped", "failed"]


@dataclass(frozen=True, slots=True)
class MemberResult:
    # Outcome of scanning one declared member (or one class-level step) with one strategy.
    class_name: str
    member: str
    strategy: str
    status: MemberStatus
    registered_as: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status != "failed"


@dataclass(slots=True)
class ScanReport:
    results: list[MemberResult] = field(default_factory=list)

    def extend(self, results: list[MemberResult]) -> None:
        self.results.extend(results)

    @property
    def failures(self) -> list[MemberResult]:
        return [item for item in self.results if item.status == "failed"]

    @property
    def registered(self) -> list[MemberResult]:
        return [item for item in self.results if item.status == "registered"]

    @property
    def ok(self) -> bool:
        return not self.failures


class ClassParserStrategy(Protocol):
    # One strategy per marker kind. Classes without the marker are a no-op, not an error.
    name: str

    def parse(
        self,
        cls: type,
        provider: InstanceProvider,
        results: ParsedResults,
    ) -> list[MemberResult]: ...


def declared_members(cls: type, attr: str) -> Iterator[tuple[str, object]]:
    # Members declared on the class itself, in definition order, carrying the given marker.
    for member_name, member in vars(cls).items():
        meta = get_member_meta(member, attr)
        if meta is not None:
            yield member_name, meta


def describe_error(exc: BaseException) -> str:
    return f"{type(exc).__name__}: {exc}"


def member_result(
    strategy: str,
    cls: type,
    member: str,
    status: MemberStatus,
    *,
    registered_as: str | None = None,
    error: str | None = None,
) -> MemberResult:
    return MemberResult(
        class_name=cls.__qualname__,
        member=member,
        strategy=strategy,
        status=status,
        registered_as=registered_as,
        error=error,
    )
