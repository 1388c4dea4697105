from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ExclusionRule:
    # Representations of `type_name` carrying a string `key` resolve to null without a lookup.
    type_name: str
    key: str

    def __post_init__(self) -> None:
        if not self.type_name or not self.key:
            raise ValueError("ExclusionRule requires non-empty type_name/key")

    def matches(self, representation: Mapping[str, object]) -> bool:
        return representation.get("__typename") == self.type_name and isinstance(
            representation.get(self.key), str
        )


# TODO: confirm with the Product owners whether upc lookups stay excluded or move to the product service.
PRODUCT_UPC_EXCLUSION = ExclusionRule(type_name="Product", key="upc")

DEFAULT_EXCLUSIONS: tuple[ExclusionRule, ...] = (PRODUCT_UPC_EXCLUSION,)


def first_match(rules: Iterable[ExclusionRule], representation: Mapping[str, object]) -> ExclusionRule | None:
    for rule in rules:
        if rule.matches(representation):
            return rule
    return None
