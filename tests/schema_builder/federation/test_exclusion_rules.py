from __future__ import annotations

import pytest

from schema_builder.federation.exclusions import PRODUCT_UPC_EXCLUSION, ExclusionRule, first_match


def test_product_upc_rule_needs_a_string_upc() -> None:
    assert PRODUCT_UPC_EXCLUSION.matches({"__typename": "Product", "upc": "1"})
    assert not PRODUCT_UPC_EXCLUSION.matches({"__typename": "Product", "upc": 1})
    assert not PRODUCT_UPC_EXCLUSION.matches({"__typename": "Product", "id": "1"})
    assert not PRODUCT_UPC_EXCLUSION.matches({"__typename": "User", "upc": "1"})


def test_first_match_returns_the_earliest_rule() -> None:
    by_sku = ExclusionRule(type_name="Product", key="sku")
    representation = {"__typename": "Product", "upc": "1", "sku": "2"}

    assert first_match([by_sku, PRODUCT_UPC_EXCLUSION], representation) is by_sku
    assert first_match([], representation) is None


def test_rule_requires_type_and_key() -> None:
    with pytest.raises(ValueError):
        ExclusionRule(type_name="", key="upc")
