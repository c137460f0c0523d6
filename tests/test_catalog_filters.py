"""
Product list search and category filtering.
"""
from __future__ import annotations

import pytest

from storefront.domain.catalog import ALL_CATEGORIES, category_options, filter_products
from storefront.domain.schemas import Product


@pytest.fixture()
def products(keyboard, mouse):
    ring = {
        "id": 5,
        "title": "Silver Ring",
        "description": "Sterling silver, fits keyboard warriors",
        "category": "jewelery",
        "price": 9.99,
        "image": "",
    }
    return [Product.model_validate(p) for p in (keyboard, mouse, ring)]


def test_no_filters_returns_everything(products):
    assert filter_products(products) == products


def test_query_matches_title_case_insensitively(products):
    assert [p.id for p in filter_products(products, "  MOUSE ")] == [2]


def test_query_matches_description(products):
    assert [p.id for p in filter_products(products, "keyboard")] == [1, 5]


def test_category_filter(products):
    assert [p.id for p in filter_products(products, "", "jewelery")] == [5]
    assert [p.id for p in filter_products(products, "keyboard", "electronics")] == [1]


def test_all_categories_sentinel(products):
    assert filter_products(products, "", ALL_CATEGORIES) == products
    assert filter_products(products, "", "") == products


def test_no_match(products):
    assert filter_products(products, "toaster") == []


def test_category_options_prepends_sentinel():
    assert category_options(["electronics", "jewelery"]) == [ALL_CATEGORIES, "electronics", "jewelery"]
