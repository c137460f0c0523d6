"""
Cart reducer tests

Pure functions only: no storage, no service.
"""
from __future__ import annotations

from decimal import Decimal

import pytest

from storefront.domain import cart as reducer
from storefront.domain.errors import ValidationError
from storefront.domain.schemas import Product


class TestAddLineItem:
    def test_new_product_gets_single_line_with_snapshot_fields(self, keyboard):
        items = reducer.add_line_item([], keyboard, 1)

        assert len(items) == 1
        line = items[0]
        assert line.id == 1
        assert line.title == "Keyboard"
        assert line.price == Decimal("199.99")
        assert line.image == "https://img.test/keyboard.png"
        assert line.quantity == 1
        # catalog-only fields are not kept
        assert not hasattr(line, "description")
        assert not hasattr(line, "rating")

    def test_existing_product_is_merged(self, keyboard):
        items = reducer.add_line_item([], keyboard, 2)
        items = reducer.add_line_item(items, keyboard, 3)

        assert len(items) == 1
        assert items[0].quantity == 5

    def test_input_list_is_not_mutated(self, keyboard, mouse):
        before = reducer.add_line_item([], keyboard, 1)
        after = reducer.add_line_item(before, keyboard, 1)
        reducer.add_line_item(before, mouse, 1)

        assert before[0].quantity == 1
        assert after[0].quantity == 2
        assert len(before) == 1

    def test_insertion_order_is_kept(self, keyboard, mouse):
        items = reducer.add_line_item([], mouse, 1)
        items = reducer.add_line_item(items, keyboard, 1)
        items = reducer.add_line_item(items, mouse, 1)

        assert [i.id for i in items] == [2, 1]

    def test_accepts_product_model(self, keyboard):
        items = reducer.add_line_item([], Product.model_validate(keyboard), 1)
        assert items[0].title == "Keyboard"

    @pytest.mark.parametrize("quantity", [0, -1, 1.5, "2", True])
    def test_rejects_invalid_quantity(self, keyboard, quantity):
        with pytest.raises(ValidationError) as exc:
            reducer.add_line_item([], keyboard, quantity)
        assert "quantity" in exc.value.errors

    def test_rejects_product_without_id(self):
        with pytest.raises(ValidationError):
            reducer.add_line_item([], {"title": "No id", "price": 1}, 1)


class TestUpdateAndRemove:
    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity_removes_line(self, keyboard, quantity):
        items = reducer.add_line_item([], keyboard, 2)
        assert reducer.update_line_quantity(items, 1, quantity) == []

    def test_update_sets_quantity(self, keyboard, mouse):
        items = reducer.add_line_item([], keyboard, 1)
        items = reducer.add_line_item(items, mouse, 1)

        items = reducer.update_line_quantity(items, 2, 7)

        assert [(i.id, i.quantity) for i in items] == [(1, 1), (2, 7)]

    def test_update_unknown_id_is_noop(self, keyboard):
        items = reducer.add_line_item([], keyboard, 1)
        assert reducer.update_line_quantity(items, 99, 3) == items

    @pytest.mark.parametrize("quantity", [2.5, "3", True, None])
    def test_update_rejects_non_integer_quantity(self, keyboard, quantity):
        items = reducer.add_line_item([], keyboard, 1)

        with pytest.raises(ValidationError) as exc:
            reducer.update_line_quantity(items, 1, quantity)

        assert "quantity" in exc.value.errors
        assert items[0].quantity == 1

    def test_remove_unknown_id_is_noop(self, keyboard):
        items = reducer.add_line_item([], keyboard, 1)
        assert reducer.remove_line_item(items, 99) == items


def test_count_and_total(keyboard, mouse):
    items = reducer.add_line_item([], keyboard, 2)
    items = reducer.add_line_item(items, mouse, 3)

    assert reducer.cart_count(items) == 5
    assert reducer.cart_total(items) == Decimal("199.99") * 2 + Decimal("49.50") * 3


def test_empty_cart_totals():
    assert reducer.cart_count([]) == 0
    assert reducer.cart_total([]) == Decimal("0")
