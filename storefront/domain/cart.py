# storefront/domain/cart.py
"""
Pure cart reducer functions.

Each function takes the current list of line items and returns a new list;
the input list and its items are never mutated.
"""
from decimal import Decimal
from typing import Any, Iterable, List, Mapping

from storefront.domain.errors import ValidationError
from storefront.domain.schemas import CartLineItem


def _field(product: Any, name: str, default=None):
    if isinstance(product, Mapping):
        return product.get(name, default)
    return getattr(product, name, default)


def product_id_of(product: Any):
    return _field(product, "id")


def _check_whole_number(quantity: Any) -> int:
    # bool is an int subclass, reject it explicitly
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError({"quantity": "Quantity must be a whole number"})
    return quantity


def _check_quantity(quantity: Any) -> int:
    _check_whole_number(quantity)
    if quantity <= 0:
        raise ValidationError({"quantity": "Quantity must be greater than 0"})
    return quantity


def snapshot(product: Any, quantity: int) -> CartLineItem:
    """Keep only the fields needed to display the line and compute the total."""
    product_id = product_id_of(product)
    if product_id is None:
        raise ValidationError({"id": "Required"})

    return CartLineItem(
        id=product_id,
        title=_field(product, "title", "") or "",
        price=Decimal(str(_field(product, "price", 0) or 0)),
        image=_field(product, "image", "") or "",
        quantity=quantity,
    )


def add_line_item(items: Iterable[CartLineItem], product: Any, quantity: int = 1) -> List[CartLineItem]:
    quantity = _check_quantity(quantity)
    product_id = product_id_of(product)

    result = []
    merged = False
    for item in items:
        if item.id == product_id:
            result.append(item.model_copy(update={"quantity": item.quantity + quantity}))
            merged = True
        else:
            result.append(item)

    if not merged:
        result.append(snapshot(product, quantity))
    return result


def remove_line_item(items: Iterable[CartLineItem], product_id) -> List[CartLineItem]:
    return [item for item in items if item.id != product_id]


def update_line_quantity(items: Iterable[CartLineItem], product_id, quantity: int) -> List[CartLineItem]:
    quantity = _check_whole_number(quantity)
    if quantity <= 0:
        return remove_line_item(items, product_id)
    return [
        item.model_copy(update={"quantity": quantity}) if item.id == product_id else item
        for item in items
    ]


def cart_count(items: Iterable[CartLineItem]) -> int:
    return sum(item.quantity for item in items)


def cart_total(items: Iterable[CartLineItem]) -> Decimal:
    return sum((item.price * item.quantity for item in items), Decimal("0.00"))
