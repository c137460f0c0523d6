# storefront/services/cart_service.py
from decimal import Decimal
from typing import Any, Dict, List

from storefront.domain import cart as reducer
from storefront.domain.schemas import CartLineItem
from storefront.repos.cart_repo import CartRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Cart Store: the single owner of cart state.
    commands (add, remove, update, clear) replace the item list and persist the snapshot
    queries (items, count, total, get_cart) only read
    """

    def __init__(self, repo: CartRepo):
        self.repo = repo
        self._items: List[CartLineItem] = repo.load() or []
        self._recompute()
        logger.info(f"Cart loaded with {len(self._items)} line items")

    #query
    @property
    def items(self) -> List[CartLineItem]:
        return list(self._items)

    @property
    def count(self) -> int:
        return self._count

    @property
    def total(self) -> Decimal:
        return self._total

    def get_cart(self) -> Dict[str, Any]:
        return {
            "items": self.items,
            "count": self._count,
            "total": self._total,
        }

    #commands
    def add_item(self, product: Any, quantity: int = 1) -> Dict[str, Any]:
        self._commit(reducer.add_line_item(self._items, product, quantity))
        logger.info(f"Added {quantity} x product {reducer.product_id_of(product)} to cart")
        return self.get_cart()

    def remove_item(self, product_id) -> Dict[str, Any]:
        self._commit(reducer.remove_line_item(self._items, product_id))
        logger.info(f"Removed product {product_id} from cart")
        return self.get_cart()

    def update_quantity(self, product_id, quantity: int) -> Dict[str, Any]:
        self._commit(reducer.update_line_quantity(self._items, product_id, quantity))
        logger.info(f"Quantity of product {product_id} set to {quantity}")
        return self.get_cart()

    def clear(self) -> Dict[str, Any]:
        self._commit([])
        logger.info("Cart cleared")
        return self.get_cart()

    def _commit(self, items: List[CartLineItem]) -> None:
        # totals first, a failure here must leave the current cart in place
        count = reducer.cart_count(items)
        total = reducer.cart_total(items)
        self._items, self._count, self._total = items, count, total
        # save never raises, a failed write only leaves the snapshot stale
        self.repo.save(self._items)

    def _recompute(self) -> None:
        self._count = reducer.cart_count(self._items)
        self._total = reducer.cart_total(self._items)
