# storefront/domain/catalog.py
from typing import Iterable, List

from storefront.domain.schemas import Product

ALL_CATEGORIES = "All Categories"


def category_options(categories: Iterable[str]) -> List[str]:
    return [ALL_CATEGORIES, *categories]


def filter_products(products: Iterable[Product], query: str = "", category: str = ALL_CATEGORIES) -> List[Product]:
    """Case-insensitive search on title or description, limited to one category."""
    q = (query or "").strip().lower()
    category = category or ALL_CATEGORIES

    result = []
    for product in products:
        matches_query = (
            not q
            or q in product.title.lower()
            or q in (product.description or "").lower()
        )
        matches_category = category == ALL_CATEGORIES or product.category == category
        if matches_query and matches_category:
            result.append(product)
    return result
