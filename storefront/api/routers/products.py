# storefront/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from storefront.api.deps import get_product_client
from storefront.domain.catalog import ALL_CATEGORIES, category_options, filter_products
from storefront.domain.errors import ProductNotFoundError, TransientFetchError
from storefront.domain.schemas import Product, ProductIn
from storefront.services.product_client import ProductClient

router = APIRouter(prefix="/products", tags=["products"])


def _unavailable(e: TransientFetchError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail={"message": "Couldn't load products. Please try again.", "retryable": True, "error": str(e)},
    )


@router.get("", response_model=List[Product])
def list_products(
    q: str = Query("", description="Search in title and description"),
    category: str = Query(ALL_CATEGORIES),
    client: ProductClient = Depends(get_product_client),
):
    try:
        products = client.list_products()
    except TransientFetchError as e:
        raise _unavailable(e)
    return filter_products(products, q, category)


@router.get("/categories", response_model=List[str])
def list_categories(client: ProductClient = Depends(get_product_client)):
    try:
        return category_options(client.list_categories())
    except TransientFetchError as e:
        raise _unavailable(e)


@router.get("/{product_id}", response_model=Product)
def get_product(product_id: int, client: ProductClient = Depends(get_product_client)):
    try:
        return client.get_product(product_id)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except TransientFetchError as e:
        raise _unavailable(e)


@router.post("", response_model=Product, status_code=201)
def create_product(payload: ProductIn, client: ProductClient = Depends(get_product_client)):
    try:
        return client.create_product(payload)
    except TransientFetchError as e:
        raise _unavailable(e)


@router.put("/{product_id}", response_model=Product)
def update_product(product_id: int, payload: ProductIn, client: ProductClient = Depends(get_product_client)):
    try:
        return client.update_product(product_id, payload)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except TransientFetchError as e:
        raise _unavailable(e)


@router.delete("/{product_id}")
def delete_product(product_id: int, client: ProductClient = Depends(get_product_client)):
    try:
        client.delete_product(product_id)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except TransientFetchError as e:
        raise _unavailable(e)
    return {"deleted": True, "id": product_id}
