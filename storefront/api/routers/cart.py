# storefront/api/routers/cart.py
from fastapi import APIRouter, Depends, HTTPException

from storefront.api.deps import get_cart_service, get_product_client
from storefront.domain.errors import ProductNotFoundError, TransientFetchError, ValidationError
from storefront.domain.schemas import CartItemIn, CartOut, QuantityIn
from storefront.services.cart_service import CartService
from storefront.services.product_client import ProductClient

router = APIRouter(prefix="/cart", tags=["cart"])


@router.get("", response_model=CartOut)
def get_cart(svc: CartService = Depends(get_cart_service)):
    return svc.get_cart()


@router.post("/items", response_model=CartOut)
def add_item(
    payload: CartItemIn,
    svc: CartService = Depends(get_cart_service),
    client: ProductClient = Depends(get_product_client),
):
    # title/price/image are snapshotted from the catalog, never from the client
    try:
        product = client.get_product(payload.product_id)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except TransientFetchError as e:
        raise HTTPException(status_code=502, detail={"message": str(e), "retryable": True})

    try:
        return svc.add_item(product, payload.quantity)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail={"errors": e.errors})


@router.patch("/items/{product_id}", response_model=CartOut)
def update_quantity(product_id: int, payload: QuantityIn, svc: CartService = Depends(get_cart_service)):
    return svc.update_quantity(product_id, payload.quantity)


@router.delete("/items/{product_id}", response_model=CartOut)
def remove_item(product_id: int, svc: CartService = Depends(get_cart_service)):
    return svc.remove_item(product_id)


@router.delete("", response_model=CartOut)
def clear_cart(svc: CartService = Depends(get_cart_service)):
    return svc.clear()
