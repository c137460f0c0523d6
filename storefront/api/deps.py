# storefront/api/deps.py
from dataclasses import dataclass

from fastapi import Request

from storefront.repos.cart_repo import CartRepo
from storefront.repos.kv_store import KeyValueStore, build_kv_store
from storefront.services.cart_service import CartService
from storefront.services.order_service import OrderService
from storefront.services.product_client import ProductClient


@dataclass
class Container:
    """Service objects owned by one app instance and handed to the routers."""

    product_client: ProductClient
    cart_service: CartService
    order_service: OrderService


def build_container(
    store: KeyValueStore | None = None,
    product_client: ProductClient | None = None,
    **order_options,
) -> Container:
    cart_service = CartService(CartRepo(store if store is not None else build_kv_store()))
    return Container(
        product_client=product_client or ProductClient(),
        cart_service=cart_service,
        order_service=OrderService(cart_service, **order_options),
    )


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_cart_service(request: Request) -> CartService:
    return get_container(request).cart_service


def get_order_service(request: Request) -> OrderService:
    return get_container(request).order_service


def get_product_client(request: Request) -> ProductClient:
    return get_container(request).product_client
