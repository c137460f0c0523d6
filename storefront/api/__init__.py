from fastapi import FastAPI

from storefront.api.deps import Container, build_container
from storefront.api.routers import cart, checkout, health, products


def create_app(container: Container | None = None) -> FastAPI:
    app = FastAPI(
        title="Storefront Service",
        version="1.0.0",
    )
    app.state.container = container or build_container()

    app.include_router(health.router)
    app.include_router(products.router)
    app.include_router(cart.router)
    app.include_router(checkout.router)
    return app
