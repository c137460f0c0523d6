# storefront/services/product_client.py
from typing import Any, List

import requests
from pydantic import ValidationError as PydanticValidationError
from requests import RequestException

from storefront.domain.errors import FetchCancelled, ProductNotFoundError, TransientFetchError
from storefront.domain.schemas import Product, ProductIn
from storefront.utils.cancellation import CancelToken
from storefront.utils.retry import http_retry
from storefront.utils.settings import CATALOG_API_URL, CATALOG_TIMEOUT_SECONDS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class ProductClient:
    """
    Client for the remote product catalog.
    The demo catalog does not persist writes, so create/update/delete
    responses are advisory only.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = CATALOG_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ):
        self.base_url = (base_url or CATALOG_API_URL).rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @http_retry()
    def _send(self, method: str, path: str, token: CancelToken | None, **kwargs) -> requests.Response:
        if token is not None:
            token.raise_if_cancelled()

        url = f"{self.base_url}{path}"
        logger.info(f"ProductClient {method} {url}")

        resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        if resp.status_code == 404:
            raise ProductNotFoundError(f"Not found: {path}")
        resp.raise_for_status()
        return resp

    def _request(self, method: str, path: str, token: CancelToken | None = None, **kwargs) -> Any:
        try:
            resp = self._send(method, path, token, **kwargs)
        except RequestException as e:
            if token is not None and token.cancelled:
                raise FetchCancelled() from e
            status = getattr(getattr(e, "response", None), "status_code", None)
            logger.error(f"Catalog request {method} {path} failed: {e}")
            raise TransientFetchError(f"Couldn't reach the catalog: {e}", status_code=status) from e

        # the response may arrive after the caller moved on
        if token is not None:
            token.raise_if_cancelled()

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            logger.error(f"Catalog returned a non-JSON body for {method} {path}: {e}")
            raise TransientFetchError(f"Catalog sent an unreadable response: {e}", status_code=resp.status_code) from e

    @staticmethod
    def _parse(data: Any) -> Product:
        try:
            return Product.model_validate(data)
        except PydanticValidationError as e:
            logger.error(f"Catalog returned a malformed product: {e}")
            raise TransientFetchError(f"Catalog sent a malformed product: {e}") from e

    def list_products(self, token: CancelToken | None = None) -> List[Product]:
        data = self._request("GET", "/products", token)
        return [self._parse(p) for p in data] if isinstance(data, list) else []

    def get_product(self, product_id: int, token: CancelToken | None = None) -> Product:
        data = self._request("GET", f"/products/{product_id}", token)
        if not data:
            # the demo catalog answers unknown ids with an empty body
            raise ProductNotFoundError(f"Product {product_id} not found")
        return self._parse(data)

    def list_categories(self, token: CancelToken | None = None) -> List[str]:
        data = self._request("GET", "/products/categories", token)
        return [str(c) for c in data] if isinstance(data, list) else []

    def create_product(self, payload: ProductIn) -> Product:
        data = self._request("POST", "/products", json=payload.to_payload())
        return self._parse({**payload.to_payload(), **(data or {})})

    def update_product(self, product_id: int, payload: ProductIn) -> Product:
        data = self._request("PUT", f"/products/{product_id}", json=payload.to_payload())
        return self._parse({**payload.to_payload(), "id": product_id, **(data or {})})

    def delete_product(self, product_id: int) -> Product | None:
        data = self._request("DELETE", f"/products/{product_id}")
        return self._parse(data) if data else None
