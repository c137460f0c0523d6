# storefront/services/catalog_loader.py
"""View-state loader for a single consumer (one screen or one client session)."""
import threading
from dataclasses import dataclass
from typing import Any, Callable, Hashable

from storefront.domain.errors import FetchCancelled, ProductNotFoundError, TransientFetchError
from storefront.utils.cancellation import CancelToken
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

Fetch = Callable[[CancelToken], Any]


@dataclass
class LoadState:
    key: Hashable | None = None
    data: Any = None
    loading: bool = False
    error: str | None = None


class CatalogLoader:
    """
    Holds data/loading/error for one logical catalog view.

    A new load() cancels the one still in flight, and a result is committed
    only while its token is current. A superseded load ends silently.
    """

    def __init__(self):
        self.state = LoadState()
        self._lock = threading.Lock()
        self._token: CancelToken | None = None
        self._last: tuple[Hashable, Fetch] | None = None

    def load(self, key: Hashable, fetch: Fetch) -> Any:
        token = CancelToken()
        with self._lock:
            if self._token is not None:
                self._token.cancel()
            self._token = token
            self._last = (key, fetch)
            self.state.key = key
            self.state.loading = True
            self.state.error = None

        try:
            result = fetch(token)
        except FetchCancelled:
            logger.info(f"Load of {key!r} superseded")
            return None
        except (TransientFetchError, ProductNotFoundError) as e:
            with self._lock:
                if self._is_current(token):
                    self.state.error = str(e)
            return None
        else:
            with self._lock:
                if not self._is_current(token):
                    logger.info(f"Dropping stale result for {key!r}")
                    return None
                self.state.data = result
                return result
        finally:
            # every exit path, including unexpected errors
            with self._lock:
                if token is self._token:
                    self.state.loading = False

    def retry(self) -> Any:
        if self._last is None:
            return None
        key, fetch = self._last
        return self.load(key, fetch)

    def cancel(self) -> None:
        with self._lock:
            if self._token is not None:
                self._token.cancel()
                self._token = None
            self.state.loading = False

    def _is_current(self, token: CancelToken) -> bool:
        return token is self._token and not token.cancelled
