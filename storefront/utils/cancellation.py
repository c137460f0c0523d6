# storefront/utils/cancellation.py
import threading

from storefront.domain.errors import FetchCancelled


class CancelToken:
    """
    Cooperative cancellation signal passed into catalog fetches.
    The fetch checks it before each attempt and before its result is committed.
    """

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise FetchCancelled()
