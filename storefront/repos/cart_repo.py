# storefront/repos/cart_repo.py
import json
from typing import List

from pydantic import ValidationError as PydanticValidationError

from storefront.domain.errors import StoragePersistError
from storefront.domain.schemas import CartLineItem
from storefront.repos.kv_store import KeyValueStore
from storefront.utils.settings import CART_STORAGE_KEY
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CartRepo:
    """
    Cart snapshot under one fixed key.
    -load: prior snapshot or None, never raises
    -save: best effort, returns False instead of raising
    """

    def __init__(self, store: KeyValueStore, key: str = CART_STORAGE_KEY):
        self.store = store
        self.key = key

    def load(self) -> List[CartLineItem] | None:
        try:
            raw = self.store.get(self.key)
        except StoragePersistError as e:
            logger.warning(f"Cannot read cart snapshot {self.key}: {e}")
            return None

        if not raw:
            return None

        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError("snapshot is not a list")
            return [CartLineItem.model_validate(entry) for entry in data]
        except (ValueError, TypeError, PydanticValidationError) as e:
            logger.warning(f"Discarding unreadable cart snapshot {self.key}: {e}")
            return None

    def save(self, items: List[CartLineItem]) -> bool:
        try:
            raw = json.dumps([item.model_dump(mode="json") for item in items])
            self.store.set(self.key, raw)
        except (StoragePersistError, TypeError, ValueError) as e:
            logger.warning(f"Cart snapshot {self.key} not persisted: {e}")
            return False
        return True
