# storefront/repos/kv_store.py
from typing import Callable, Protocol

import redis
from redis.exceptions import RedisError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.data.database import Base, SessionLocal
from storefront.data.models.kv_entry import KeyValueModel
from storefront.domain.errors import StoragePersistError
from storefront.utils.retry import redis_retry
from storefront.utils.settings import CART_STORAGE_BACKEND, REDIS_URL
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class KeyValueStore(Protocol):
    """Durable string key-value storage. Backend failures raise StoragePersistError."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryKeyValueStore:
    """Process-local store, lost on restart."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class SqlKeyValueStore:
    """Key-value rows in the `kv_entries` table."""

    def __init__(self, session_factory: Callable[[], Session] = SessionLocal, create_tables: bool = True):
        self.session_factory = session_factory
        if create_tables:
            bind = session_factory.kw.get("bind") if hasattr(session_factory, "kw") else None
            if bind is not None:
                Base.metadata.create_all(bind=bind)

    def get(self, key: str) -> str | None:
        db = self.session_factory()
        try:
            row = db.get(KeyValueModel, key)
            return row.value if row else None
        except SQLAlchemyError as e:
            raise StoragePersistError(f"Reading key {key} failed: {e}") from e
        finally:
            db.close()

    def set(self, key: str, value: str) -> None:
        db = self.session_factory()
        try:
            row = db.get(KeyValueModel, key)
            if row:
                row.value = value
            else:
                db.add(KeyValueModel(key=key, value=value))
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            raise StoragePersistError(f"Writing key {key} failed: {e}") from e
        finally:
            db.close()


class RedisKeyValueStore:
    def __init__(self, url: str | None = None, client: redis.Redis | None = None):
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5,
        )

    @redis_retry()
    def _get(self, key: str):
        return self.redis.get(key)

    @redis_retry()
    def _set(self, key: str, value: str):
        return self.redis.set(name=key, value=value)

    def get(self, key: str) -> str | None:
        try:
            return self._get(key)
        except RedisError as e:
            raise StoragePersistError(f"Redis GET {key} failed: {e}") from e

    def set(self, key: str, value: str) -> None:
        try:
            self._set(key, value)
        except RedisError as e:
            raise StoragePersistError(f"Redis SET {key} failed: {e}") from e


def build_kv_store(backend: str | None = None) -> KeyValueStore:
    backend = (backend or CART_STORAGE_BACKEND).lower()
    logger.info(f"Cart storage backend: {backend}")

    if backend == "sql":
        return SqlKeyValueStore()
    if backend == "redis":
        return RedisKeyValueStore()
    if backend == "memory":
        return MemoryKeyValueStore()
    raise ValueError(f"Unknown cart storage backend: {backend}")
