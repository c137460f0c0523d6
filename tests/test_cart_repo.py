"""
Cart snapshot repository and key-value backends.
"""
from __future__ import annotations

import json
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from redis.exceptions import RedisError

from storefront.domain.errors import StoragePersistError
from storefront.domain.schemas import CartLineItem
from storefront.repos.cart_repo import CartRepo
from storefront.repos.kv_store import (
    MemoryKeyValueStore,
    RedisKeyValueStore,
    SqlKeyValueStore,
    build_kv_store,
)


def _line(**overrides) -> CartLineItem:
    data = {"id": 1, "title": "A", "price": Decimal("9.99"), "image": "", "quantity": 2}
    data.update(overrides)
    return CartLineItem(**data)


class TestCartRepo:
    def test_save_then_load(self, memory_store):
        repo = CartRepo(memory_store)

        assert repo.save([_line(), _line(id=2, title="B", quantity=1)]) is True

        assert repo.load() == [_line(), _line(id=2, title="B", quantity=1)]

    def test_load_missing_key(self, memory_store):
        assert CartRepo(memory_store).load() is None

    @pytest.mark.parametrize(
        "raw",
        [
            "not json at all",
            json.dumps({"id": 1}),
            json.dumps([{"id": 1, "title": "A", "price": "9.99", "quantity": 0}]),
            json.dumps([{"id": 1, "title": "A", "price": "-1", "quantity": 1}]),
            json.dumps([{"title": "no id"}]),
        ],
    )
    def test_unusable_snapshot_loads_as_none(self, raw):
        repo = CartRepo(MemoryKeyValueStore({"cart:v1": raw}))
        assert repo.load() is None

    def test_save_swallows_backend_errors(self):
        store = MagicMock()
        store.set.side_effect = StoragePersistError("disk full")

        assert CartRepo(store).save([_line()]) is False

    def test_uses_configured_key(self, memory_store):
        CartRepo(memory_store, key="cart:other").save([_line()])
        assert set(memory_store.data) == {"cart:other"}


class TestSqlKeyValueStore:
    def test_set_get_overwrite(self, sql_session_factory):
        store = SqlKeyValueStore(sql_session_factory)

        assert store.get("cart:v1") is None
        store.set("cart:v1", "[]")
        store.set("cart:v1", '[{"id": 1}]')

        assert store.get("cart:v1") == '[{"id": 1}]'

    def test_cart_round_trip(self, sql_session_factory):
        repo = CartRepo(SqlKeyValueStore(sql_session_factory))
        repo.save([_line()])

        fresh = CartRepo(SqlKeyValueStore(sql_session_factory))
        assert fresh.load() == [_line()]


class TestRedisKeyValueStore:
    def test_get_and_set_delegate_to_client(self):
        client = MagicMock()
        client.get.return_value = "[]"
        store = RedisKeyValueStore(client=client)

        store.set("cart:v1", "[]")

        client.set.assert_called_once_with(name="cart:v1", value="[]")
        assert store.get("cart:v1") == "[]"

    def test_redis_error_becomes_persist_error(self):
        client = MagicMock()
        client.set.side_effect = RedisError("connection refused")
        store = RedisKeyValueStore(client=client)

        with pytest.raises(StoragePersistError):
            store.set("cart:v1", "[]")
        # retried before giving up
        assert client.set.call_count == 3


def test_build_kv_store_rejects_unknown_backend():
    with pytest.raises(ValueError):
        build_kv_store("floppy")


def test_build_kv_store_memory():
    assert isinstance(build_kv_store("memory"), MemoryKeyValueStore)
