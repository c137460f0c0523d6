"""Shared pytest fixtures for the storefront tests."""
from __future__ import annotations

import json
import os

# must be set before storefront.utils.settings is imported
os.environ.setdefault("CART_STORAGE_BACKEND", "memory")
os.environ.setdefault("CHECKOUT_DELAY_SECONDS", "0")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from decimal import Decimal
from unittest.mock import MagicMock

import pytest
import requests
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.repos.cart_repo import CartRepo
from storefront.repos.kv_store import MemoryKeyValueStore
from storefront.services.cart_service import CartService
from storefront.services.order_service import OrderService


@pytest.fixture()
def keyboard() -> dict:
    return {
        "id": 1,
        "title": "Keyboard",
        "description": "Mechanical keyboard",
        "category": "electronics",
        "price": 199.99,
        "image": "https://img.test/keyboard.png",
        "rating": {"rate": 4.5, "count": 120},
    }


@pytest.fixture()
def mouse() -> dict:
    return {
        "id": 2,
        "title": "Mouse",
        "description": "Wireless mouse",
        "category": "electronics",
        "price": 49.50,
        "image": "https://img.test/mouse.png",
    }


@pytest.fixture()
def memory_store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture()
def cart_service(memory_store) -> CartService:
    return CartService(CartRepo(memory_store))


@pytest.fixture()
def notifier() -> MagicMock:
    return MagicMock()


@pytest.fixture()
def order_service(cart_service, notifier) -> OrderService:
    return OrderService(cart_service, notification_service=notifier, sleep=lambda _: None)


@pytest.fixture()
def valid_form() -> dict:
    return {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@example.com",
        "phone": "",
        "address1": "12 Analytical St",
        "address2": "",
        "city": "London",
        "state": "LDN",
        "zip": "N1 9GU",
        "country": "United Kingdom",
        "card_name": "Ada Lovelace",
        "card_number": "4111 1111 1111 1111",
        "exp": "09/27",
        "cvc": "123",
    }


@pytest.fixture()
def sql_session_factory():
    """In-memory SQLite shared by every session of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    engine.dispose()


def make_response(status_code: int, payload=None, url: str = "https://catalog.test/products") -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    resp.url = url
    resp._content = json.dumps(payload).encode() if payload is not None else b""
    return resp


@pytest.fixture()
def response_factory():
    return make_response
