# storefront/domain/schemas.py
from datetime import datetime
from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Rating(BaseModel):
    rate: float = 0
    count: int = 0


class Product(BaseModel):
    """Catalog record as returned by the catalog API."""

    model_config = ConfigDict(extra="ignore")

    id: int
    title: str = ""
    description: str = ""
    category: str = ""
    price: Decimal = Decimal("0.00")
    image: str = ""
    rating: Rating | None = None


class ProductIn(BaseModel):
    """Schema for creating or updating a catalog product."""

    title: str = Field(..., min_length=1, max_length=200, description="Product title")
    description: str = Field(..., min_length=1, description="Product description")
    category: str = Field(..., min_length=1, max_length=100, description="Category name")
    price: Decimal = Field(..., ge=0, description="Unit price (must be >= 0)")
    image: str = Field("", description="Image URL")

    @field_validator("title", "description", "category", mode="before")
    @classmethod
    def _strip(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

    def to_payload(self) -> dict:
        # the catalog expects a json number for price
        data = self.model_dump()
        data["price"] = float(self.price)
        return data


class CartItemIn(BaseModel):
    """Schema for adding a product to the cart."""

    product_id: int = Field(..., gt=0, description="Catalog product id (must be > 0)")
    quantity: int = Field(1, gt=0, description="Quantity (must be > 0)")


class QuantityIn(BaseModel):
    quantity: int


class CartLineItem(BaseModel):
    """Minimal snapshot of a product kept in the cart."""

    model_config = ConfigDict(from_attributes=True)

    id: int | str
    title: str
    price: Decimal = Field(..., ge=0)
    image: str = ""
    quantity: int = Field(..., ge=1)


class CartOut(BaseModel):
    items: List[CartLineItem]
    count: int
    total: Decimal


class OrderForm(BaseModel):
    """Checkout form: contact, shipping and mock payment fields."""

    # contact
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    # shipping
    address1: str = ""
    address2: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    country: str = "United States"
    # payment (mock)
    card_name: str = ""
    card_number: str = ""
    exp: str = ""
    cvc: str = ""


class OrderResult(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    order_id: str
    total: Decimal
    item_count: int
    items: List[CartLineItem]
    email: str
    created_at: datetime


class ValidationErrorsOut(BaseModel):
    errors: dict[str, str]
