"""
Payload types — the order as submitted to the backend.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from orderkit._types import CategoryId, Money, ProductId
from orderkit.cart import SelectedCategory


@dataclass(frozen=True, slots=True)
class CustomerFields:
    """Delivery details typed by the customer. Passed through unvalidated."""

    address: str
    phone: str


@dataclass(frozen=True, slots=True)
class ProductPayload:
    id: ProductId
    amount: int
    price: Money
    price_single: Money
    params: Mapping[CategoryId, SelectedCategory]


@dataclass(frozen=True, slots=True)
class OrderPayload:
    address: str
    phone: str
    total_price: Money
    subtotal_price: Money
    total_number: int
    delivery_fee: Money
    products: tuple[ProductPayload, ...]


__all__ = ("CustomerFields", "ProductPayload", "OrderPayload")
