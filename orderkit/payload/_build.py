"""
Payload builder — cart state + customer fields into the order payload.

Wire format (JSON body of the order POST):

    {
        "address": str, "phone": str,
        "totalPrice": number, "subtotalPrice": number,
        "totalNumber": int, "deliveryFee": number,
        "products": [
            {"id": str, "amount": int, "price": number, "priceSingle": number,
             "params": {category: {"label": str, "options": {option: label}}}}
        ]
    }
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any

from orderkit.cart import Cart, CartLine, CartSnapshot
from orderkit.payload._types import CustomerFields, ProductPayload, OrderPayload

type JSONNumber = int | float


def product_payload(line: CartLine) -> ProductPayload:
    item = line.line_item
    return ProductPayload(
        id=item.product_id,
        amount=line.quantity,
        price=line.total_price,
        price_single=line.unit_price,
        params=item.options,
    )


def build_payload(cart: Cart | CartSnapshot, customer: CustomerFields) -> OrderPayload:
    """
    Project a cart into an order payload.

    Reads a snapshot only; the cart is left untouched. address and phone are
    not validated here.
    """
    snapshot = cart.snapshot() if isinstance(cart, Cart) else cart
    return OrderPayload(
        address=customer.address,
        phone=customer.phone,
        total_price=snapshot.grand_total,
        subtotal_price=snapshot.subtotal,
        total_number=snapshot.total_count,
        delivery_fee=snapshot.delivery_fee,
        products=tuple(product_payload(line) for line in snapshot.lines),
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Wire encoding
# ═══════════════════════════════════════════════════════════════════════════════


def wire_number(value: Decimal) -> JSONNumber:
    """Decimal as a JSON number: int when integral, float otherwise."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def _product_to_wire(product: ProductPayload) -> dict[str, Any]:
    return {
        "id": product.id,
        "amount": product.amount,
        "price": wire_number(product.price),
        "priceSingle": wire_number(product.price_single),
        "params": {
            category_id: {
                "label": category.label,
                "options": dict(category.options),
            }
            for category_id, category in product.params.items()
        },
    }


def to_wire(payload: OrderPayload) -> dict[str, Any]:
    return {
        "address": payload.address,
        "phone": payload.phone,
        "totalPrice": wire_number(payload.total_price),
        "subtotalPrice": wire_number(payload.subtotal_price),
        "totalNumber": payload.total_number,
        "deliveryFee": wire_number(payload.delivery_fee),
        "products": [_product_to_wire(p) for p in payload.products],
    }


def to_json(payload: OrderPayload) -> str:
    return json.dumps(to_wire(payload))


__all__ = (
    "JSONNumber",
    "product_payload",
    "build_payload",
    "wire_number",
    "to_wire",
    "to_json",
)
