"""
Payload — the order as handed to the transport.

    from orderkit import payload as Pl

    order = Pl.build_payload(cart, Pl.CustomerFields(address="Main St 1", phone="555"))
    body = Pl.to_wire(order)    # dict with the backend's camelCase keys
"""

from orderkit.payload._types import CustomerFields, ProductPayload, OrderPayload
from orderkit.payload._build import (
    JSONNumber,
    product_payload,
    build_payload,
    wire_number,
    to_wire,
    to_json,
)

__all__ = (
    "CustomerFields",
    "ProductPayload",
    "OrderPayload",
    "JSONNumber",
    "product_payload",
    "build_payload",
    "wire_number",
    "to_wire",
    "to_json",
)
