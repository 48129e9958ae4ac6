"""
Cart totals — a pure projection of the line items.

Totals are never patched in place: every mutation of a cart recomputes
them from scratch through summarize().
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from orderkit._types import ZERO, Money
from orderkit.cart._line import CartLine, LineItem


@dataclass(frozen=True, slots=True)
class CartTotals:
    subtotal: Money
    delivery_fee: Money
    grand_total: Money
    total_count: int

    @property
    def is_empty(self) -> bool:
        return self.subtotal == 0


EMPTY_TOTALS = CartTotals(subtotal=ZERO, delivery_fee=ZERO, grand_total=ZERO, total_count=0)


def summarize(
    line_items: Iterable[LineItem | CartLine],
    delivery_fee: Decimal,
) -> CartTotals:
    """
    Totals of a sequence of line items (live, or frozen into CartLines).

    A zero subtotal charges nothing at all: both the delivery fee and the
    grand total are zero, not merely the fee left out.
    """
    total_count = 0
    subtotal = ZERO
    for item in line_items:
        total_count += item.quantity
        subtotal += item.unit_price * item.quantity

    if subtotal == 0:
        return CartTotals(
            subtotal=subtotal,
            delivery_fee=ZERO,
            grand_total=ZERO,
            total_count=total_count,
        )

    return CartTotals(
        subtotal=subtotal,
        delivery_fee=delivery_fee,
        grand_total=subtotal + delivery_fee,
        total_count=total_count,
    )


__all__ = ("CartTotals", "EMPTY_TOTALS", "summarize")
