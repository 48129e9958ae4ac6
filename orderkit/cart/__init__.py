"""
Cart — configured products, quantities and order totals.

    from orderkit import cart as Ct

    item = Ct.make_line_item(schema, selection, quote.unit_price, quantity=2)

    cart = Ct.Cart(CartConfig(delivery_fee=Decimal(5)))
    snap = cart.add(item)       # CartSnapshot, totals already recomputed
    snap = cart.remove(item)    # removing twice is harmless
"""

from orderkit.cart._line import (
    check_quantity,
    SelectedCategory,
    OptionsSummary,
    LineItem,
    CartLine,
    summarize_options,
    make_line_item,
)
from orderkit.cart._totals import CartTotals, EMPTY_TOTALS, summarize
from orderkit.cart._cart import CartSnapshot, EMPTY_SNAPSHOT, Cart

__all__ = (
    "check_quantity",
    "SelectedCategory",
    "OptionsSummary",
    "LineItem",
    "CartLine",
    "summarize_options",
    "make_line_item",
    "CartTotals",
    "EMPTY_TOTALS",
    "summarize",
    "CartSnapshot",
    "EMPTY_SNAPSHOT",
    "Cart",
)
