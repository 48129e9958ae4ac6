"""
Pricing — unit price of a configured product.

    from orderkit import pricing as P

    quote = P.compute_price(schema, {"sauce": ["cream"], "toppings": ["olives"]})
    quote.unit_price                    # Decimal
    quote.is_selected("sauce", "cream") # True

    start = P.default_selection(schema)  # what the form shows first
"""

from orderkit.pricing._engine import (
    PriceQuote,
    option_contribution,
    compute_price,
    default_selection,
)

__all__ = (
    "PriceQuote",
    "option_contribution",
    "compute_price",
    "default_selection",
)
