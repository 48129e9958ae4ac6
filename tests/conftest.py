"""
Shared fixtures for the orderkit test suite.
"""

import copy
from decimal import Decimal

import pytest

from orderkit.cart import Cart
from orderkit.config import CartConfig
from orderkit.schema import Category, Option, OptionSchema, parse_product


# ============================================================================
# Schemas
# ============================================================================


PIZZA_DATA = {
    "name": "Nonna Alba's Pizza",
    "price": 20,
    "params": {
        "sauce": {
            "label": "Sauce",
            "type": "radios",
            "options": {
                "tomato": {"label": "Tomato", "price": 0, "default": True},
                "bbq": {"label": "BBQ", "price": 1},
            },
        },
        "toppings": {
            "label": "Toppings",
            "type": "checkboxes",
            "options": {
                "olives": {"label": "Olives", "price": 2, "default": True},
                "salami": {"label": "Salami", "price": 3},
            },
        },
    },
}


@pytest.fixture
def pizza() -> OptionSchema:
    return parse_product("pizza", PIZZA_DATA)


@pytest.fixture
def sauce_only() -> OptionSchema:
    """The schema of the worked example: tomato (default, 0) or bbq (+1)."""
    return OptionSchema(
        product_id="pizza",
        name="Pizza",
        base_price=Decimal(20),
        categories={
            "sauce": Category(
                label="Sauce",
                options={
                    "tomato": Option("Tomato", Decimal(0), is_default=True),
                    "bbq": Option("BBQ", Decimal(1)),
                },
            ),
        },
    )


@pytest.fixture
def cart() -> Cart:
    return Cart(CartConfig(delivery_fee=Decimal(5)))


@pytest.fixture
def pizza_data() -> dict:
    return copy.deepcopy(PIZZA_DATA)
