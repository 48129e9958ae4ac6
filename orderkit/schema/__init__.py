"""
Schema — what can be ordered and how its options are priced.

    from orderkit import schema as Sc

    pizza = Sc.parse_product("pizza", {"name": "Pizza", "price": 20, "params": {...}})
    menu = Sc.parse_menu(products)   # Result[Menu, SchemaError]
"""

from orderkit.schema._types import (
    SchemaError,
    Option,
    Category,
    OptionSchema,
)
from orderkit.schema._parse import Menu, parse_product, parse_menu

__all__ = (
    "SchemaError",
    "Option",
    "Category",
    "OptionSchema",
    "Menu",
    "parse_product",
    "parse_menu",
)
