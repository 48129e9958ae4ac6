"""
Schema parsing — product JSON into OptionSchema.

Accepts the menu format served by the backend:

    {
        "name": "Nonna Alba's Pizza",
        "price": 20,
        "params": {
            "sauce": {
                "label": "Sauce",
                "type": "radios",
                "options": {
                    "tomato": {"label": "Tomato", "price": 0, "default": true},
                    "cream": {"label": "Sour cream", "price": 2}
                }
            }
        }
    }
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from kungfu import Result, Ok, Error

from orderkit._types import Money, ProductId, to_money
from orderkit.schema._types import SchemaError, Option, Category, OptionSchema

type Menu = Mapping[ProductId, OptionSchema]


def _require(data: Mapping[str, Any], key: str, path: str) -> Any:
    if key not in data:
        raise SchemaError(path, f"missing '{key}'")
    return data[key]


def _money(value: Any, path: str) -> Money:
    try:
        return to_money(value)
    except TypeError as e:
        raise SchemaError(path, str(e)) from e


def _mapping(value: Any, path: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise SchemaError(path, f"expected an object, got {type(value).__name__}")
    return value


def _parse_option(data: Any, path: str) -> Option:
    data = _mapping(data, path)
    is_default = data.get("default", False)
    if not isinstance(is_default, bool):
        raise SchemaError(
            f"{path}.default", f"expected a bool, got {type(is_default).__name__}"
        )
    return Option(
        label=str(_require(data, "label", path)),
        price_delta=_money(data.get("price", 0), f"{path}.price"),
        is_default=is_default,
    )


def _parse_category(data: Any, path: str) -> Category:
    data = _mapping(data, path)
    options = _mapping(data.get("options", {}), f"{path}.options")
    return Category(
        label=str(_require(data, "label", path)),
        options={
            option_id: _parse_option(option, f"{path}.options.{option_id}")
            for option_id, option in options.items()
        },
    )


def parse_product(product_id: ProductId, data: Mapping[str, Any]) -> OptionSchema:
    """
    Parse one product.

    Raises SchemaError on the first malformed field; a missing price is
    never replaced with zero.
    """
    data = _mapping(data, product_id)
    params = _mapping(data.get("params") or {}, f"{product_id}.params")
    return OptionSchema(
        product_id=product_id,
        name=str(data.get("name", product_id)),
        base_price=_money(_require(data, "price", product_id), f"{product_id}.price"),
        categories={
            category_id: _parse_category(category, f"{product_id}.params.{category_id}")
            for category_id, category in params.items()
        },
    )


def parse_menu(data: Mapping[str, Any] | Sequence[Mapping[str, Any]]) -> Result[Menu, SchemaError]:
    """
    Parse a whole menu.

    Takes either {id: product} or a list of products carrying an "id" field.
    """
    try:
        if isinstance(data, Mapping):
            items = list(data.items())
        else:
            items = [
                (str(_require(_mapping(p, f"[{i}]"), "id", f"[{i}]")), p)
                for i, p in enumerate(data)
            ]
        return Ok({pid: parse_product(pid, product) for pid, product in items})
    except SchemaError as e:
        return Error(e)


__all__ = ("Menu", "parse_product", "parse_menu")
