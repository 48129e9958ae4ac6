"""
Line items — one configured product plus quantity.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from orderkit._types import CategoryId, Money, OptionId, ProductId, Selection
from orderkit.pricing import compute_price
from orderkit.schema import OptionSchema


def check_quantity(quantity: object) -> int:
    """Quantities reaching the core are ints >= 1; anything else is a caller bug."""
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValueError(f"quantity must be an int, got {type(quantity).__name__}")
    if quantity < 1:
        raise ValueError(f"quantity must be >= 1, got {quantity}")
    return quantity


@dataclass(frozen=True, slots=True)
class SelectedCategory:
    """Selected options of one category: {option_id: option_label}."""

    label: str
    options: Mapping[OptionId, str]


type OptionsSummary = Mapping[CategoryId, SelectedCategory]


class LineItem:
    """
    A configured product inside a cart.

    Compared by identity: two identical configurations are two entries.
    quantity is read-only here; the owning Cart changes it through
    Cart.set_quantity so totals are recomputed.
    """

    __slots__ = ("product_id", "name", "unit_price", "options", "_quantity")

    def __init__(
        self,
        product_id: ProductId,
        name: str,
        unit_price: Money,
        quantity: int,
        options: OptionsSummary,
    ) -> None:
        self.product_id = product_id
        self.name = name
        self.unit_price = unit_price
        self.options: OptionsSummary = MappingProxyType(dict(options))
        self._quantity = check_quantity(quantity)

    @property
    def quantity(self) -> int:
        return self._quantity

    @property
    def total_price(self) -> Money:
        return self.unit_price * self._quantity

    def __repr__(self) -> str:
        return f"LineItem({self.product_id} x{self._quantity} @ {self.unit_price})"


@dataclass(frozen=True, slots=True)
class CartLine:
    """
    One cart entry as it stood when a snapshot was taken.

    line_item is the live handle (for remove / set_quantity); quantity is
    frozen here so later quantity changes do not leak into old snapshots.
    """

    line_item: LineItem
    quantity: int

    @property
    def unit_price(self) -> Money:
        return self.line_item.unit_price

    @property
    def total_price(self) -> Money:
        return self.line_item.unit_price * self.quantity

    @classmethod
    def of(cls, line_item: LineItem) -> CartLine:
        return cls(line_item=line_item, quantity=line_item.quantity)


def summarize_options(schema: OptionSchema, selection: Selection) -> OptionsSummary:
    """
    Selected options per category, in schema order.

    Categories with nothing selected are kept with an empty option map.
    """
    quote = compute_price(schema, selection)
    return {
        category_id: SelectedCategory(
            label=category.label,
            options=MappingProxyType({
                option_id: option.label
                for option_id, option in category.options.items()
                if quote.is_selected(category_id, option_id)
            }),
        )
        for category_id, category in schema.categories.items()
    }


def make_line_item(
    schema: OptionSchema,
    selection: Selection,
    unit_price: Money,
    quantity: int,
) -> LineItem:
    """
    Build a line item for a configured product.

    unit_price is taken as given (normally compute_price(...).unit_price).
    """
    return LineItem(
        product_id=schema.product_id,
        name=schema.name,
        unit_price=unit_price,
        quantity=quantity,
        options=summarize_options(schema, selection),
    )


__all__ = (
    "check_quantity",
    "SelectedCategory",
    "OptionsSummary",
    "LineItem",
    "CartLine",
    "summarize_options",
    "make_line_item",
)
