"""
Pricing engine — unit price from a schema and a selection.

Pure arithmetic. Every call re-derives everything from its two inputs,
so the UI never has to diff selections.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from orderkit._types import ZERO, CategoryId, Money, OptionId, OptionKey, Selection
from orderkit.schema import Option, OptionSchema

# ═══════════════════════════════════════════════════════════════════════════════
# PriceQuote
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class PriceQuote:
    """
    Result of pricing one selection.

    option_state tells the caller which options to show as selected
    (e.g. which ingredient images are visible).
    """

    unit_price: Money
    option_state: Mapping[OptionKey, bool]

    def is_selected(self, category_id: CategoryId, option_id: OptionId) -> bool:
        return self.option_state.get((category_id, option_id), False)

    def price_for(self, amount: int) -> Money:
        """Price of `amount` units."""
        return self.unit_price * amount


# ═══════════════════════════════════════════════════════════════════════════════
# Delta rule
# ═══════════════════════════════════════════════════════════════════════════════


def option_contribution(option: Option, selected: bool) -> Money:
    """
    What a single option adds to the base price.

    base_price already contains every default option, so only
    deviations from the defaults move the price.
    """
    if selected and not option.is_default:
        return option.price_delta
    if not selected and option.is_default:
        return -option.price_delta
    return ZERO


def _selected_in(selection: Selection, category_id: CategoryId) -> frozenset[OptionId]:
    chosen = selection.get(category_id, ())
    # single-choice controls (radios, selects) may report a bare id
    if isinstance(chosen, str):
        return frozenset((chosen,))
    return frozenset(chosen)


def compute_price(schema: OptionSchema, selection: Selection) -> PriceQuote:
    """
    Price a selection against a schema.

    Selection entries unknown to the schema are ignored. The result is not
    clamped: a negative unit price is returned as computed.

    Example:
        quote = compute_price(pizza, {"sauce": ["cream"]})
        quote.unit_price               # Decimal('22')
        quote.is_selected("sauce", "tomato")   # False
    """
    price = schema.base_price
    state: dict[OptionKey, bool] = {}

    for category_id, category in schema.categories.items():
        chosen = _selected_in(selection, category_id)
        for option_id, option in category.options.items():
            selected = option_id in chosen
            price += option_contribution(option, selected)
            state[(category_id, option_id)] = selected

    return PriceQuote(unit_price=price, option_state=MappingProxyType(state))


def default_selection(schema: OptionSchema) -> dict[CategoryId, list[OptionId]]:
    """Selection with exactly the default options checked (the form's initial state)."""
    return {
        category_id: [
            option_id
            for option_id, option in category.options.items()
            if option.is_default
        ]
        for category_id, category in schema.categories.items()
    }


__all__ = ("PriceQuote", "option_contribution", "compute_price", "default_selection")
