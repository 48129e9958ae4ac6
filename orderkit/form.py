"""
Product form — live configuration state of one menu product.

Holds what the UI would otherwise keep in form controls: the current
selection and amount. Every change returns a fresh ProductView.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from orderkit._types import Money, Selection
from orderkit.amount import Amount
from orderkit.cart import LineItem, make_line_item
from orderkit.config import AmountConfig
from orderkit.pricing import PriceQuote, compute_price, default_selection
from orderkit.schema import OptionSchema


@dataclass(frozen=True, slots=True)
class ProductView:
    """Quote for the current selection plus the chosen amount."""

    quote: PriceQuote
    amount: int

    @property
    def unit_price(self) -> Money:
        return self.quote.unit_price

    @property
    def price(self) -> Money:
        return self.quote.price_for(self.amount)


def _freeze(selection: Selection) -> Selection:
    # copy so later mutation of the caller's lists cannot change the form
    return MappingProxyType({
        category_id: (chosen,) if isinstance(chosen, str) else tuple(chosen)
        for category_id, chosen in selection.items()
    })


class ProductForm:
    """
    Configurable product.

    Example:
        form = ProductForm(pizza)
        form.select({"sauce": ["cream"]}).price
        form.set_amount(3)
        cart.add(form.line_item())
    """

    __slots__ = ("schema", "_amount", "_selection", "_view")

    def __init__(
        self,
        schema: OptionSchema,
        amount_config: AmountConfig | None = None,
        selection: Selection | None = None,
    ) -> None:
        self.schema = schema
        self._amount = Amount(amount_config)
        self._selection: Selection = {}
        self._view = self.select(selection if selection is not None else default_selection(schema))

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def amount(self) -> int:
        return self._amount.value

    def view(self) -> ProductView:
        return self._view

    def select(self, selection: Selection) -> ProductView:
        """Replace the whole selection and reprice."""
        self._selection = _freeze(selection)
        self._view = ProductView(compute_price(self.schema, self._selection), self._amount.value)
        return self._view

    def set_amount(self, value: object) -> ProductView:
        """Change the amount. Rejected values leave the amount as it was."""
        if self._amount.set(value):
            self._view = ProductView(self._view.quote, self._amount.value)
        return self._view

    def line_item(self) -> LineItem:
        """Line item for the current configuration, priced from scratch."""
        quote = compute_price(self.schema, self._selection)
        return make_line_item(self.schema, self._selection, quote.unit_price, self._amount.value)


__all__ = ("ProductView", "ProductForm")
