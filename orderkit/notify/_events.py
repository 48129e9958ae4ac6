"""
Events — the triggers the UI layer sends to the core.
"""

from __future__ import annotations

from dataclasses import dataclass

from orderkit._types import Selection
from orderkit.cart import Cart, CartSnapshot, LineItem
from orderkit.form import ProductForm, ProductView
from orderkit.notify._notifier import Event, NotifierBuilder, notifier

# ═══════════════════════════════════════════════════════════════════════════════
# Product events
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class SelectionChanged(Event[ProductView]):
    """Form controls changed; selection is the full current state."""

    form: ProductForm
    selection: Selection


@dataclass(frozen=True, slots=True)
class AmountChanged(Event[ProductView]):
    form: ProductForm
    value: object


@dataclass(frozen=True, slots=True)
class AddToCart(Event[CartSnapshot]):
    """'Add to cart' pressed on a product form."""

    form: ProductForm


# ═══════════════════════════════════════════════════════════════════════════════
# Cart events
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class LineItemAdded(Event[CartSnapshot]):
    line_item: LineItem


@dataclass(frozen=True, slots=True)
class LineItemRemoved(Event[CartSnapshot]):
    line_item: LineItem


@dataclass(frozen=True, slots=True)
class LineQuantityChanged(Event[CartSnapshot]):
    line_item: LineItem
    quantity: int


# ═══════════════════════════════════════════════════════════════════════════════
# Default handlers
# ═══════════════════════════════════════════════════════════════════════════════


def on_selection_changed(event: SelectionChanged) -> ProductView:
    return event.form.select(event.selection)


def on_amount_changed(event: AmountChanged) -> ProductView:
    return event.form.set_amount(event.value)


def on_add_to_cart(event: AddToCart, cart: Cart) -> CartSnapshot:
    return cart.add(event.form.line_item())


def on_line_item_added(event: LineItemAdded, cart: Cart) -> CartSnapshot:
    return cart.add(event.line_item)


def on_line_item_removed(event: LineItemRemoved, cart: Cart) -> CartSnapshot:
    return cart.remove(event.line_item)


def on_line_quantity_changed(event: LineQuantityChanged, cart: Cart) -> CartSnapshot:
    return cart.set_quantity(event.line_item, event.quantity)


def standard() -> NotifierBuilder:
    """
    Builder with every default handler registered.

    Cart handlers need a Cart injected:
        bus = standard().compile().inject(Cart, cart)
    """
    return (
        notifier()
        .on(SelectionChanged, on_selection_changed)
        .on(AmountChanged, on_amount_changed)
        .on(AddToCart, on_add_to_cart)
        .on(LineItemAdded, on_line_item_added)
        .on(LineItemRemoved, on_line_item_removed)
        .on(LineQuantityChanged, on_line_quantity_changed)
    )


__all__ = (
    "SelectionChanged",
    "AmountChanged",
    "AddToCart",
    "LineItemAdded",
    "LineItemRemoved",
    "LineQuantityChanged",
    "on_selection_changed",
    "on_amount_changed",
    "on_add_to_cart",
    "on_line_item_added",
    "on_line_item_removed",
    "on_line_quantity_changed",
    "standard",
)
