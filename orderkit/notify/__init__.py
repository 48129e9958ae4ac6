"""
Notify — explicit call/response contract between UI and core.

The UI sends an event and gets the recomputed value back; listeners
subscribed to that event type receive the same value:

    from orderkit import notify as N

    bus = N.standard().compile().inject(Cart, cart)
    bus.subscribe(N.AddToCart, render_totals)

    match bus.dispatch(N.SelectionChanged(form, {"sauce": ["cream"]})):
        case Ok(view):
            show_price(view.price)
        case Error(e):
            log(e.message)
"""

from orderkit.notify._notifier import (
    Event,
    Listener,
    DispatchError,
    DispatchErrors,
    NotifierBuilder,
    Notifier,
    notifier,
)
from orderkit.notify._events import (
    SelectionChanged,
    AmountChanged,
    AddToCart,
    LineItemAdded,
    LineItemRemoved,
    LineQuantityChanged,
    standard,
)

__all__ = (
    "Event",
    "Listener",
    "DispatchError",
    "DispatchErrors",
    "NotifierBuilder",
    "Notifier",
    "notifier",
    "SelectionChanged",
    "AmountChanged",
    "AddToCart",
    "LineItemAdded",
    "LineItemRemoved",
    "LineQuantityChanged",
    "standard",
)
