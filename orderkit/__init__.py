"""
orderkit — pricing and cart engine for an ordering widget.

    from orderkit import schema as Sc   # Product option schemas
    from orderkit import pricing as P   # Unit price of a selection
    from orderkit import cart as Ct     # Line items and totals
    from orderkit import payload as Pl  # Order payload for the backend
    from orderkit import notify as N    # UI event → recomputed value
    from orderkit import submit as Sb   # Order submission
"""

from orderkit import schema
from orderkit import pricing
from orderkit import cart
from orderkit import payload
from orderkit import notify
from orderkit import submit
from orderkit.amount import Amount
from orderkit.config import (
    CartConfig,
    AmountConfig,
    BackendConfig,
    Settings,
    load_settings,
)
from orderkit.form import ProductForm, ProductView
from orderkit._types import (
    Money,
    Selection,
    OptionKey,
)

__version__ = "0.1.0"

__all__ = (
    "schema",
    "pricing",
    "cart",
    "payload",
    "notify",
    "submit",
    "Amount",
    "CartConfig",
    "AmountConfig",
    "BackendConfig",
    "Settings",
    "load_settings",
    "ProductForm",
    "ProductView",
    "Money",
    "Selection",
    "OptionKey",
)
