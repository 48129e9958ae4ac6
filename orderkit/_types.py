"""
Core types for orderkit.

Re-exports from kungfu + custom type aliases.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from decimal import Decimal

# Re-export from kungfu
from kungfu import Result, Ok, Error, LazyCoroResult

# ═══════════════════════════════════════════════════════════════════════════════
# Identity Aliases
# ═══════════════════════════════════════════════════════════════════════════════

type ProductId = str
type CategoryId = str
type OptionId = str

type OptionKey = tuple[CategoryId, OptionId]
"""Option ids are unique only inside their category, so state is keyed by both."""

# ═══════════════════════════════════════════════════════════════════════════════
# Money
# ═══════════════════════════════════════════════════════════════════════════════

type Money = Decimal
"""Prices are exact decimals; totals must equal the sum of their lines."""

ZERO: Money = Decimal(0)

# ═══════════════════════════════════════════════════════════════════════════════
# Selection
# ═══════════════════════════════════════════════════════════════════════════════

type Selection = Mapping[CategoryId, Collection[OptionId]]
"""Currently checked options per category. Advisory: never validated."""


def to_money(value: object) -> Money:
    """
    Convert a JSON number into Money.

    Raises TypeError for bools and non-numbers.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise TypeError(f"expected a number, got {type(value).__name__}")
    money = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    if not money.is_finite():
        raise TypeError(f"expected a finite number, got {value!r}")
    return money


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "LazyCoroResult",
    # Aliases
    "ProductId",
    "CategoryId",
    "OptionId",
    "OptionKey",
    "Money",
    "ZERO",
    "Selection",
    "to_money",
)
