"""
Cart aggregator — ordered line items and their totals.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from orderkit._types import Money
from orderkit.config import CartConfig
from orderkit.cart._line import CartLine, LineItem, check_quantity
from orderkit.cart._totals import CartTotals, EMPTY_TOTALS, summarize

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# CartSnapshot
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class CartSnapshot:
    """Read-only state of a cart right after a mutation."""

    lines: tuple[CartLine, ...]
    totals: CartTotals

    @property
    def line_items(self) -> tuple[LineItem, ...]:
        return tuple(line.line_item for line in self.lines)

    @property
    def subtotal(self) -> Money:
        return self.totals.subtotal

    @property
    def delivery_fee(self) -> Money:
        return self.totals.delivery_fee

    @property
    def grand_total(self) -> Money:
        return self.totals.grand_total

    @property
    def total_count(self) -> int:
        return self.totals.total_count


EMPTY_SNAPSHOT = CartSnapshot(lines=(), totals=EMPTY_TOTALS)

# ═══════════════════════════════════════════════════════════════════════════════
# Cart
# ═══════════════════════════════════════════════════════════════════════════════


class Cart:
    """
    Owns an ordered sequence of line items.

    The list itself never leaves the cart; every operation returns a fresh
    snapshot whose totals were recomputed from the current items.

    Example:
        cart = Cart(CartConfig(delivery_fee=Decimal(5)))
        snap = cart.add(item)
        snap.grand_total
        cart.remove(item)
    """

    __slots__ = ("_config", "_items", "_snapshot")

    def __init__(self, config: CartConfig | None = None) -> None:
        self._config = config if config is not None else CartConfig()
        self._items: list[LineItem] = []
        self._snapshot = EMPTY_SNAPSHOT

    @property
    def config(self) -> CartConfig:
        return self._config

    def _index_of(self, line_item: LineItem) -> int | None:
        for i, item in enumerate(self._items):
            if item is line_item:
                return i
        return None

    def _recompute(self) -> CartSnapshot:
        lines = tuple(CartLine.of(item) for item in self._items)
        self._snapshot = CartSnapshot(
            lines=lines,
            totals=summarize(lines, self._config.delivery_fee),
        )
        return self._snapshot

    # ───────────────────────────────────────────────────────────────────────────
    # Mutations
    # ───────────────────────────────────────────────────────────────────────────

    def add(self, line_item: LineItem) -> CartSnapshot:
        self._items.append(line_item)
        logger.debug("added %r", line_item)
        return self._recompute()

    def remove(self, line_item: LineItem) -> CartSnapshot:
        """
        Remove the entry `line_item` (by identity).

        Removing an item that is not in the cart does nothing; duplicate
        remove events are expected from the UI.
        """
        index = self._index_of(line_item)
        if index is None:
            logger.debug("remove ignored, %r not in cart", line_item)
            return self._snapshot
        del self._items[index]
        logger.debug("removed %r", line_item)
        return self._recompute()

    def set_quantity(self, line_item: LineItem, quantity: int) -> CartSnapshot:
        """Change the quantity of one entry. Unknown entries are ignored."""
        check_quantity(quantity)
        if self._index_of(line_item) is None:
            logger.debug("set_quantity ignored, %r not in cart", line_item)
            return self._snapshot
        line_item._quantity = quantity
        logger.debug("quantity of %r set to %d", line_item, quantity)
        return self._recompute()

    def clear(self) -> CartSnapshot:
        self._items.clear()
        logger.debug("cart cleared")
        return self._recompute()

    # ───────────────────────────────────────────────────────────────────────────
    # Reads
    # ───────────────────────────────────────────────────────────────────────────

    def snapshot(self) -> CartSnapshot:
        return self._snapshot

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[LineItem]:
        return iter(tuple(self._items))

    def __contains__(self, line_item: object) -> bool:
        return any(item is line_item for item in self._items)

    def __repr__(self) -> str:
        return f"Cart({len(self._items)} items, total={self._snapshot.grand_total})"


__all__ = ("CartSnapshot", "EMPTY_SNAPSHOT", "Cart")
