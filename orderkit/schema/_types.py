"""
Schema types — static description of a product's purchasable variations.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType

from orderkit._types import CategoryId, Money, OptionId, ProductId

# ═══════════════════════════════════════════════════════════════════════════════
# Errors
# ═══════════════════════════════════════════════════════════════════════════════


class SchemaError(Exception):
    """Malformed product schema. Raised at construction, never deferred."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


# ═══════════════════════════════════════════════════════════════════════════════
# Option / Category
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Option:
    """
    A single selectable variation.

    price_delta is what selecting the option adds on top of the base price,
    or what deselecting it removes when the option is a default.
    """

    label: str
    price_delta: Money
    is_default: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.price_delta, Decimal):
            raise SchemaError(self.label, "price_delta must be a Decimal")
        if self.price_delta < 0:
            raise SchemaError(self.label, "price_delta must be >= 0")
        # 0/1, "true", None are rejected instead of coerced
        if not isinstance(self.is_default, bool):
            raise SchemaError(
                self.label,
                f"is_default must be a bool, got {type(self.is_default).__name__}",
            )


@dataclass(frozen=True, slots=True)
class Category:
    """Named group of related options (e.g. 'Sauce')."""

    label: str
    options: Mapping[OptionId, Option]

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))


# ═══════════════════════════════════════════════════════════════════════════════
# OptionSchema
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class OptionSchema:
    """
    Immutable option schema of one product.

    base_price already includes the cost of every default option.
    Categories keep their declaration order.
    """

    product_id: ProductId
    name: str
    base_price: Money
    categories: Mapping[CategoryId, Category]

    def __post_init__(self) -> None:
        if not isinstance(self.base_price, Decimal):
            raise SchemaError(self.product_id, "base_price must be a Decimal")
        object.__setattr__(
            self, "categories", MappingProxyType(dict(self.categories))
        )

    def option(self, category_id: CategoryId, option_id: OptionId) -> Option | None:
        category = self.categories.get(category_id)
        if category is None:
            return None
        return category.options.get(option_id)


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("SchemaError", "Option", "Category", "OptionSchema")
