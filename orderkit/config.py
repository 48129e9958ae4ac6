"""
Configuration — explicit settings passed into constructors.

Nothing here is a process-wide singleton: build a Settings (directly or via
load_settings) and hand its parts to Cart, ProductForm and HttpTransport.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "ORDERKIT_"


class ConfigError(ValueError):
    pass


# ═══════════════════════════════════════════════════════════════════════════════
# Sections
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class CartConfig:
    """Cart constants. delivery_fee is charged only on a non-empty order."""

    delivery_fee: Decimal = Decimal(20)

    def __post_init__(self) -> None:
        if (
            not isinstance(self.delivery_fee, Decimal)
            or not self.delivery_fee.is_finite()
            or self.delivery_fee < 0
        ):
            raise ConfigError(f"delivery_fee must be a Decimal >= 0, got {self.delivery_fee!r}")


@dataclass(frozen=True, slots=True)
class AmountConfig:
    """Bounds of the per-product quantity stepper."""

    default: int = 1
    minimum: int = 1
    maximum: int = 9

    def __post_init__(self) -> None:
        if self.minimum < 1:
            raise ConfigError("minimum amount must be >= 1")
        if self.maximum < self.minimum:
            raise ConfigError("maximum amount must be >= minimum")
        if not self.minimum <= self.default <= self.maximum:
            raise ConfigError("default amount must lie within [minimum, maximum]")


@dataclass(frozen=True, slots=True)
class BackendConfig:
    """Where orders are posted."""

    url: str = "http://localhost:3131"
    orders: str = "orders"
    timeout: float = 10.0

    @property
    def orders_url(self) -> str:
        return f"{self.url.rstrip('/')}/{self.orders.lstrip('/')}"


@dataclass(frozen=True, slots=True)
class Settings:
    cart: CartConfig = field(default_factory=CartConfig)
    amount: AmountConfig = field(default_factory=AmountConfig)
    backend: BackendConfig = field(default_factory=BackendConfig)


# ═══════════════════════════════════════════════════════════════════════════════
# Environment
# ═══════════════════════════════════════════════════════════════════════════════


def _get_env(key: str) -> str | None:
    v = os.getenv(ENV_PREFIX + key)
    if v is not None and v.strip() != "":
        return v.strip()
    return None


def _get_int(key: str, default: int) -> int:
    v = _get_env(key)
    if v is None:
        return default
    try:
        return int(v)
    except ValueError as e:
        raise ConfigError(f"{ENV_PREFIX}{key} must be an integer, got {v!r}") from e


def _get_decimal(key: str, default: Decimal) -> Decimal:
    v = _get_env(key)
    if v is None:
        return default
    try:
        value = Decimal(v)
    except InvalidOperation as e:
        raise ConfigError(f"{ENV_PREFIX}{key} must be a number, got {v!r}") from e
    if not value.is_finite():
        raise ConfigError(f"{ENV_PREFIX}{key} must be a finite number, got {v!r}")
    return value


def _get_float(key: str, default: float) -> float:
    v = _get_env(key)
    if v is None:
        return default
    try:
        return float(v)
    except ValueError as e:
        raise ConfigError(f"{ENV_PREFIX}{key} must be a number, got {v!r}") from e


def load_settings(env_file: str | Path | None = None) -> Settings:
    """
    Build Settings from ORDERKIT_* environment variables.

    A .env file (explicit path, or discovered by python-dotenv) is loaded
    first; variables already set in the environment win.

        ORDERKIT_DELIVERY_FEE=20
        ORDERKIT_AMOUNT_DEFAULT=1
        ORDERKIT_AMOUNT_MIN=1
        ORDERKIT_AMOUNT_MAX=9
        ORDERKIT_BACKEND_URL=http://localhost:3131
        ORDERKIT_BACKEND_ORDERS=orders
        ORDERKIT_BACKEND_TIMEOUT=10
    """
    load_dotenv(dotenv_path=env_file)

    defaults = Settings()
    return Settings(
        cart=CartConfig(
            delivery_fee=_get_decimal("DELIVERY_FEE", defaults.cart.delivery_fee),
        ),
        amount=AmountConfig(
            default=_get_int("AMOUNT_DEFAULT", defaults.amount.default),
            minimum=_get_int("AMOUNT_MIN", defaults.amount.minimum),
            maximum=_get_int("AMOUNT_MAX", defaults.amount.maximum),
        ),
        backend=BackendConfig(
            url=_get_env("BACKEND_URL") or defaults.backend.url,
            orders=_get_env("BACKEND_ORDERS") or defaults.backend.orders,
            timeout=_get_float("BACKEND_TIMEOUT", defaults.backend.timeout),
        ),
    )


__all__ = (
    "ConfigError",
    "CartConfig",
    "AmountConfig",
    "BackendConfig",
    "Settings",
    "load_settings",
)
