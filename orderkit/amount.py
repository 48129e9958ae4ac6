"""
Amount — the per-product quantity stepper.

Out-of-range or non-numeric input is rejected and the previous value kept,
so the value handed to the core is always an int within bounds.
"""

from __future__ import annotations

from orderkit.config import AmountConfig


def parse_amount(value: object) -> int | None:
    """Accept ints and digit strings ("3", " 4 "). Anything else is None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip(), 10)
        except ValueError:
            return None
    return None


class Amount:
    __slots__ = ("_config", "_value")

    def __init__(self, config: AmountConfig | None = None, value: int | None = None) -> None:
        self._config = config if config is not None else AmountConfig()
        self._value = self._config.default
        if value is not None:
            self.set(value)

    @property
    def value(self) -> int:
        return self._value

    @property
    def config(self) -> AmountConfig:
        return self._config

    def accepts(self, value: int) -> bool:
        return self._config.minimum <= value <= self._config.maximum

    def set(self, value: object) -> bool:
        """Set a new value. Returns True only if the value changed."""
        parsed = parse_amount(value)
        if parsed is None or parsed == self._value or not self.accepts(parsed):
            return False
        self._value = parsed
        return True

    def increase(self) -> bool:
        return self.set(self._value + 1)

    def decrease(self) -> bool:
        return self.set(self._value - 1)

    def __repr__(self) -> str:
        return f"Amount({self._value})"


__all__ = ("Amount", "parse_amount")
