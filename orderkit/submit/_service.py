"""
Order submission — payload to transport, outcome as a Result.

A failed submission is an Error value, never a swallowed exception.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from kungfu import LazyCoroResult, Result, Ok, Error
from combinators import lift as L

from orderkit.cart import Cart, CartSnapshot
from orderkit.payload import CustomerFields, OrderPayload, build_payload, to_wire
from orderkit.submit._transport import SubmissionError, SubmissionErrors, Transport

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OrderReceipt:
    """What was sent and the backend's (opaque) answer."""

    payload: OrderPayload
    response: object


def submit_order(
    payload: OrderPayload,
    transport: Transport,
) -> LazyCoroResult[object, SubmissionError]:
    """
    Lazily submit one payload.

    Resolves exactly once: Ok(decoded response) or Error(SubmissionError).
    No retry, no timeout of its own.

    Example:
        match await submit_order(payload, HttpTransport(settings.backend)):
            case Ok(response): ...
            case Error(e): print(e.code, e.message)
    """
    body = to_wire(payload)
    return L.catching_async(
        lambda: transport.post_order(body),
        on_error=SubmissionErrors.from_exception,
    )


class OrderService:
    def __init__(self, transport: Transport, clear_on_success: bool = True) -> None:
        self._transport = transport
        self._clear_on_success = clear_on_success

    async def send(
        self,
        cart: Cart | CartSnapshot,
        customer: CustomerFields,
    ) -> Result[OrderReceipt, SubmissionError]:
        """Build the payload from the cart and submit it."""
        payload = build_payload(cart, customer)
        logger.info(
            "submitting order: %d products, total %s",
            len(payload.products),
            payload.total_price,
        )

        match await submit_order(payload, self._transport):
            case Ok(response):
                logger.info("order accepted")
                if self._clear_on_success and isinstance(cart, Cart):
                    cart.clear()
                return Ok(OrderReceipt(payload=payload, response=response))
            case Error(e):
                logger.warning("order submission failed [%s]: %s", e.code, e.message)
                return Error(e)


__all__ = ("OrderReceipt", "submit_order", "OrderService")
