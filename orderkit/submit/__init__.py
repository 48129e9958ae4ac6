"""
Submit — send an order to the backend and observe the outcome.

    from orderkit import submit as Sb

    service = Sb.OrderService(Sb.HttpTransport(settings.backend))
    match await service.send(cart, CustomerFields(address, phone)):
        case Ok(receipt):
            print(receipt.response)
        case Error(e):
            print(f"[{e.code}] {e.message}")
"""

from orderkit.submit._transport import (
    SubmissionError,
    SubmissionErrors,
    Transport,
    HttpTransport,
)
from orderkit.submit._service import OrderReceipt, submit_order, OrderService

__all__ = (
    "SubmissionError",
    "SubmissionErrors",
    "Transport",
    "HttpTransport",
    "OrderReceipt",
    "submit_order",
    "OrderService",
)
