"""
Transport — where order payloads go.

The core only needs post_order(); retries, timeouts and cancellation are
the transport's business.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Protocol

import httpx

from orderkit.config import BackendConfig

# ═══════════════════════════════════════════════════════════════════════════════
# Errors
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class SubmissionError:
    code: str
    message: str
    status: int | None = None


class SubmissionErrors:
    @staticmethod
    def transport(msg: str) -> SubmissionError:
        return SubmissionError("TRANSPORT", msg)

    @staticmethod
    def http_status(status: int, msg: str) -> SubmissionError:
        return SubmissionError("HTTP_STATUS", msg, status)

    @staticmethod
    def decode(msg: str) -> SubmissionError:
        return SubmissionError("DECODE", msg)

    @staticmethod
    def from_exception(e: Exception) -> SubmissionError:
        match e:
            case httpx.HTTPStatusError():
                return SubmissionErrors.http_status(e.response.status_code, str(e))
            case json.JSONDecodeError():
                return SubmissionErrors.decode(str(e))
            case _:
                return SubmissionErrors.transport(f"{type(e).__name__}: {e}")


# ═══════════════════════════════════════════════════════════════════════════════
# Transport
# ═══════════════════════════════════════════════════════════════════════════════


class Transport(Protocol):
    async def post_order(self, body: dict[str, Any]) -> object:
        """Send one order body; return the decoded response or raise."""
        ...


class HttpTransport:
    """
    POSTs the order as JSON to BackendConfig.orders_url.

    Pass a client to share a connection pool (or a MockTransport in tests);
    otherwise one is opened per order.
    """

    __slots__ = ("_backend", "_client")

    def __init__(
        self,
        backend: BackendConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._backend = backend if backend is not None else BackendConfig()
        self._client = client

    @property
    def url(self) -> str:
        return self._backend.orders_url

    async def _post(self, client: httpx.AsyncClient, body: dict[str, Any]) -> object:
        response = await client.post(
            self.url,
            json=body,
            headers={"Accept": "application/json"},
            timeout=self._backend.timeout,
        )
        response.raise_for_status()
        return response.json()

    async def post_order(self, body: dict[str, Any]) -> object:
        if self._client is not None:
            return await self._post(self._client, body)
        async with httpx.AsyncClient() as client:
            return await self._post(client, body)


__all__ = (
    "SubmissionError",
    "SubmissionErrors",
    "Transport",
    "HttpTransport",
)
