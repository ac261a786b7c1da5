"""HTTP transport seam: one blocking exchange, failures returned as values."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

import httpx

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RawResponse:
    status_code: int
    body: bytes


@dataclass(frozen=True, slots=True)
class TransportFailure:
    """No response reached the client (DNS, connect, timeout, protocol error)."""

    description: str


class Transport(Protocol):
    def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        json_body: Mapping[str, Any] | None = None,
    ) -> RawResponse | TransportFailure: ...

    def close(self) -> None: ...


class HttpxTransport:
    """Default :class:`Transport` backed by a lazily created ``httpx.Client``."""

    def __init__(
        self,
        timeout: float = 30.0,
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._http_transport = http_transport
        self._client: httpx.Client | None = None

    def _ensure_client(self) -> httpx.Client:
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                timeout=httpx.Timeout(self._timeout),
                transport=self._http_transport,
            )
        return self._client

    def close(self) -> None:
        if self._client and not self._client.is_closed:
            self._client.close()

    def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        json_body: Mapping[str, Any] | None = None,
    ) -> RawResponse | TransportFailure:
        client = self._ensure_client()
        try:
            resp = client.request(
                method,
                url,
                headers=dict(headers),
                json=dict(json_body) if json_body is not None else None,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            description = str(exc) or type(exc).__name__
            logger.warning("VM API %s %s failed: %s", method, url, description)
            return TransportFailure(description)
        return RawResponse(status_code=resp.status_code, body=resp.content)
