"""Sync HTTP transport performing a single GET per request."""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from ..config import QuandlClientConfig
from .errors import QuandlTransportError
from .transport_shared import (
    TransportResponse,
    build_default_headers,
    build_default_timeout,
    redact_url,
)

logger = logging.getLogger("quandl_api_client")


class SyncTransportClient(Protocol):
    def get(self, url: httpx.URL) -> TransportResponse: ...
    def close(self) -> None: ...


class SyncTransport:
    """Synchronous transport for Quandl API."""

    def __init__(
        self,
        config: QuandlClientConfig,
        *,
        client: SyncTransportClient | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.Client(
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
        )

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "close"):
            self._client.close()

    def request(self, url: httpx.URL) -> TransportResponse:
        if self._closed:
            raise QuandlTransportError("transport is already closed")

        loggable_url = redact_url(url)
        logger.debug("request start url=%s", loggable_url)
        try:
            response = self._client.get(url)
        except Exception as exc:
            logger.error(
                "request network error url=%s error=%s",
                loggable_url,
                exc.__class__.__name__,
            )
            raise QuandlTransportError(
                "network/transport error",
                cause="network",
            ) from exc

        logger.debug(
            "response received url=%s http_status=%s",
            loggable_url,
            response.status_code,
        )
        return response


__all__ = [
    "SyncTransport",
]
