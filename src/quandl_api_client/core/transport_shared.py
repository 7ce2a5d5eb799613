"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

import httpx

from ..config import QuandlClientConfig


class TransportResponse(Protocol):
    status_code: int
    content: bytes


def build_default_headers(config: QuandlClientConfig) -> Mapping[str, str]:
    return {
        "Accept-Encoding": "gzip",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: QuandlClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def redact_url(url: httpx.URL) -> str:
    """Render a URL for logs without its query string (it may hold api_key)."""

    return str(url).partition("?")[0]


__all__ = [
    "TransportResponse",
    "build_default_headers",
    "build_default_timeout",
    "redact_url",
]
