"""Error types."""

from __future__ import annotations

from datetime import date


class QuandlError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.cause = cause


class QuandlParseError(QuandlError, ValueError):
    """Date string is not a calendar date in yyyy-mm-dd form."""


class QuandlDateRangeError(QuandlError, ValueError):
    """start_date is after end_date."""

    def __init__(self, message: str, *, start_date: date, end_date: date) -> None:
        super().__init__(message)
        self.start_date = start_date
        self.end_date = end_date


class QuandlApiError(QuandlError):
    """Remote service rejected the request or sent a malformed listing."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        payload: object = None,
    ) -> None:
        super().__init__(message, http_status=http_status)
        self.payload = payload


class QuandlDecodeError(QuandlError):
    """Response body is not valid JSON, ZIP or CSV."""


class QuandlTransportError(QuandlError):
    """Network/transport-level failure."""


class QuandlConfigurationError(QuandlError):
    """Invalid configuration or URL construction."""


class QuandlClientClosedError(QuandlError):
    """Raised when client is used after close."""


__all__ = [
    "QuandlError",
    "QuandlParseError",
    "QuandlDateRangeError",
    "QuandlApiError",
    "QuandlDecodeError",
    "QuandlTransportError",
    "QuandlConfigurationError",
    "QuandlClientClosedError",
]
