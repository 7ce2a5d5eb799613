"""Shared response decoding helpers for sync/async executors."""

from __future__ import annotations

import json
import logging

from .errors import QuandlApiError, QuandlDecodeError
from .transport_shared import TransportResponse

HTTP_OK = 200

logger = logging.getLogger("quandl_api_client")


def decode_json_body(content: bytes, *, http_status: int | None) -> object:
    """Decode a JSON body and map parse failures to QuandlDecodeError."""

    try:
        return json.loads(content)
    except ValueError as exc:
        logger.error("response body is not valid JSON http_status=%s", http_status)
        raise QuandlDecodeError(
            "response body is not valid JSON",
            http_status=http_status,
        ) from exc


def api_error_from_response(response: TransportResponse) -> QuandlApiError:
    """Build the error for a non-200 response; its body is a JSON error payload."""

    http_status = response.status_code
    payload = decode_json_body(response.content, http_status=http_status)
    logger.error("request failed http_status=%s", http_status)
    return QuandlApiError(
        f"quandl request failed with code `{http_status}` and response: {payload!r}",
        http_status=http_status,
        payload=payload,
    )


def parse_json_response(response: TransportResponse) -> object:
    """Return the decoded body of a 200 response, raise for anything else."""

    if response.status_code != HTTP_OK:
        raise api_error_from_response(response)
    return decode_json_body(response.content, http_status=response.status_code)


__all__ = [
    "HTTP_OK",
    "decode_json_body",
    "api_error_from_response",
    "parse_json_response",
]
