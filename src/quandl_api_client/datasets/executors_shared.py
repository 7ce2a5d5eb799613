"""Response interpretation shared by sync/async executors."""

from __future__ import annotations

import logging

from ..core.response_parsing import HTTP_OK, api_error_from_response, parse_json_response
from ..core.transport_shared import TransportResponse
from .codes import decode_dataset_codes
from .models import DatasetCode

logger = logging.getLogger("quandl_api_client")


def interpret_data_response(response: TransportResponse) -> object:
    payload = parse_json_response(response)
    logger.info("dataset request success http_status=%s", response.status_code)
    return payload


def interpret_list_response(response: TransportResponse) -> list[DatasetCode]:
    if response.status_code != HTTP_OK:
        raise api_error_from_response(response)
    codes = decode_dataset_codes(response.content)
    logger.info("dataset listing success count=%s", len(codes))
    return codes


__all__ = [
    "interpret_data_response",
    "interpret_list_response",
]
