"""Single round-trip executors for dataset endpoints."""

from __future__ import annotations

from ..core.transport import SyncTransport
from .executors_shared import interpret_data_response, interpret_list_response
from .models import DatasetCode
from .params import build_data_url, build_list_url
from .requests import DataRequest, ListRequest


class DataQueryExecutor:
    """Fetch one dataset's observations as decoded JSON."""

    def __init__(self, transport: SyncTransport) -> None:
        self._transport = transport

    def execute(self, request: DataRequest) -> object:
        response = self._transport.request(build_data_url(request))
        return interpret_data_response(response)


class CodeListingExecutor:
    """Fetch and unpack the dataset codes of one database."""

    def __init__(self, transport: SyncTransport) -> None:
        self._transport = transport

    def execute(self, request: ListRequest) -> list[DatasetCode]:
        response = self._transport.request(build_list_url(request))
        return interpret_list_response(response)


__all__ = [
    "DataQueryExecutor",
    "CodeListingExecutor",
]
