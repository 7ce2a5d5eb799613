"""Async single round-trip executors for dataset endpoints."""

from __future__ import annotations

from ..core.async_transport import AsyncTransport
from .executors_shared import interpret_data_response, interpret_list_response
from .models import DatasetCode
from .params import build_data_url, build_list_url
from .requests import DataRequest, ListRequest


class AsyncDataQueryExecutor:
    """Fetch one dataset's observations as decoded JSON (async)."""

    def __init__(self, transport: AsyncTransport) -> None:
        self._transport = transport

    async def execute(self, request: DataRequest) -> object:
        response = await self._transport.request(build_data_url(request))
        return interpret_data_response(response)


class AsyncCodeListingExecutor:
    """Fetch and unpack the dataset codes of one database (async)."""

    def __init__(self, transport: AsyncTransport) -> None:
        self._transport = transport

    async def execute(self, request: ListRequest) -> list[DatasetCode]:
        response = await self._transport.request(build_list_url(request))
        return interpret_list_response(response)


__all__ = [
    "AsyncDataQueryExecutor",
    "AsyncCodeListingExecutor",
]
