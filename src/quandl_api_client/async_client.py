"""Public async client entrypoint."""

from __future__ import annotations

from types import TracebackType

from .client_shared import config_with_api_key, validate_client_config
from .config import QuandlClientConfig
from .core.async_transport import AsyncTransport
from .core.errors import QuandlClientClosedError
from .datasets.async_executors import AsyncCodeListingExecutor, AsyncDataQueryExecutor
from .datasets.models import DatasetCode
from .datasets.requests import DataRequest, ListRequest


class AsyncQuandlClient:
    """Public async Quandl API client.

    Requests built from this client return coroutines from ``run()``.
    """

    def __init__(
        self,
        *,
        config: QuandlClientConfig | None = None,
        transport: AsyncTransport | None = None,
        data_executor: AsyncDataQueryExecutor | None = None,
        list_executor: AsyncCodeListingExecutor | None = None,
    ) -> None:
        self._config = config or QuandlClientConfig()
        validate_client_config(self._config)

        self._transport = transport or AsyncTransport(self._config)
        self._owns_transport = True
        self._data_executor = data_executor or AsyncDataQueryExecutor(self._transport)
        self._list_executor = list_executor or AsyncCodeListingExecutor(self._transport)
        self._closed = False

    @property
    def api_key(self) -> str | None:
        return self._config.api_key

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def with_api_key(self, api_key: str | None) -> "AsyncQuandlClient":
        self._ensure_open()
        derived = AsyncQuandlClient(
            config=config_with_api_key(self._config, api_key),
            transport=self._transport,
            data_executor=self._data_executor,
            list_executor=self._list_executor,
        )
        derived._owns_transport = False
        return derived

    def dataset(self, database_code: str, dataset_code: str) -> DataRequest:
        return DataRequest(self, database_code, dataset_code)

    def dataset_codes(self, database_code: str) -> ListRequest:
        return ListRequest(self, database_code)

    async def execute_data_request(self, request: DataRequest) -> object:
        self._ensure_open()
        return await self._data_executor.execute(request)

    async def execute_list_request(self, request: ListRequest) -> list[DatasetCode]:
        self._ensure_open()
        return await self._list_executor.execute(request)

    def _ensure_open(self) -> None:
        if self._closed:
            raise QuandlClientClosedError("AsyncQuandlClient is already closed")

    async def close(self) -> None:
        if self._closed:
            return
        if self._owns_transport:
            await self._transport.close()
        self._closed = True

    async def __aenter__(self) -> "AsyncQuandlClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncQuandlClient",
]
