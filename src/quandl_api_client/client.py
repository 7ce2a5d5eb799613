"""Public client entrypoint."""

from __future__ import annotations

from types import TracebackType

from .client_shared import config_with_api_key, validate_client_config
from .config import QuandlClientConfig
from .core.errors import QuandlClientClosedError
from .core.transport import SyncTransport
from .datasets.executors import CodeListingExecutor, DataQueryExecutor
from .datasets.models import DatasetCode
from .datasets.requests import DataRequest, ListRequest


class QuandlClient:
    """Public Quandl API client.

    Holds the API key and HTTP transport shared by every request built from
    it. Key and transport are fixed at construction: ``with_api_key``
    returns a new client on the same transport.
    """

    def __init__(
        self,
        *,
        config: QuandlClientConfig | None = None,
        transport: SyncTransport | None = None,
        data_executor: DataQueryExecutor | None = None,
        list_executor: CodeListingExecutor | None = None,
    ) -> None:
        self._config = config or QuandlClientConfig()
        validate_client_config(self._config)

        self._transport = transport or SyncTransport(self._config)
        self._owns_transport = True
        self._data_executor = data_executor or DataQueryExecutor(self._transport)
        self._list_executor = list_executor or CodeListingExecutor(self._transport)
        self._closed = False

    @property
    def api_key(self) -> str | None:
        return self._config.api_key

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def with_api_key(self, api_key: str | None) -> "QuandlClient":
        """Return a client using ``api_key`` that shares this client's transport.

        Closing the derived client leaves the shared transport open.
        """
        self._ensure_open()
        derived = QuandlClient(
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

    def execute_data_request(self, request: DataRequest) -> object:
        self._ensure_open()
        return self._data_executor.execute(request)

    def execute_list_request(self, request: ListRequest) -> list[DatasetCode]:
        self._ensure_open()
        return self._list_executor.execute(request)

    def _ensure_open(self) -> None:
        if self._closed:
            raise QuandlClientClosedError("QuandlClient is already closed")

    def close(self) -> None:
        if self._closed:
            return
        if self._owns_transport:
            self._transport.close()
        self._closed = True

    def __enter__(self) -> "QuandlClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "QuandlClient",
]
