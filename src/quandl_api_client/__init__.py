"""Public package exports for Quandl API client."""

from .async_client import AsyncQuandlClient
from .client import QuandlClient
from .config import QuandlClientConfig, TransportConfig
from .core.errors import (
    QuandlApiError,
    QuandlClientClosedError,
    QuandlConfigurationError,
    QuandlDateRangeError,
    QuandlDecodeError,
    QuandlError,
    QuandlParseError,
    QuandlTransportError,
)
from .datasets import Collapse, DatasetCode, DataRequest, ListRequest, Order, Transform

__all__ = [
    "QuandlClient",
    "AsyncQuandlClient",
    "QuandlClientConfig",
    "TransportConfig",
    "DataRequest",
    "ListRequest",
    "DatasetCode",
    "Order",
    "Collapse",
    "Transform",
    "QuandlError",
    "QuandlParseError",
    "QuandlDateRangeError",
    "QuandlApiError",
    "QuandlDecodeError",
    "QuandlTransportError",
    "QuandlConfigurationError",
    "QuandlClientClosedError",
]
