from __future__ import annotations

import asyncio

import pytest

from quandl_api_client.async_client import AsyncQuandlClient
from quandl_api_client.core.async_transport import AsyncTransport
from quandl_api_client.core.errors import QuandlApiError, QuandlClientClosedError
from quandl_api_client.datasets.models import DatasetCode
from tests.shared.archives import make_codes_zip
from tests.shared.client_fakes import DummyAsyncTransport
from tests.shared.transport import AsyncSequencedClient, Response, build_config, json_response


def _client(steps) -> tuple[AsyncQuandlClient, AsyncSequencedClient]:
    http = AsyncSequencedClient(steps)
    config = build_config()
    return AsyncQuandlClient(config=config, transport=AsyncTransport(config, client=http)), http


@pytest.mark.asyncio
async def test_async_client_context_manager_closes_transport():
    transport = DummyAsyncTransport()
    async with AsyncQuandlClient(transport=transport) as client:
        assert client is not None
    assert transport.closed is True


@pytest.mark.asyncio
async def test_async_data_request_runs_through_pipeline():
    client, http = _client([json_response(200, {"dataset_data": {"data": []}})])
    payload = await client.dataset("WIKI", "AAPL").with_limit(1).run()
    assert payload == {"dataset_data": {"data": []}}
    assert http.urls == ["https://www.quandl.com/api/v3/datasets/WIKI/AAPL/data.json?limit=1"]


@pytest.mark.asyncio
async def test_async_listing_runs_through_pipeline():
    client, _ = _client([Response(200, make_codes_zip())])
    codes = await client.dataset_codes("YC").run()
    assert codes[0] == DatasetCode(code="MYS5Y", desc="Malaysian Government 5-Year Bond Yield")


@pytest.mark.asyncio
async def test_async_error_status_is_api_error():
    client, _ = _client([json_response(404, {"quandl_error": {"code": "QECx02"}})])
    with pytest.raises(QuandlApiError, match="404"):
        await client.dataset("WIKI", "AAAPL").run()


@pytest.mark.asyncio
async def test_async_requests_can_run_concurrently():
    client, http = _client([json_response(200, {"n": 1}), json_response(200, {"n": 1})])
    keyed = client.with_api_key("secret-key")
    results = await asyncio.gather(
        client.dataset("WIKI", "AAPL").run(),
        keyed.dataset("WIKI", "MSFT").run(),
    )
    assert results == [{"n": 1}, {"n": 1}]
    assert sorted(http.urls) == [
        "https://www.quandl.com/api/v3/datasets/WIKI/AAPL/data.json",
        "https://www.quandl.com/api/v3/datasets/WIKI/MSFT/data.json?api_key=secret-key",
    ]


@pytest.mark.asyncio
async def test_async_client_raises_when_used_after_close():
    client = AsyncQuandlClient(transport=DummyAsyncTransport())
    request = client.dataset("WIKI", "AAPL")
    await client.close()
    with pytest.raises(QuandlClientClosedError):
        await request.run()
