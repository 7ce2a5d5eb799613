"""URL and query-string builders for dataset endpoints."""

from __future__ import annotations

from urllib.parse import quote

import httpx

from ..core.errors import QuandlConfigurationError
from .dates import format_date
from .enums import query_token
from .requests import DataRequest, ListRequest

QueryParams = list[tuple[str, str]]


def _segment(value: str) -> str:
    return quote(value, safe="")


def _build_url(base_url: str, path: str, params: QueryParams) -> httpx.URL:
    try:
        base = httpx.URL(base_url)
        url = httpx.URL(f"{base_url.rstrip('/')}/{path}", params=params)
    except httpx.InvalidURL as exc:
        raise QuandlConfigurationError(f"cannot build request URL: {exc}") from exc
    # The path is appended as text, so a query or fragment would swallow it.
    if base.query or base.fragment:
        raise QuandlConfigurationError(
            f"base URL `{base_url}` must not carry a query string or fragment"
        )
    return url


def build_data_params(request: DataRequest) -> QueryParams:
    params: QueryParams = []
    if request.session.api_key:
        params.append(("api_key", request.session.api_key))
    if request.limit is not None:
        params.append(("limit", str(request.limit)))
    if request.rows is not None:
        params.append(("rows", str(request.rows)))
    if request.column_index is not None:
        params.append(("column_index", str(request.column_index)))
    if request.start_date is not None:
        params.append(("start_date", format_date(request.start_date)))
    if request.end_date is not None:
        params.append(("end_date", format_date(request.end_date)))
    if request.order is not None:
        params.append(("order", query_token(request.order)))
    if request.collapse is not None:
        params.append(("collapse", query_token(request.collapse)))
    if request.transform is not None:
        params.append(("transform", query_token(request.transform)))
    return params


def build_list_params(request: ListRequest) -> QueryParams:
    if request.session.api_key:
        return [("api_key", request.session.api_key)]
    return []


def build_data_url(request: DataRequest) -> httpx.URL:
    path = (
        f"datasets/{_segment(request.database_code)}"
        f"/{_segment(request.dataset_code)}/data.json"
    )
    return _build_url(request.session.base_url, path, build_data_params(request))


def build_list_url(request: ListRequest) -> httpx.URL:
    path = f"databases/{_segment(request.database_code)}/codes.csv"
    return _build_url(request.session.base_url, path, build_list_params(request))


__all__ = [
    "QueryParams",
    "build_data_params",
    "build_list_params",
    "build_data_url",
    "build_list_url",
]
