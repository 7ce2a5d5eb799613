from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from quandl_api_client.core.errors import (
    QuandlConfigurationError,
    QuandlDateRangeError,
    QuandlParseError,
)
from quandl_api_client.datasets.enums import Collapse, Order, Transform
from quandl_api_client.datasets.requests import DataRequest, ListRequest


def test_new_request_has_only_codes(session):
    request = DataRequest(session, "WIKI", "AAPL")
    assert request.database_code == "WIKI"
    assert request.dataset_code == "AAPL"
    assert request.limit is None
    assert request.rows is None
    assert request.column_index is None
    assert request.start_date is None
    assert request.end_date is None
    assert request.order is None
    assert request.collapse is None
    assert request.transform is None


def test_setters_return_new_request_and_leave_original(session):
    request = DataRequest(session, "WIKI", "AAPL")
    limited = request.with_limit(12)
    assert limited.limit == 12
    assert request.limit is None
    assert limited is not request
    assert limited.session is session


def test_setters_store_values(session):
    request = (
        DataRequest(session, "WIKI", "AAPL")
        .with_rows(2)
        .with_column_index(0)
        .with_order(Order.ASC)
        .with_collapse(Collapse.DAILY)
        .with_transform(Transform.RDIFF)
    )
    assert request.rows == 2
    assert request.column_index == 0
    assert request.order is Order.ASC
    assert request.collapse is Collapse.DAILY
    assert request.transform is Transform.RDIFF


def test_setting_field_twice_overwrites(session):
    request = DataRequest(session, "WIKI", "AAPL").with_limit(1).with_limit(5)
    assert request.limit == 5
    request = request.with_start_date("2015-01-01").with_start_date("2015-02-01")
    assert request.start_date == date(2015, 2, 1)


def test_request_is_immutable(session):
    request = DataRequest(session, "WIKI", "AAPL")
    with pytest.raises(FrozenInstanceError):
        request.limit = 3  # type: ignore[misc]


def test_date_setters_accept_str_and_date(session):
    request = (
        DataRequest(session, "WIKI", "AAPL")
        .with_start_date(date(2015, 2, 10))
        .with_end_date("2015-03-10")
    )
    assert request.start_date == date(2015, 2, 10)
    assert request.end_date == date(2015, 3, 10)


def test_date_setter_rejects_unparseable_string(session):
    with pytest.raises(QuandlParseError):
        DataRequest(session, "WIKI", "AAPL").with_start_date("2015-02-31")


@pytest.mark.parametrize(
    ("first", "second"),
    [
        (("start", "2015-02-10"), ("end", "2015-01-10")),
        (("start", date(2015, 2, 10)), ("end", date(2015, 1, 10))),
        (("start", date(2015, 2, 10)), ("end", "2015-01-10")),
        (("end", date(2015, 2, 10)), ("start", "2015-03-10")),
        (("end", "2015-02-10"), ("start", date(2015, 3, 10))),
    ],
    ids=["str-str", "date-date", "date-str", "end-first-date-str", "end-first-str-date"],
)
def test_inverted_range_fails_in_either_order(session, first, second):
    request = DataRequest(session, "WIKI", "AAPL")
    request = _set(request, *first)
    with pytest.raises(QuandlDateRangeError):
        _set(request, *second)


@pytest.mark.parametrize(
    ("first", "second"),
    [
        (("start", "2015-02-10"), ("end", "2015-03-10")),
        (("end", "2015-03-10"), ("start", "2015-02-10")),
        (("start", "2015-02-10"), ("end", "2015-02-10")),
    ],
    ids=["start-first", "end-first", "same-day"],
)
def test_ordered_range_succeeds_in_either_order(session, first, second):
    request = DataRequest(session, "WIKI", "AAPL")
    request = _set(_set(request, *first), *second)
    assert request.start_date is not None
    assert request.end_date is not None
    assert request.start_date <= request.end_date


def test_failed_date_setter_leaves_request_unchanged(session):
    request = DataRequest(session, "WIKI", "AAPL").with_start_date("2015-02-10")
    with pytest.raises(QuandlDateRangeError):
        request.with_end_date("2015-01-10")
    assert request.end_date is None


@pytest.mark.parametrize(
    ("database_code", "dataset_code"),
    [("", "AAPL"), ("WIKI", ""), ("   ", "AAPL")],
)
def test_blank_codes_are_rejected(session, database_code, dataset_code):
    with pytest.raises(QuandlConfigurationError):
        DataRequest(session, database_code, dataset_code)


def test_list_request_requires_database_code(session):
    assert ListRequest(session, " YC ").database_code == "YC"
    with pytest.raises(QuandlConfigurationError):
        ListRequest(session, "")


def test_session_is_excluded_from_equality_and_repr(session, keyed_session):
    left = DataRequest(session, "WIKI", "AAPL")
    right = DataRequest(keyed_session, "WIKI", "AAPL")
    assert left == right
    assert "secret-key" not in repr(right)


def _set(request: DataRequest, field: str, value) -> DataRequest:
    if field == "start":
        return request.with_start_date(value)
    return request.with_end_date(value)
