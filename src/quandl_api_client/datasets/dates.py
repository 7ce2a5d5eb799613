"""Date input coercion and range validation."""

from __future__ import annotations

import re
from datetime import date, datetime

from ..core.errors import QuandlDateRangeError, QuandlParseError

DateInput = date | str

_ISO_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def to_date(value: DateInput) -> date:
    """Coerce a date, datetime or ``yyyy-mm-dd`` string to a calendar date."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise TypeError("date must be datetime.date or str")

    match = _ISO_DATE_RE.fullmatch(value)
    if match is None:
        raise QuandlParseError(f"`{value}` is not a date in yyyy-mm-dd form")
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise QuandlParseError(f"`{value}` is not a valid calendar date") from exc


def format_date(value: date) -> str:
    return value.isoformat()


def validate_date_range(start_date: date | None, end_date: date | None) -> None:
    if start_date is None or end_date is None:
        return
    if start_date > end_date:
        raise QuandlDateRangeError(
            f"start date `{format_date(start_date)}` is after end date `{format_date(end_date)}`",
            start_date=start_date,
            end_date=end_date,
        )


__all__ = [
    "DateInput",
    "to_date",
    "format_date",
    "validate_date_range",
]
