"""Enumerated request options and their query-string tokens."""

from __future__ import annotations

from enum import Enum


class Order(Enum):
    """Sort order of returned rows."""

    ASC = "asc"
    DESC = "desc"


class Collapse(Enum):
    """Server-side resampling frequency."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUAL = "annual"


class Transform(Enum):
    """Server-side calculation applied before the data is returned.

    DIFF is row-on-row change, RDIFF percentage change, CUMUL the cumulative
    sum and NORMALIZE rebases the series so the oldest value is 100.
    """

    DIFF = "diff"
    RDIFF = "rdiff"
    CUMUL = "cumul"
    NORMALIZE = "normalize"


def query_token(option: Order | Collapse | Transform) -> str:
    return option.value


__all__ = [
    "Order",
    "Collapse",
    "Transform",
    "query_token",
]
