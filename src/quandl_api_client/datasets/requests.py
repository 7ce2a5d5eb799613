"""Request models with fluent, copy-on-write setters."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, Protocol

from ..core.errors import QuandlConfigurationError
from .dates import DateInput, to_date, validate_date_range
from .enums import Collapse, Order, Transform


class RequestSession(Protocol):
    """What a request needs from the client that created it."""

    @property
    def api_key(self) -> str | None: ...

    @property
    def base_url(self) -> str: ...

    def execute_data_request(self, request: "DataRequest") -> Any: ...

    def execute_list_request(self, request: "ListRequest") -> Any: ...


def _ensure_code(value: str, *, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str")
    text = value.strip()
    if text == "":
        raise QuandlConfigurationError(f"{name} is required")
    return text


@dataclass(slots=True, frozen=True)
class DataRequest:
    """Observations query for one dataset.

    Every setter returns a new request; the receiver is left untouched.
    ``start_date`` and ``end_date`` are checked against each other whichever
    of the two is set last.
    """

    session: RequestSession = field(compare=False, repr=False)
    database_code: str
    dataset_code: str
    limit: int | None = None
    rows: int | None = None
    column_index: int | None = None
    start_date: date | None = None
    end_date: date | None = None
    order: Order | None = None
    collapse: Collapse | None = None
    transform: Transform | None = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "database_code", _ensure_code(self.database_code, name="database_code")
        )
        object.__setattr__(
            self, "dataset_code", _ensure_code(self.dataset_code, name="dataset_code")
        )

    def with_limit(self, limit: int) -> "DataRequest":
        """Return only the first ``limit`` rows; ``1`` gives the latest observation."""
        return replace(self, limit=limit)

    def with_rows(self, rows: int) -> "DataRequest":
        return replace(self, rows=rows)

    def with_column_index(self, column_index: int) -> "DataRequest":
        """Request a single column. Column 0 is the date and is always returned."""
        return replace(self, column_index=column_index)

    def with_start_date(self, value: DateInput) -> "DataRequest":
        start_date = to_date(value)
        validate_date_range(start_date, self.end_date)
        return replace(self, start_date=start_date)

    def with_end_date(self, value: DateInput) -> "DataRequest":
        end_date = to_date(value)
        validate_date_range(self.start_date, end_date)
        return replace(self, end_date=end_date)

    def with_order(self, order: Order) -> "DataRequest":
        return replace(self, order=order)

    def with_collapse(self, collapse: Collapse) -> "DataRequest":
        return replace(self, collapse=collapse)

    def with_transform(self, transform: Transform) -> "DataRequest":
        return replace(self, transform=transform)

    def run(self) -> Any:
        """Execute through the owning client.

        Returns the decoded JSON payload, or an awaitable of it when the
        request was built from an ``AsyncQuandlClient``.
        """
        return self.session.execute_data_request(self)


@dataclass(slots=True, frozen=True)
class ListRequest:
    """Listing of every dataset code in one database."""

    session: RequestSession = field(compare=False, repr=False)
    database_code: str

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "database_code", _ensure_code(self.database_code, name="database_code")
        )

    def run(self) -> Any:
        return self.session.execute_list_request(self)


__all__ = [
    "RequestSession",
    "DataRequest",
    "ListRequest",
]
