"""Dataset request package."""

from .dates import DateInput
from .enums import Collapse, Order, Transform
from .models import DatasetCode
from .requests import DataRequest, ListRequest

__all__ = [
    "DataRequest",
    "ListRequest",
    "DatasetCode",
    "DateInput",
    "Order",
    "Collapse",
    "Transform",
]
