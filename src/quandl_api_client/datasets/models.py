"""Dataset listing models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class DatasetCode:
    code: str
    desc: str


__all__ = [
    "DatasetCode",
]
