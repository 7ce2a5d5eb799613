"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from dataclasses import replace

from .config import QuandlClientConfig
from .core.errors import QuandlConfigurationError


def validate_client_config(config: QuandlClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise QuandlConfigurationError(str(exc)) from exc


def config_with_api_key(config: QuandlClientConfig, api_key: str | None) -> QuandlClientConfig:
    updated = replace(config, api_key=api_key)
    validate_client_config(updated)
    return updated


__all__ = [
    "validate_client_config",
    "config_with_api_key",
]
