"""Core utilities and shared functionality."""

from walletdash.core.timezone import epoch_seconds, to_iso8601, UTC_TZ
from walletdash.core.exceptions import (
    AppError,
    ConfigurationError,
    FetchError,
    ExplorerError,
    ChainError,
)
from walletdash.core.cache import TimeWindowedCache, CacheEntry
from walletdash.core.http import fetch_with_retry

__all__ = [
    "epoch_seconds",
    "to_iso8601",
    "UTC_TZ",
    "AppError",
    "ConfigurationError",
    "FetchError",
    "ExplorerError",
    "ChainError",
    "TimeWindowedCache",
    "CacheEntry",
    "fetch_with_retry",
]
