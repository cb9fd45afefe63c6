"""Enumerations for domain models."""

from enum import Enum


class Timeframe(str, Enum):
    """Chart timeframes selectable on the profit/loss card."""

    ONE_HOUR = "1H"
    SIX_HOURS = "6H"
    ONE_DAY = "1D"
    ONE_WEEK = "1W"
    ONE_MONTH = "1M"
    ALL = "All"

    @classmethod
    def parse(cls, value: str) -> "Timeframe":
        """Resolve a raw selector; unknown values fall back to one day."""
        try:
            return cls(value)
        except ValueError:
            return cls.ONE_DAY

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def lookback_seconds(self) -> int:
        """Seconds of history to query; 0 means the whole chain."""
        return _LOOKBACK_SECONDS[self]

    @property
    def mock_duration_seconds(self) -> int:
        """Span covered by synthetic chart data."""
        return _MOCK_DURATION_SECONDS[self]


_LABELS = {
    Timeframe.ONE_HOUR: "Past Hour",
    Timeframe.SIX_HOURS: "Past 6 Hours",
    Timeframe.ONE_DAY: "Past Day",
    Timeframe.ONE_WEEK: "Past Week",
    Timeframe.ONE_MONTH: "Past Month",
    Timeframe.ALL: "All Time",
}

_LOOKBACK_SECONDS = {
    Timeframe.ONE_HOUR: 3600,
    Timeframe.SIX_HOURS: 21600,
    Timeframe.ONE_DAY: 86400,
    Timeframe.ONE_WEEK: 604800,
    Timeframe.ONE_MONTH: 2592000,
    Timeframe.ALL: 0,
}

_MOCK_DURATION_SECONDS = {
    **_LOOKBACK_SECONDS,
    Timeframe.ALL: 2592000,
}


class TransferErrorKind(str, Enum):
    """Classified reasons a transfer attempt failed."""

    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    USER_REJECTED = "USER_REJECTED"
    INVALID_RECIPIENT = "INVALID_RECIPIENT"
    SELF_TRANSFER = "SELF_TRANSFER"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    CONFIGURATION = "CONFIGURATION"
    UNKNOWN = "UNKNOWN"


class Network(str, Enum):
    """Supported Ethereum networks."""

    MAINNET = "mainnet"
    SEPOLIA = "sepolia"
