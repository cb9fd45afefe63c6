"""Domain layer - pure models with no external dependencies."""

from walletdash.domain.models import (
    Timeframe,
    TransferErrorKind,
    Network,
    PriceQuote,
    ExplorerTransaction,
    FeeData,
)
from walletdash.domain.views import (
    ChartDataPoint,
    DailyChange,
    TransactionResult,
)

__all__ = [
    "Timeframe",
    "TransferErrorKind",
    "Network",
    "PriceQuote",
    "ExplorerTransaction",
    "FeeData",
    "ChartDataPoint",
    "DailyChange",
    "TransactionResult",
]
