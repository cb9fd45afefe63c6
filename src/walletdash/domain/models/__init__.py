"""Domain models package."""

from walletdash.domain.models.enums import Timeframe, TransferErrorKind, Network
from walletdash.domain.models.chain import PriceQuote, ExplorerTransaction, FeeData

__all__ = [
    "Timeframe",
    "TransferErrorKind",
    "Network",
    "PriceQuote",
    "ExplorerTransaction",
    "FeeData",
]
