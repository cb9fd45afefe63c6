"""Pydantic schemas for API request/response."""

from walletdash.api.schemas.wallet import (
    DailyChangeResponse,
    WalletBalanceResponse,
    PortfolioValueResponse,
    WalletSummaryResponse,
    EthBalanceResponse,
    DepositAddressResponse,
)
from walletdash.api.schemas.profit_loss import (
    ChartPointResponse,
    ProfitLossResponse,
    TimeframeResponse,
)
from walletdash.api.schemas.transfer import (
    DepositRequest,
    WithdrawRequest,
    TransactionResultResponse,
)

__all__ = [
    "DailyChangeResponse",
    "WalletBalanceResponse",
    "PortfolioValueResponse",
    "WalletSummaryResponse",
    "EthBalanceResponse",
    "DepositAddressResponse",
    "ChartPointResponse",
    "ProfitLossResponse",
    "TimeframeResponse",
    "DepositRequest",
    "WithdrawRequest",
    "TransactionResultResponse",
]
