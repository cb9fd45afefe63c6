"""View models package."""

from walletdash.domain.views.wallet import (
    ChartDataPoint,
    DailyChange,
    WalletBalanceView,
    PortfolioValueView,
    WalletSummaryView,
    ProfitLossView,
    TransactionResult,
    DepositAddressView,
)

__all__ = [
    "ChartDataPoint",
    "DailyChange",
    "WalletBalanceView",
    "PortfolioValueView",
    "WalletSummaryView",
    "ProfitLossView",
    "TransactionResult",
    "DepositAddressView",
]
