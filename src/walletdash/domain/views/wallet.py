"""View models for wallet, chart and transfer outputs."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class ChartDataPoint:
    """Single point of the profit/loss chart."""

    date: str
    value: float
    timestamp: int
    is_mock: bool = False


@dataclass
class DailyChange:
    """Change of the non-stable holdings over the last 24 hours."""

    amount: str = "$0.00"
    percentage: str = "0.0%"


@dataclass
class WalletBalanceView:
    """Native and stable balances with the daily change."""

    balance: str = "0"
    stable: str = "0"
    daily_change: DailyChange = field(default_factory=DailyChange)


@dataclass
class PortfolioValueView:
    """USD valuation: volatile holdings and volatile plus stable."""

    not_stable: str = "0.00"
    stable_plus_portfolio: str = "0.00"


@dataclass
class WalletSummaryView:
    """Everything the wallet card renders."""

    balance: WalletBalanceView
    portfolio: PortfolioValueView


@dataclass
class ProfitLossView:
    """Profit/loss figure with the chart it was derived from."""

    value: str = "0.00"
    period: str = ""
    chart_data: list[ChartDataPoint] = field(default_factory=list)


@dataclass
class TransactionResult:
    """Outcome of a single transfer attempt."""

    success: bool
    tx_hash: str = ""
    error: Optional[str] = None
    error_kind: Optional[str] = None

    @classmethod
    def failure(cls, error: str, error_kind: Optional[str] = None) -> "TransactionResult":
        return cls(success=False, tx_hash="", error=error, error_kind=error_kind)


@dataclass
class DepositAddressView:
    """Address the user should send funds to."""

    success: bool
    deposit_address: str = ""
    error: str = ""
