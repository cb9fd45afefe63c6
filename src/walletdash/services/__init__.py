"""Service layer - aggregation and transfer orchestration."""

from walletdash.services.market_data_service import MarketDataService
from walletdash.services.wallet_service import WalletService, compute_daily_change
from walletdash.services.chart_service import ChartService, build_running_balance
from walletdash.services.mock_chart import generate_mock_chart_data
from walletdash.services.transfer_service import TransferService

__all__ = [
    "MarketDataService",
    "WalletService",
    "compute_daily_change",
    "ChartService",
    "build_running_balance",
    "generate_mock_chart_data",
    "TransferService",
]
