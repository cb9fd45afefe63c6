"""Chart service: running-balance history and profit/loss."""

import logging
import random
from decimal import Decimal
from typing import Callable, Optional

from walletdash.core.cache import TimeWindowedCache
from walletdash.core.timezone import epoch_seconds, to_iso8601
from walletdash.core.units import format_usd, wei_to_eth
from walletdash.domain.models import ExplorerTransaction, Timeframe
from walletdash.domain.views import ChartDataPoint, ProfitLossView
from walletdash.providers.chain_client import ChainClient
from walletdash.providers.explorer_provider import ExplorerProvider
from walletdash.services.market_data_service import MarketDataService
from walletdash.services.mock_chart import generate_mock_chart_data

logger = logging.getLogger(__name__)

SECONDS_PER_BLOCK = 12


def estimate_start_block(current_block: int, lookback_seconds: int) -> int:
    """First block of the lookback window; 0 (genesis) when lookback is 0."""
    if lookback_seconds <= 0:
        return 0
    return max(0, current_block - lookback_seconds // SECONDS_PER_BLOCK)


def build_running_balance(
    transactions: list[ExplorerTransaction],
    wallet_address: str,
) -> list[ChartDataPoint]:
    """
    Walk transactions oldest first, accumulating the wallet's net ETH flow.

    Incoming value adds, outgoing value subtracts; transactions that touch
    neither side still produce a point at the current value.
    """
    wallet = wallet_address.lower()
    running = Decimal("0")
    chart: list[ChartDataPoint] = []

    for tx in transactions:
        amount = wei_to_eth(tx.value_wei)
        if tx.to_address.lower() == wallet:
            running += amount
        elif tx.from_address.lower() == wallet:
            running -= amount

        chart.append(
            ChartDataPoint(
                date=to_iso8601(tx.timestamp),
                value=float(running),
                timestamp=tx.timestamp,
            )
        )
    return chart


class ChartService:
    """
    Service for the profit/loss card.

    Real chart data is cached per timeframe and wallet; empty or failed
    lookups fall back to synthetic points so the chart is never blank.
    """

    def __init__(
        self,
        chain: ChainClient,
        explorer: ExplorerProvider,
        market_data_service: MarketDataService,
        cache: TimeWindowedCache,
        wallet_address: str,
        clock: Callable[[], float] = epoch_seconds,
        rng: Optional[random.Random] = None,
    ):
        self._chain = chain
        self._explorer = explorer
        self._market = market_data_service
        self._cache = cache
        self._wallet_address = wallet_address
        self._clock = clock
        self._rng = rng or random.Random()

    @staticmethod
    def cache_name(timeframe: Timeframe) -> str:
        return f"chart_{timeframe.value}"

    def get_chart_data(self, timeframe: str) -> list[ChartDataPoint]:
        """Running-balance series for the timeframe, or synthetic data if none is available."""
        frame = Timeframe.parse(timeframe)
        cache_name = self.cache_name(frame)

        cached = self._cache.get(cache_name, self._wallet_address)
        if cached is not None:
            return cached

        try:
            start_block = 0
            if frame.lookback_seconds > 0:
                start_block = estimate_start_block(
                    self._chain.get_block_number(), frame.lookback_seconds
                )
            transactions = self._explorer.get_transactions(self._wallet_address, start_block)
        except Exception:
            logger.warning("Error getting chart data for %s; using mock data", frame.value, exc_info=True)
            return self._mock(frame)

        chart = build_running_balance(transactions, self._wallet_address)
        if not chart:
            return self._mock(frame)

        self._cache.set(cache_name, self._wallet_address, chart)
        return chart

    def get_profit_loss(self, timeframe: str) -> ProfitLossView:
        """
        P/L in USD: latest running balance times the ETH spot price.

        Synthetic series carry no real balance, so their P/L is zero.
        """
        frame = Timeframe.parse(timeframe)
        try:
            chart = self.get_chart_data(frame.value)
            if not chart or chart[-1].is_mock:
                value = Decimal("0")
            else:
                latest = Decimal(str(chart[-1].value))
                value = latest * self._market.get_native_price()
            return ProfitLossView(value=format_usd(value), period=frame.label, chart_data=chart)
        except Exception:
            logger.exception("Error getting profit/loss")
            return ProfitLossView(period=frame.label)

    def clear_cached_charts(self) -> None:
        """Drop every cached chart for the wallet (after its balance changed)."""
        for frame in Timeframe:
            self._cache.clear(self.cache_name(frame), self._wallet_address)

    def _mock(self, frame: Timeframe) -> list[ChartDataPoint]:
        return generate_mock_chart_data(frame, now=self._clock(), rng=self._rng)
