"""Wallet service: balances, daily change and portfolio valuation."""

import logging
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal, ROUND_HALF_UP

from walletdash.core.units import format_ether, format_units, format_usd, wei_to_eth
from walletdash.domain.views import (
    DailyChange,
    PortfolioValueView,
    WalletBalanceView,
    WalletSummaryView,
)
from walletdash.providers.chain_client import ChainClient
from walletdash.services.market_data_service import MarketDataService

logger = logging.getLogger(__name__)

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


def previous_value(current: Decimal, change_24h_percent: Decimal) -> Decimal:
    """
    Value 24 hours ago given today's value and the 24h change in percent.

    A change of -100% or worse has no meaningful inverse; the current value is
    returned unchanged.
    """
    factor = 1 + change_24h_percent / _HUNDRED
    if factor <= 0:
        return current
    return current / factor


def compute_daily_change(
    eth_value: Decimal,
    eth_change_24h: Decimal,
    token_value: Decimal,
    token_change_24h: Decimal,
) -> DailyChange:
    """
    Daily change of the non-stable holdings in USD and percent.

    Positive amounts are rendered "+$X.XX"; zero and negative ones "$X.XX"
    with the sign carried by the number.
    """
    current = eth_value + token_value
    previous = previous_value(eth_value, eth_change_24h) + previous_value(
        token_value, token_change_24h
    )
    delta = current - previous

    if previous > 0:
        percent = (delta / previous * _HUNDRED).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
        percentage = f"{percent}%"
    else:
        percentage = "0.0%"

    amount = format_usd(delta)
    return DailyChange(
        amount=f"+${amount}" if delta > 0 else f"${amount}",
        percentage=percentage,
    )


class WalletService:
    """
    Service for reading the dashboard wallet's holdings.

    Combines the native balance, the tracked token, the stable coin and spot
    prices. Read operations never raise: failures degrade to zeroed views.
    """

    def __init__(
        self,
        chain: ChainClient,
        market_data_service: MarketDataService,
        wallet_address: str,
        token_address: str,
        stable_token_address: str,
        max_workers: int = 5,
    ):
        self._chain = chain
        self._market = market_data_service
        self._wallet_address = wallet_address
        self._token_address = token_address
        self._stable_token_address = stable_token_address
        self._max_workers = max_workers

    @property
    def wallet_address(self) -> str:
        return self._wallet_address

    def get_eth_balance(self) -> str:
        """Native balance as an ETH string; "0" on failure."""
        try:
            return format_ether(self._chain.get_balance(self._wallet_address))
        except Exception:
            logger.exception("Error getting ETH balance")
            return "0"

    def get_wallet_balance(self) -> WalletBalanceView:
        """
        Native and stable balances plus the 24h change of the volatile holdings.

        ETH price, token price and token balance are fetched concurrently.
        """
        try:
            balance_wei = self._chain.get_balance(self._wallet_address)
            stable_balance = self._stable_balance()

            with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
                eth_quote_future = pool.submit(self._market.get_native_quote)
                token_quote_future = pool.submit(self._market.get_token_quote)
                token_balance_future = pool.submit(self._token_balance)
                eth_quote = eth_quote_future.result()
                token_quote = token_quote_future.result()
                token_balance = token_balance_future.result()

            eth_value = wei_to_eth(balance_wei) * eth_quote.usd
            token_value = token_balance * token_quote.usd

            return WalletBalanceView(
                balance=format_ether(balance_wei),
                stable=format_units(stable_balance),
                daily_change=compute_daily_change(
                    eth_value,
                    eth_quote.change_24h,
                    token_value,
                    token_quote.change_24h,
                ),
            )
        except Exception:
            logger.exception("Error getting wallet balance")
            return WalletBalanceView()

    def get_portfolio_value(self) -> PortfolioValueView:
        """USD value of ETH plus token ("not stable") and of everything including the stable coin."""
        try:
            with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
                token_balance_future = pool.submit(self._token_balance)
                token_price_future = pool.submit(self._market.get_token_price)
                stable_future = pool.submit(self._stable_balance)
                balance_future = pool.submit(self._chain.get_balance, self._wallet_address)
                eth_price_future = pool.submit(self._market.get_native_price)

                token_value = token_balance_future.result() * token_price_future.result()
                stable_balance = stable_future.result()
                eth_value = wei_to_eth(balance_future.result()) * eth_price_future.result()

            not_stable = eth_value + token_value
            return PortfolioValueView(
                not_stable=format_usd(not_stable),
                stable_plus_portfolio=format_usd(stable_balance + not_stable),
            )
        except Exception:
            logger.exception("Error getting portfolio value")
            return PortfolioValueView()

    def get_wallet_summary(self) -> WalletSummaryView:
        """Balance and portfolio together, fetched side by side."""
        with ThreadPoolExecutor(max_workers=2) as pool:
            balance_future = pool.submit(self.get_wallet_balance)
            portfolio_future = pool.submit(self.get_portfolio_value)
            return WalletSummaryView(
                balance=balance_future.result(),
                portfolio=portfolio_future.result(),
            )

    def _stable_balance(self) -> Decimal:
        return self._chain.get_token_balance(self._stable_token_address, self._wallet_address)

    def _token_balance(self) -> Decimal:
        """Tracked token balance; 0 when untracked or unreadable."""
        if not self._market.token_is_tracked:
            if self._token_address:
                logger.warning(
                    "Token address %s is the stable coin contract, which is tracked separately",
                    self._token_address,
                )
            return _ZERO
        try:
            return self._chain.get_token_balance(self._token_address, self._wallet_address)
        except Exception:
            logger.warning("Error getting token balance", exc_info=True)
            return _ZERO
