"""Application context for in-process service management.

Builds every collaborator once from a Settings instance and hands out the
shared services. The time-windowed cache lives here so that all requests
see the same entries.
"""

import logging
from typing import Optional

from walletdash.config.settings import Settings, get_settings
from walletdash.core.cache import TimeWindowedCache
from walletdash.providers import (
    ChainClient,
    CoinGeckoPriceProvider,
    EtherscanExplorer,
    ExplorerProvider,
    PriceProvider,
    StubChainClient,
    StubExplorer,
    StubPriceProvider,
    Web3ChainClient,
)
from walletdash.services import (
    ChartService,
    MarketDataService,
    TransferService,
    WalletService,
)

logger = logging.getLogger(__name__)


class AppContext:
    """
    Application context providing access to all services.

    Providers can be injected (tests); otherwise they are derived from the
    settings, with stub providers when offline mode is on.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        chain: Optional[ChainClient] = None,
        price_provider: Optional[PriceProvider] = None,
        explorer: Optional[ExplorerProvider] = None,
        cache: Optional[TimeWindowedCache] = None,
    ):
        self._settings = settings or get_settings()
        self._chain = chain
        self._price_provider = price_provider
        self._explorer = explorer
        self._cache = cache or TimeWindowedCache(ttl_seconds=self._settings.cache_ttl_seconds)

        # Service instances (lazy initialized)
        self._market_data_service: Optional[MarketDataService] = None
        self._wallet_service: Optional[WalletService] = None
        self._chart_service: Optional[ChartService] = None
        self._transfer_service: Optional[TransferService] = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def cache(self) -> TimeWindowedCache:
        return self._cache

    # Provider accessors
    @property
    def chain(self) -> ChainClient:
        if self._chain is None:
            if self._settings.offline_mode:
                self._chain = StubChainClient()
            else:
                self._chain = Web3ChainClient(self._settings.resolved_rpc_url)
        return self._chain

    @property
    def price_provider(self) -> PriceProvider:
        if self._price_provider is None:
            if self._settings.offline_mode:
                self._price_provider = StubPriceProvider()
            else:
                self._price_provider = CoinGeckoPriceProvider(
                    max_attempts=self._settings.http_max_attempts,
                    retry_delay=self._settings.http_retry_delay_seconds,
                    timeout=self._settings.http_timeout_seconds,
                )
        return self._price_provider

    @property
    def explorer(self) -> ExplorerProvider:
        if self._explorer is None:
            if self._settings.is_test_mode:
                logger.info("Test mode: charts use synthetic data")
                self._explorer = StubExplorer()
            else:
                self._explorer = EtherscanExplorer(
                    api_key=self._settings.etherscan_api_key,
                    chain_id=self._settings.chain_id,
                    max_attempts=self._settings.http_max_attempts,
                    retry_delay=self._settings.http_retry_delay_seconds,
                    timeout=self._settings.http_timeout_seconds,
                )
        return self._explorer

    # Service accessors
    @property
    def market_data(self) -> MarketDataService:
        """Get the MarketDataService instance."""
        if self._market_data_service is None:
            self._market_data_service = MarketDataService(
                provider=self.price_provider,
                cache=self._cache,
                token_address=self._settings.token_address,
                stable_token_address=self._settings.stable_token_address,
            )
        return self._market_data_service

    @property
    def wallet(self) -> WalletService:
        """Get the WalletService instance."""
        if self._wallet_service is None:
            self._wallet_service = WalletService(
                chain=self.chain,
                market_data_service=self.market_data,
                wallet_address=self._settings.wallet_public_key,
                token_address=self._settings.token_address,
                stable_token_address=self._settings.stable_token_address,
            )
        return self._wallet_service

    @property
    def charts(self) -> ChartService:
        """Get the ChartService instance."""
        if self._chart_service is None:
            self._chart_service = ChartService(
                chain=self.chain,
                explorer=self.explorer,
                market_data_service=self.market_data,
                cache=self._cache,
                wallet_address=self._settings.wallet_public_key,
            )
        return self._chart_service

    @property
    def transfers(self) -> TransferService:
        """Get the TransferService instance."""
        if self._transfer_service is None:
            self._transfer_service = TransferService(
                chain=self.chain,
                settings=self._settings,
                cache=self._cache,
            )
        return self._transfer_service


# Process-wide context (created on first use)
_context: Optional[AppContext] = None


def get_app_context() -> AppContext:
    """Return the process-wide application context."""
    global _context
    if _context is None:
        _context = AppContext()
    return _context


def reset_app_context() -> None:
    """Drop the process-wide context so the next call rebuilds it."""
    global _context
    _context = None
