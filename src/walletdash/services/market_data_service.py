"""Market data service for ETH and token spot prices."""

import logging
from decimal import Decimal
from typing import Optional

from walletdash.core.cache import TimeWindowedCache
from walletdash.domain.models import PriceQuote
from walletdash.providers.price_provider import PriceProvider

logger = logging.getLogger(__name__)

_NATIVE_CACHE_NAME = "native_price"
_TOKEN_CACHE_NAME = "token_price"
_NATIVE_IDENTITY = "ethereum"


class MarketDataService:
    """
    Service for fetching spot prices with 24h change.

    Wraps a provider with caching and graceful degradation: a failing feed
    yields a zero quote instead of an exception.
    """

    def __init__(
        self,
        provider: PriceProvider,
        cache: TimeWindowedCache,
        token_address: str = "",
        stable_token_address: str = "",
    ):
        self._provider = provider
        self._cache = cache
        self._token_address = token_address
        self._stable_token_address = stable_token_address

    @property
    def token_is_tracked(self) -> bool:
        """False when no token is configured or it is the stable coin already tracked separately."""
        if not self._token_address:
            return False
        return self._token_address.lower() != self._stable_token_address.lower()

    def get_native_quote(self) -> PriceQuote:
        """ETH price with 24h change; zero quote on failure."""
        return self._cached_quote(_NATIVE_CACHE_NAME, _NATIVE_IDENTITY, self._provider.get_native_price)

    def get_token_quote(self) -> PriceQuote:
        """Tracked token price with 24h change; zero quote when untracked or on failure."""
        if not self.token_is_tracked:
            return PriceQuote()
        address = self._token_address
        return self._cached_quote(
            _TOKEN_CACHE_NAME,
            address.lower(),
            lambda: self._provider.get_token_price(address),
        )

    def get_native_price(self) -> Decimal:
        return self.get_native_quote().usd

    def get_token_price(self) -> Decimal:
        return self.get_token_quote().usd

    def _cached_quote(self, name: str, identity: str, fetch) -> PriceQuote:
        cached: Optional[PriceQuote] = self._cache.get(name, identity)
        if cached is not None:
            return cached

        try:
            quote = fetch()
        except Exception:
            logger.warning("Price lookup for %s failed; using zero quote", identity, exc_info=True)
            return PriceQuote()

        self._cache.set(name, identity, quote)
        return quote
