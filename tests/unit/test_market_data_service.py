"""
Unit tests for MarketDataService.

Tests cover:
- Getting ETH and token quotes from the provider
- Quote caching and TTL expiry
- Graceful degradation on provider failure
- Untracked token handling
"""

from decimal import Decimal

from walletdash.domain.models import PriceQuote
from walletdash.services import MarketDataService

from tests.conftest import FakeClock, FakePriceProvider, STABLE, TOKEN


class TestGetQuotes:
    """Tests for basic quote retrieval."""

    def test_native_quote_from_provider(
        self,
        market_data_service: MarketDataService,
    ):
        quote = market_data_service.get_native_quote()

        assert quote.usd == Decimal("2000")
        assert quote.change_24h == Decimal("0")

    def test_token_quote_from_provider(
        self,
        market_data_service: MarketDataService,
        price_provider: FakePriceProvider,
    ):
        price_provider.token = PriceQuote(usd=Decimal("0.5"), change_24h=Decimal("-3.2"))

        assert market_data_service.get_token_quote() == price_provider.token
        assert market_data_service.get_token_price() == Decimal("0.5")


class TestQuoteCaching:
    """Tests for quote caching behavior."""

    def test_cache_hit_does_not_call_provider(
        self,
        market_data_service: MarketDataService,
        price_provider: FakePriceProvider,
    ):
        """
        GIVEN cache TTL is 60 seconds
        WHEN I request the ETH quote twice within TTL
        THEN provider is called only once
        """
        first = market_data_service.get_native_quote()
        second = market_data_service.get_native_quote()

        assert price_provider.native_calls == 1
        assert first == second

    def test_native_and_token_cached_independently(
        self,
        market_data_service: MarketDataService,
        price_provider: FakePriceProvider,
    ):
        market_data_service.get_native_quote()
        market_data_service.get_token_quote()
        market_data_service.get_native_quote()
        market_data_service.get_token_quote()

        assert price_provider.native_calls == 1
        assert price_provider.token_calls == 1

    def test_cache_expiry_calls_provider_again(
        self,
        market_data_service: MarketDataService,
        price_provider: FakePriceProvider,
        clock: FakeClock,
    ):
        market_data_service.get_native_quote()
        clock.advance(61)
        market_data_service.get_native_quote()

        assert price_provider.native_calls == 2


class TestGracefulDegradation:
    """Tests for provider failures."""

    def test_provider_failure_returns_zero_quote(
        self,
        market_data_service: MarketDataService,
        price_provider: FakePriceProvider,
    ):
        """
        GIVEN the price feed raises
        WHEN I request quotes
        THEN zero quotes are returned instead of an exception
        """
        price_provider.fail_with = ConnectionError("Network unavailable")

        assert market_data_service.get_native_quote() == PriceQuote()
        assert market_data_service.get_token_quote() == PriceQuote()

    def test_failure_is_not_cached(
        self,
        market_data_service: MarketDataService,
        price_provider: FakePriceProvider,
    ):
        price_provider.fail_with = ConnectionError("Network unavailable")
        market_data_service.get_native_quote()

        price_provider.fail_with = None
        quote = market_data_service.get_native_quote()

        assert quote.usd == Decimal("2000")


class TestUntrackedToken:
    """Tests for tokens that are not priced."""

    def test_stable_coin_as_token_is_untracked(self, price_provider, cache):
        service = MarketDataService(
            provider=price_provider,
            cache=cache,
            token_address=STABLE.lower(),
            stable_token_address=STABLE,
        )

        assert not service.token_is_tracked
        assert service.get_token_quote() == PriceQuote()
        assert price_provider.token_calls == 0

    def test_empty_token_is_untracked(self, price_provider, cache):
        service = MarketDataService(provider=price_provider, cache=cache, stable_token_address=STABLE)

        assert service.get_token_price() == Decimal("0")
        assert price_provider.token_calls == 0

    def test_configured_token_is_tracked(self, market_data_service):
        assert market_data_service.token_is_tracked
        assert TOKEN != STABLE
