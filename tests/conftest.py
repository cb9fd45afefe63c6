"""
Pytest configuration and fixtures for wallet dashboard tests.

This module provides:
- A controllable clock for cache and chart timing
- Fake chain, price and explorer providers with call recording
- Valid settings and an AppContext wired to the fakes
- Service fixtures and a FastAPI test client
"""

import random
from decimal import Decimal
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from walletdash.main import app
from walletdash.api.deps import get_context
from walletdash.app_context import AppContext
from walletdash.config.settings import Settings, set_settings, reset_settings
from walletdash.core.cache import TimeWindowedCache
from walletdash.core.exceptions import ChainError
from walletdash.core.units import WEI_PER_ETH
from walletdash.domain.models import (
    ExplorerTransaction,
    FeeData,
    PriceQuote,
    TransferErrorKind,
)
from walletdash.services import (
    ChartService,
    MarketDataService,
    TransferService,
    WalletService,
)


WALLET = "0x1111111111111111111111111111111111111111"
RECIPIENT = "0x2222222222222222222222222222222222222222"
TOKEN = "0x3333333333333333333333333333333333333333"
STABLE = "0xdAC17F958D2ee523a2206206994597C13D831ec7"
DEPOSIT_SOURCE = "0x4444444444444444444444444444444444444444"
DEPOSIT_SOURCE_KEY = "0x" + "ab" * 32
WALLET_KEY = "0x" + "cd" * 32

FIXED_NOW = 1_718_461_800.0  # 2024-06-15T14:30:00Z


def eth(amount: str) -> int:
    """ETH amount as Wei."""
    return int(Decimal(amount) * WEI_PER_ETH)


# =============================================================================
# CLOCK
# =============================================================================


class FakeClock:
    """Epoch-seconds clock that only moves when told to."""

    def __init__(self, start: float = FIXED_NOW):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock) -> TimeWindowedCache:
    return TimeWindowedCache(ttl_seconds=60, clock=clock)


# =============================================================================
# PROVIDER FAKES
# =============================================================================


class FakeChainClient:
    """
    In-memory chain client.

    Balances are per address (Wei); token balances per (token, owner).
    Set fail_with to make every call raise that exception.
    """

    def __init__(self):
        self.balances: dict[str, int] = {WALLET.lower(): eth("2"), DEPOSIT_SOURCE.lower(): eth("5")}
        self.token_balances: dict[tuple[str, str], Decimal] = {
            (STABLE.lower(), WALLET.lower()): Decimal("500"),
            (TOKEN.lower(), WALLET.lower()): Decimal("100"),
        }
        self.block_number = 20_000_000
        self.gas = 21000
        self.fee_data = FeeData(gas_price=10 * 10**9)
        self.keys = {DEPOSIT_SOURCE_KEY: DEPOSIT_SOURCE, WALLET_KEY: WALLET}
        self.sent: list[tuple[str, str, int]] = []
        self.send_error: Optional[Exception] = None
        self.fail_with: Optional[Exception] = None
        self.token_fail_with: Optional[Exception] = None

    def _check(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    def get_balance(self, address: str) -> int:
        self._check()
        return self.balances.get(address.lower(), 0)

    def get_token_balance(self, token_address: str, owner: str) -> Decimal:
        self._check()
        if self.token_fail_with is not None and token_address.lower() == TOKEN.lower():
            raise self.token_fail_with
        return self.token_balances.get((token_address.lower(), owner.lower()), Decimal("0"))

    def get_block_number(self) -> int:
        self._check()
        return self.block_number

    def estimate_gas(self, from_address: str, to_address: str, value_wei: int) -> int:
        self._check()
        return self.gas

    def get_fee_data(self) -> FeeData:
        self._check()
        return self.fee_data

    def is_address(self, value: str) -> bool:
        if not value or not value.startswith("0x") or len(value) != 42:
            return False
        try:
            int(value[2:], 16)
        except ValueError:
            return False
        return True

    def address_from_key(self, private_key: str) -> str:
        if private_key not in self.keys:
            raise ChainError("Invalid private key", TransferErrorKind.CONFIGURATION)
        return self.keys[private_key]

    def send_transfer(self, private_key: str, to_address: str, value_wei: int) -> str:
        self._check()
        if self.send_error is not None:
            raise self.send_error
        self.sent.append((private_key, to_address, value_wei))
        return "0x" + "f" * 64


class FakePriceProvider:
    """Price provider with settable quotes and call counters."""

    def __init__(
        self,
        native: PriceQuote = PriceQuote(usd=Decimal("2000"), change_24h=Decimal("0")),
        token: PriceQuote = PriceQuote(usd=Decimal("1"), change_24h=Decimal("0")),
    ):
        self.native = native
        self.token = token
        self.native_calls = 0
        self.token_calls = 0
        self.fail_with: Optional[Exception] = None

    def get_native_price(self) -> PriceQuote:
        self.native_calls += 1
        if self.fail_with is not None:
            raise self.fail_with
        return self.native

    def get_token_price(self, contract_address: str) -> PriceQuote:
        self.token_calls += 1
        if self.fail_with is not None:
            raise self.fail_with
        return self.token


class FakeExplorer:
    """Explorer returning a fixed transaction list and recording queries."""

    def __init__(self, transactions: Optional[list[ExplorerTransaction]] = None):
        self.transactions = transactions or []
        self.calls: list[tuple[str, int]] = []
        self.fail_with: Optional[Exception] = None

    def get_transactions(self, address: str, start_block: int) -> list[ExplorerTransaction]:
        self.calls.append((address, start_block))
        if self.fail_with is not None:
            raise self.fail_with
        return list(self.transactions)


def make_tx(
    value: str,
    incoming: bool = True,
    timestamp: int = 1_718_400_000,
    counterparty: str = RECIPIENT,
) -> ExplorerTransaction:
    """Build an explorer transaction to or from the test wallet."""
    return ExplorerTransaction(
        hash="0x" + format(timestamp, "064x"),
        from_address=counterparty if incoming else WALLET,
        to_address=WALLET if incoming else counterparty,
        value_wei=eth(value),
        timestamp=timestamp,
    )


@pytest.fixture
def chain() -> FakeChainClient:
    return FakeChainClient()


@pytest.fixture
def price_provider() -> FakePriceProvider:
    return FakePriceProvider()


@pytest.fixture
def explorer() -> FakeExplorer:
    return FakeExplorer()


# =============================================================================
# SETTINGS / SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def settings() -> Settings:
    """Fully valid settings pointing at the fake wallet."""
    return Settings(
        _env_file=None,
        etherscan_api_key="ABCDEF123456",
        wallet_private_key=WALLET_KEY,
        wallet_public_key=WALLET,
        token_address=TOKEN,
        stable_token_address=STABLE,
        deposit_source_private_key=DEPOSIT_SOURCE_KEY,
    )


@pytest.fixture
def market_data_service(price_provider, cache) -> MarketDataService:
    return MarketDataService(
        provider=price_provider,
        cache=cache,
        token_address=TOKEN,
        stable_token_address=STABLE,
    )


@pytest.fixture
def wallet_service(chain, market_data_service) -> WalletService:
    return WalletService(
        chain=chain,
        market_data_service=market_data_service,
        wallet_address=WALLET,
        token_address=TOKEN,
        stable_token_address=STABLE,
    )


@pytest.fixture
def chart_service(chain, explorer, market_data_service, cache, clock) -> ChartService:
    return ChartService(
        chain=chain,
        explorer=explorer,
        market_data_service=market_data_service,
        cache=cache,
        wallet_address=WALLET,
        clock=clock,
        rng=random.Random(7),
    )


@pytest.fixture
def transfer_service(chain, settings, cache) -> TransferService:
    return TransferService(chain=chain, settings=settings, cache=cache)


@pytest.fixture
def app_context(settings, chain, price_provider, explorer, cache) -> AppContext:
    return AppContext(
        settings=settings,
        chain=chain,
        price_provider=price_provider,
        explorer=explorer,
        cache=cache,
    )


# =============================================================================
# API CLIENT
# =============================================================================


@pytest.fixture
def client(settings, app_context) -> TestClient:
    """Provide FastAPI test client wired to the fake providers."""
    set_settings(settings)
    app.dependency_overrides[get_context] = lambda: app_context
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    reset_settings()
