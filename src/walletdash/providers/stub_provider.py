"""Stub providers for offline/testing use."""

import hashlib
from decimal import Decimal

from walletdash.core.exceptions import ChainError
from walletdash.core.units import WEI_PER_ETH
from walletdash.domain.models import (
    ExplorerTransaction,
    FeeData,
    PriceQuote,
    TransferErrorKind,
)

# Deterministic fake prices: (usd, 24h change %)
_STUB_NATIVE_QUOTE = PriceQuote(usd=Decimal("3150.25"), change_24h=Decimal("2.35"))
_STUB_TOKEN_QUOTE = PriceQuote(usd=Decimal("0.42"), change_24h=Decimal("-1.10"))


class StubChainClient:
    """
    Offline chain client with fixed balances.

    Every address holds 1.5 ETH and 250 units of any token. Transfers are not
    broadcast; a deterministic fake hash is returned instead.
    """

    def __init__(
        self,
        balance_wei: int = 3 * WEI_PER_ETH // 2,
        token_balance: Decimal = Decimal("250"),
        block_number: int = 19_000_000,
    ):
        self._balance_wei = balance_wei
        self._token_balance = token_balance
        self._block_number = block_number

    def get_balance(self, address: str) -> int:
        return self._balance_wei

    def get_token_balance(self, token_address: str, owner: str) -> Decimal:
        return self._token_balance

    def get_block_number(self) -> int:
        return self._block_number

    def estimate_gas(self, from_address: str, to_address: str, value_wei: int) -> int:
        return 21000

    def get_fee_data(self) -> FeeData:
        return FeeData(gas_price=20 * 10**9)

    def is_address(self, value: str) -> bool:
        if not value or not value.startswith("0x") or len(value) != 42:
            return False
        try:
            int(value[2:], 16)
        except ValueError:
            return False
        return True

    def address_from_key(self, private_key: str) -> str:
        if not private_key.startswith("0x"):
            raise ChainError("Invalid private key", TransferErrorKind.CONFIGURATION)
        digest = hashlib.sha256(private_key.encode()).hexdigest()
        return "0x" + digest[:40]

    def send_transfer(self, private_key: str, to_address: str, value_wei: int) -> str:
        payload = f"{private_key}:{to_address}:{value_wei}".encode()
        return "0x" + hashlib.sha256(payload).hexdigest()


class StubPriceProvider:
    """Price provider returning fixed quotes."""

    def get_native_price(self) -> PriceQuote:
        return _STUB_NATIVE_QUOTE

    def get_token_price(self, contract_address: str) -> PriceQuote:
        return _STUB_TOKEN_QUOTE


class StubExplorer:
    """Explorer with no history, so charts fall back to synthetic data."""

    def get_transactions(self, address: str, start_block: int) -> list[ExplorerTransaction]:
        return []
