"""Price provider protocol and the CoinGecko implementation."""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Protocol

import requests

from walletdash.core.http import fetch_with_retry
from walletdash.domain.models import PriceQuote

COINGECKO_BASE_URL = "https://api.coingecko.com/api/v3"


class PriceProvider(Protocol):
    """
    Protocol for spot price feeds.

    Implementations return a PriceQuote (USD price, 24h change percent) and
    raise on transport or payload failure.
    """

    def get_native_price(self) -> PriceQuote:
        """Price of ETH."""
        ...

    def get_token_price(self, contract_address: str) -> PriceQuote:
        """Price of an ERC-20 token on Ethereum, looked up by contract address."""
        ...


class CoinGeckoPriceProvider:
    """PriceProvider using CoinGecko's public simple-price endpoints."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        base_url: str = COINGECKO_BASE_URL,
        max_attempts: int = 3,
        retry_delay: float = 1.0,
        timeout: float = 10.0,
    ):
        self._session = session or requests.Session()
        self._base_url = base_url.rstrip("/")
        self._max_attempts = max_attempts
        self._retry_delay = retry_delay
        self._timeout = timeout

    def get_native_price(self) -> PriceQuote:
        data = self._get(
            "/simple/price",
            {"ids": "ethereum", "vs_currencies": "usd", "include_24hr_change": "true"},
        )
        return _parse_quote(data.get("ethereum"))

    def get_token_price(self, contract_address: str) -> PriceQuote:
        data = self._get(
            "/simple/token_price/ethereum",
            {
                "contract_addresses": contract_address,
                "vs_currencies": "usd",
                "include_24hr_change": "true",
            },
        )
        return _parse_quote(data.get(contract_address.lower()))

    def _get(self, path: str, params: dict[str, str]) -> dict[str, Any]:
        response = fetch_with_retry(
            f"{self._base_url}{path}",
            params,
            session=self._session,
            max_attempts=self._max_attempts,
            retry_delay=self._retry_delay,
            timeout=self._timeout,
        )
        return response.json()


def _parse_quote(entry: Optional[dict[str, Any]]) -> PriceQuote:
    """Build a quote from a CoinGecko entry; missing fields count as zero."""
    if not entry:
        return PriceQuote()
    return PriceQuote(
        usd=_to_decimal(entry.get("usd")),
        change_24h=_to_decimal(entry.get("usd_24h_change")),
    )


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        return Decimal("0")
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return Decimal("0")
