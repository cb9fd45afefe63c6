"""Value objects returned by chain, price and explorer providers."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class PriceQuote:
    """Spot price in USD with the 24h change in percent."""

    usd: Decimal = field(default_factory=lambda: Decimal("0"))
    change_24h: Decimal = field(default_factory=lambda: Decimal("0"))


@dataclass(frozen=True)
class ExplorerTransaction:
    """A native transfer as listed by the block explorer."""

    hash: str
    from_address: str
    to_address: str
    value_wei: int
    timestamp: int


@dataclass(frozen=True)
class FeeData:
    """Current fee market data (Wei)."""

    gas_price: Optional[int] = None
    max_fee_per_gas: Optional[int] = None

    @property
    def effective_price(self) -> int:
        """Price per gas unit used for cost estimates."""
        return self.gas_price or self.max_fee_per_gas or 0
