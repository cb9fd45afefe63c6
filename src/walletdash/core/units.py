"""Ether unit conversion and display formatting."""

from decimal import Decimal, InvalidOperation, ROUND_DOWN, ROUND_HALF_UP

ETH_DECIMALS = 18
WEI_PER_ETH = 10**ETH_DECIMALS

_CENTS = Decimal("0.01")


def wei_to_eth(wei: int) -> Decimal:
    return Decimal(wei) / Decimal(WEI_PER_ETH)


def eth_to_wei(amount: Decimal) -> int:
    """Convert ETH to Wei, dropping anything below 1 Wei."""
    return int((amount * WEI_PER_ETH).to_integral_value(rounding=ROUND_DOWN))


def parse_eth_amount(raw: str) -> Decimal:
    """
    Parse a user-entered ETH amount.

    Raises ValueError for anything that is not a finite positive number, or
    that is finer than 1 Wei (more than 18 decimals).
    """
    try:
        amount = Decimal(str(raw).strip())
    except InvalidOperation as exc:
        raise ValueError(f"Invalid amount: {raw!r}") from exc
    if not amount.is_finite() or amount <= 0:
        raise ValueError(f"Invalid amount: {raw!r}")
    if amount.normalize().as_tuple().exponent < -ETH_DECIMALS:
        raise ValueError(f"Invalid amount: {raw!r} has more than {ETH_DECIMALS} decimals")
    return amount


def format_ether(wei: int) -> str:
    """Render Wei as a plain ETH string, e.g. 1500000000000000000 -> "1.5", 0 -> "0.0"."""
    return format_units(wei_to_eth(wei))


def format_units(amount: Decimal) -> str:
    """Render a token amount without exponent, keeping at least one decimal place."""
    text = format(amount.normalize(), "f")
    return text if "." in text else f"{text}.0"


def format_usd(amount: Decimal) -> str:
    """Two-decimal string for a USD amount."""
    return str(amount.quantize(_CENTS, rounding=ROUND_HALF_UP))
