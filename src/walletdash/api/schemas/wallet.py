"""Pydantic schemas for wallet endpoints."""

from pydantic import BaseModel


class DailyChangeResponse(BaseModel):
    """Signed USD amount and percent change over 24h."""

    amount: str
    percentage: str


class WalletBalanceResponse(BaseModel):
    """Response schema for the wallet balance."""

    balance: str
    stable: str
    daily_change: DailyChangeResponse


class PortfolioValueResponse(BaseModel):
    """Response schema for the USD portfolio valuation."""

    not_stable: str
    stable_plus_portfolio: str


class WalletSummaryResponse(BaseModel):
    """Balance and portfolio as rendered by the wallet card."""

    balance: WalletBalanceResponse
    portfolio: PortfolioValueResponse


class EthBalanceResponse(BaseModel):
    """Native balance only (withdraw form)."""

    balance: str


class DepositAddressResponse(BaseModel):
    """Where to send funds, or why that is unavailable."""

    success: bool
    deposit_address: str
    error: str
