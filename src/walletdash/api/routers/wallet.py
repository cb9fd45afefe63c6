"""Wallet endpoints: balances, portfolio value and deposit address."""

from dataclasses import asdict

from fastapi import APIRouter, Depends

from walletdash.api.deps import get_transfer_service, get_wallet_service
from walletdash.api.schemas import (
    DepositAddressResponse,
    EthBalanceResponse,
    PortfolioValueResponse,
    WalletBalanceResponse,
    WalletSummaryResponse,
)
from walletdash.services import TransferService, WalletService

router = APIRouter(prefix="/wallet", tags=["wallet"])


@router.get("", response_model=WalletSummaryResponse)
def get_wallet_summary(
    wallet: WalletService = Depends(get_wallet_service),
) -> WalletSummaryResponse:
    """Balance, daily change and portfolio value in one call."""
    return WalletSummaryResponse.model_validate(asdict(wallet.get_wallet_summary()))


@router.get("/balance", response_model=WalletBalanceResponse)
def get_wallet_balance(
    wallet: WalletService = Depends(get_wallet_service),
) -> WalletBalanceResponse:
    """ETH and stable-coin balances with the 24h change of volatile holdings."""
    return WalletBalanceResponse.model_validate(asdict(wallet.get_wallet_balance()))


@router.get("/portfolio", response_model=PortfolioValueResponse)
def get_portfolio_value(
    wallet: WalletService = Depends(get_wallet_service),
) -> PortfolioValueResponse:
    """USD value of volatile holdings, and of everything including the stable coin."""
    portfolio = wallet.get_portfolio_value()
    return PortfolioValueResponse(
        not_stable=portfolio.not_stable,
        stable_plus_portfolio=portfolio.stable_plus_portfolio,
    )


@router.get("/eth-balance", response_model=EthBalanceResponse)
def get_eth_balance(
    wallet: WalletService = Depends(get_wallet_service),
) -> EthBalanceResponse:
    """Native balance only."""
    return EthBalanceResponse(balance=wallet.get_eth_balance())


@router.get("/deposit-address", response_model=DepositAddressResponse)
def get_deposit_address(
    transfers: TransferService = Depends(get_transfer_service),
) -> DepositAddressResponse:
    """Address to fund the dashboard wallet."""
    view = transfers.get_deposit_address()
    return DepositAddressResponse(
        success=view.success,
        deposit_address=view.deposit_address,
        error=view.error,
    )
