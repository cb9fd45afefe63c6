"""Dependency injection for FastAPI."""

from fastapi import Depends

from walletdash.app_context import AppContext, get_app_context
from walletdash.services import ChartService, TransferService, WalletService


def get_context() -> AppContext:
    """Provide the process-wide AppContext."""
    return get_app_context()


def get_wallet_service(context: AppContext = Depends(get_context)) -> WalletService:
    """Provide WalletService instance."""
    return context.wallet


def get_chart_service(context: AppContext = Depends(get_context)) -> ChartService:
    """Provide ChartService instance."""
    return context.charts


def get_transfer_service(context: AppContext = Depends(get_context)) -> TransferService:
    """Provide TransferService instance."""
    return context.transfers
