"""API routers package."""

from walletdash.api.routers.wallet import router as wallet_router
from walletdash.api.routers.profit_loss import router as profit_loss_router
from walletdash.api.routers.transfers import router as transfers_router

__all__ = [
    "wallet_router",
    "profit_loss_router",
    "transfers_router",
]
