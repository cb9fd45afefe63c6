"""Transfer endpoints: deposit and withdraw ETH."""

from fastapi import APIRouter, Depends

from walletdash.api.deps import get_transfer_service
from walletdash.api.schemas import (
    DepositRequest,
    TransactionResultResponse,
    WithdrawRequest,
)
from walletdash.domain.views import TransactionResult
from walletdash.services import TransferService

router = APIRouter(prefix="/transfers", tags=["transfers"])


def _to_response(result: TransactionResult) -> TransactionResultResponse:
    return TransactionResultResponse(
        success=result.success,
        tx_hash=result.tx_hash,
        error=result.error,
        error_kind=result.error_kind,
    )


@router.post("/deposit", response_model=TransactionResultResponse)
def deposit(
    request: DepositRequest,
    transfers: TransferService = Depends(get_transfer_service),
) -> TransactionResultResponse:
    """
    Fund the dashboard wallet from the deposit-source wallet.

    Always 200: failures are reported in the body with success=false.
    """
    return _to_response(transfers.deposit(request.amount))


@router.post("/withdraw", response_model=TransactionResultResponse)
def withdraw(
    request: WithdrawRequest,
    transfers: TransferService = Depends(get_transfer_service),
) -> TransactionResultResponse:
    """
    Send ETH from the dashboard wallet to a recipient.

    Always 200: failures are reported in the body with success=false.
    """
    return _to_response(transfers.withdraw(request.amount, request.recipient_address))
