"""Pydantic schemas for transfer endpoints."""

from typing import Optional

from pydantic import BaseModel, Field


class DepositRequest(BaseModel):
    """Request schema for a deposit."""

    amount: str = Field(..., min_length=1, description="Amount in ETH, e.g. \"0.25\"")


class WithdrawRequest(BaseModel):
    """Request schema for a withdrawal."""

    amount: str = Field(..., min_length=1, description="Amount in ETH, e.g. \"0.25\"")
    recipient_address: str = Field(..., min_length=1)


class TransactionResultResponse(BaseModel):
    """Outcome of a single transfer attempt."""

    success: bool
    tx_hash: str
    error: Optional[str] = None
    error_kind: Optional[str] = None
