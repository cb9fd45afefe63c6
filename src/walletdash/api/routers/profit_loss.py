"""Profit/loss endpoints."""

from dataclasses import asdict

from fastapi import APIRouter, Depends, Query

from walletdash.api.deps import get_chart_service
from walletdash.api.schemas import (
    ChartPointResponse,
    ProfitLossResponse,
    TimeframeResponse,
)
from walletdash.domain.models import Timeframe
from walletdash.services import ChartService

router = APIRouter(prefix="/profit-loss", tags=["profit-loss"])

DEFAULT_TIMEFRAME = Timeframe.SIX_HOURS.value


@router.get("", response_model=ProfitLossResponse)
def get_profit_loss(
    timeframe: str = Query(DEFAULT_TIMEFRAME, description="1H, 6H, 1D, 1W, 1M or All"),
    charts: ChartService = Depends(get_chart_service),
) -> ProfitLossResponse:
    """P/L in USD for the timeframe with its chart."""
    return ProfitLossResponse.model_validate(asdict(charts.get_profit_loss(timeframe)))


@router.get("/chart", response_model=list[ChartPointResponse])
def get_chart(
    timeframe: str = Query(DEFAULT_TIMEFRAME, description="1H, 6H, 1D, 1W, 1M or All"),
    charts: ChartService = Depends(get_chart_service),
) -> list[ChartPointResponse]:
    """Running-balance chart only; synthetic points are flagged is_mock."""
    return [ChartPointResponse.model_validate(asdict(p)) for p in charts.get_chart_data(timeframe)]


@router.get("/timeframes", response_model=list[TimeframeResponse])
def list_timeframes() -> list[TimeframeResponse]:
    """Selectable timeframes in display order."""
    return [TimeframeResponse(label=t.label, value=t.value) for t in Timeframe]
