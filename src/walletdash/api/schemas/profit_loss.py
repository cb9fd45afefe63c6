"""Pydantic schemas for profit/loss endpoints."""

from pydantic import BaseModel


class ChartPointResponse(BaseModel):
    """Single chart point."""

    date: str
    value: float
    timestamp: int
    is_mock: bool = False


class ProfitLossResponse(BaseModel):
    """Response schema for the profit/loss card."""

    value: str
    period: str
    chart_data: list[ChartPointResponse]


class TimeframeResponse(BaseModel):
    """Selectable timeframe."""

    label: str
    value: str
