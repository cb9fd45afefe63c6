"""Synthetic chart data shown when no real history is available."""

import random
from typing import Optional

from walletdash.core.timezone import epoch_seconds, to_iso8601
from walletdash.domain.models import Timeframe
from walletdash.domain.views import ChartDataPoint

MOCK_POINT_COUNT = 20
MOCK_MIN_VALUE = 200.0
MOCK_VALUE_RANGE = 1000.0


def generate_mock_chart_data(
    timeframe: Timeframe,
    now: Optional[float] = None,
    rng: Optional[random.Random] = None,
    points: int = MOCK_POINT_COUNT,
) -> list[ChartDataPoint]:
    """
    Build evenly spaced random points covering the timeframe's window.

    The first point sits one full window before now, the last one interval
    before now. Values fall in [200, 1200). Every point is flagged is_mock.
    """
    now = epoch_seconds() if now is None else now
    rng = rng or random.Random()
    interval = timeframe.mock_duration_seconds / points

    chart: list[ChartDataPoint] = []
    for i in range(points):
        ts = now - (points - i) * interval
        chart.append(
            ChartDataPoint(
                date=to_iso8601(ts),
                value=rng.random() * MOCK_VALUE_RANGE + MOCK_MIN_VALUE,
                timestamp=int(ts),
                is_mock=True,
            )
        )
    return chart
