"""Short-horizon spend projection"""

from typing import List, Optional, Sequence

from insights_gateway.domain.models import ForecastPoint, MonthlyTrendPoint
from insights_gateway.utils.date_utils import add_months

FORECAST_WINDOW_MONTHS = 3
CONFIDENCE_BY_OFFSET = ("high", "medium", "low")


def forecast_spend(monthly_trends: Sequence[MonthlyTrendPoint]) -> Optional[List[ForecastPoint]]:
    """
    Project the trailing 3-month mean spend flat over the next 3 months.

    This is a plain moving average: confidence labels are fixed by month
    offset (+1 high, +2 medium, +3 low) and carry no statistical meaning.

    Returns:
        Forecast points, or None when fewer than 3 months of trends exist
    """
    if len(monthly_trends) < FORECAST_WINDOW_MONTHS:
        return None

    recent = monthly_trends[-FORECAST_WINDOW_MONTHS:]
    avg_spend = sum(m.spend for m in recent) / len(recent)
    last_month = monthly_trends[-1].month

    return [
        ForecastPoint(
            month=add_months(last_month, offset),
            expected_spend=avg_spend,
            confidence=confidence,
        )
        for offset, confidence in enumerate(CONFIDENCE_BY_OFFSET, start=1)
    ]
