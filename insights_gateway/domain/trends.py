"""Month-by-month income and spend"""

from typing import Dict, List, Sequence

from insights_gateway.domain.models import MonthlyTrendPoint, Transaction
from insights_gateway.utils.date_utils import month_key


def build_monthly_trends(transactions: Sequence[Transaction]) -> List[MonthlyTrendPoint]:
    """One point per month with activity, ascending by month. Empty months are not filled."""
    buckets: Dict[str, List[float]] = {}

    for txn in transactions:
        income_spend = buckets.setdefault(month_key(txn.date), [0.0, 0.0])
        if txn.is_income:
            income_spend[0] += txn.amount
        else:
            income_spend[1] += txn.amount

    return [
        MonthlyTrendPoint(month=month, income=income, spend=spend, net=income - spend)
        for month, (income, spend) in sorted(buckets.items())
    ]
