"""Analysis window resolution"""

from typing import Sequence

from insights_gateway.domain.exceptions import InsufficientDataError
from insights_gateway.domain.models import Period, Transaction


def resolve_period(transactions: Sequence[Transaction]) -> Period:
    """Earliest and latest transaction dates"""
    if not transactions:
        raise InsufficientDataError("No transactions available for analysis")

    dates = [t.date for t in transactions]
    return Period(start=min(dates), end=max(dates))
