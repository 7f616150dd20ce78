"""Domain models - pure Python dataclasses representing spending insights"""

import math
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional

from insights_gateway.domain.exceptions import InvalidTransactionDataError


class Direction(str, Enum):
    """Money flow of a transaction relative to the account holder"""

    INCOME = "income"
    EXPENSE = "expense"


class Frequency(str, Enum):
    """Interval classification of a recurring payment"""

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


@dataclass(frozen=True)
class Transaction:
    """Canonical categorized transaction consumed by the analytical core"""

    date: date
    direction: Direction
    amount: float  # non-negative magnitude
    currency: str = "USD"
    primary_category: Optional[str] = None
    detailed_category: Optional[str] = None
    merchant: Optional[str] = None
    description: str = ""

    def __post_init__(self) -> None:
        if not math.isfinite(self.amount) or self.amount < 0:
            raise InvalidTransactionDataError(
                f"Transaction amount must be a finite non-negative magnitude, got {self.amount}"
            )

    @property
    def is_income(self) -> bool:
        return self.direction is Direction.INCOME

    @property
    def is_expense(self) -> bool:
        return self.direction is Direction.EXPENSE


@dataclass(frozen=True)
class Period:
    """Analysis window: first and last transaction dates"""

    start: date
    end: date


@dataclass(frozen=True)
class DetailedCategoryEntry:
    detailed_category: str
    amount: float
    transaction_count: int


@dataclass(frozen=True)
class CategoryBreakdownEntry:
    """Spend for one primary category with its detailed sub-totals"""

    primary_category: str
    total_amount: float
    percentage: float
    detailed_breakdown: List[DetailedCategoryEntry] = field(default_factory=list)


@dataclass(frozen=True)
class MonthlyTrendPoint:
    """Income and spend for one calendar month (YYYY-MM)"""

    month: str
    income: float
    spend: float
    net: float


@dataclass(frozen=True)
class RecurringPaymentCandidate:
    """Periodic payment to a single counterparty"""

    merchant: str
    amount: float
    frequency: Frequency
    category: str


@dataclass(frozen=True)
class SpendingPatterns:
    """Expense split into fixed, variable and discretionary buckets"""

    fixed: float
    variable: float
    discretionary: float

    @property
    def total(self) -> float:
        return self.fixed + self.variable + self.discretionary


@dataclass(frozen=True)
class ForecastPoint:
    month: str
    expected_spend: float
    confidence: str  # "high" | "medium" | "low"


@dataclass(frozen=True)
class InsightsSummary:
    total_income: float
    total_spend: float
    savings_rate: float
    recurring_payments_count: int
    avg_monthly_income: float
    avg_monthly_spend: float


@dataclass(frozen=True)
class BehavioralInsights:
    """Complete behavioral summary derived from a transaction set"""

    period: Period
    summary: InsightsSummary
    category_breakdown: List[CategoryBreakdownEntry]
    monthly_trends: List[MonthlyTrendPoint]
    recurring_payments: List[RecurringPaymentCandidate]
    spending_patterns: SpendingPatterns
    forecast: Optional[List[ForecastPoint]]
    insights: List[str]
