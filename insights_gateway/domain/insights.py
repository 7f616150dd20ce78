"""Behavioral insights engine - single entry point of the analytical core"""

from typing import Iterable, Optional, Sequence

from insights_gateway.domain.categories import build_category_breakdown
from insights_gateway.domain.forecast import forecast_spend
from insights_gateway.domain.models import (
    BehavioralInsights,
    Period,
    Transaction,
    InsightsSummary,
)
from insights_gateway.domain.narrator import generate_insight_texts
from insights_gateway.domain.patterns import classify_spending_patterns
from insights_gateway.domain.period import resolve_period
from insights_gateway.domain.recurring import detect_recurring_payments
from insights_gateway.domain.trends import build_monthly_trends
from insights_gateway.domain.taxonomy import CategoryTaxonomy, DEFAULT_TAXONOMY
from insights_gateway.utils.date_utils import months_between


def summarize(
    transactions: Sequence[Transaction],
    period: Period,
    recurring_payments_count: int,
) -> InsightsSummary:
    """
    Headline totals over every transaction, categorized or not.

    Savings rate is (income - spend) / income as a percentage, 0 without income.
    Monthly averages divide by the calendar months the period touches.
    """
    total_income = sum(t.amount for t in transactions if t.is_income)
    total_spend = sum(t.amount for t in transactions if t.is_expense)
    savings_rate = (total_income - total_spend) / total_income * 100 if total_income > 0 else 0.0
    months = months_between(period.start, period.end)

    return InsightsSummary(
        total_income=total_income,
        total_spend=total_spend,
        savings_rate=savings_rate,
        recurring_payments_count=recurring_payments_count,
        avg_monthly_income=total_income / months,
        avg_monthly_spend=total_spend / months,
    )


def generate_insights(
    transactions: Iterable[Transaction],
    taxonomy: Optional[CategoryTaxonomy] = None,
) -> BehavioralInsights:
    """
    Main entry point: derive the full behavioral summary of a transaction set.

    Pure and deterministic. The input is not mutated and the result holds
    no references to it.

    Raises:
        InsufficientDataError: The transaction set is empty
    """
    txns = tuple(transactions)
    taxonomy = taxonomy or DEFAULT_TAXONOMY

    period = resolve_period(txns)
    category_breakdown = build_category_breakdown(txns, taxonomy)
    monthly_trends = build_monthly_trends(txns)
    recurring_payments = detect_recurring_payments(txns)
    spending_patterns = classify_spending_patterns(txns, taxonomy)

    return BehavioralInsights(
        period=period,
        summary=summarize(txns, period, len(recurring_payments)),
        category_breakdown=category_breakdown,
        monthly_trends=monthly_trends,
        recurring_payments=recurring_payments,
        spending_patterns=spending_patterns,
        forecast=forecast_spend(monthly_trends),
        insights=generate_insight_texts(
            category_breakdown,
            recurring_payments,
            spending_patterns,
            monthly_trends,
            taxonomy.fixed,
        ),
    )
