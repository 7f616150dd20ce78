"""Human-readable observations built from computed aggregates"""

from typing import FrozenSet, List, Sequence

from insights_gateway.domain.models import (
    CategoryBreakdownEntry,
    Frequency,
    MonthlyTrendPoint,
    RecurringPaymentCandidate,
    SpendingPatterns,
)
from insights_gateway.domain.taxonomy import DEFAULT_FIXED_CATEGORIES

TREND_WINDOW_MONTHS = 3
TREND_CHANGE_THRESHOLD_PCT = 5.0


def _mean_spend(points: Sequence[MonthlyTrendPoint]) -> float:
    return sum(p.spend for p in points) / len(points)


def _top_category_text(breakdown: Sequence[CategoryBreakdownEntry]) -> str:
    top = breakdown[0]
    text = (
        f"Your largest spend is {top.primary_category}, "
        f"accounting for {top.percentage:.1f}% of your total outgoings."
    )
    if top.detailed_breakdown:
        top_detailed = top.detailed_breakdown[0]
        text += f" Most of it goes to {top_detailed.detailed_category} ({top_detailed.amount:.2f})."
    return text


def _trend_text(monthly_trends: Sequence[MonthlyTrendPoint]) -> str | None:
    recent = monthly_trends[-TREND_WINDOW_MONTHS:]
    prior = monthly_trends[-2 * TREND_WINDOW_MONTHS:-TREND_WINDOW_MONTHS]
    if len(recent) < TREND_WINDOW_MONTHS or not prior:
        return None

    prior_avg = _mean_spend(prior)
    if prior_avg == 0:
        return None

    change = (_mean_spend(recent) - prior_avg) / prior_avg * 100
    if abs(change) <= TREND_CHANGE_THRESHOLD_PCT:
        return None

    direction = "increased" if change > 0 else "decreased"
    return f"Your spending has {direction} by {abs(change):.1f}% over the last 3 months."


def generate_insight_texts(
    category_breakdown: Sequence[CategoryBreakdownEntry],
    recurring_payments: Sequence[RecurringPaymentCandidate],
    spending_patterns: SpendingPatterns,
    monthly_trends: Sequence[MonthlyTrendPoint],
    fixed_categories: FrozenSet[str] = DEFAULT_FIXED_CATEGORIES,
) -> List[str]:
    """
    Up to four fixed-template statements, always in this order:

    1. Largest primary category, its share and its largest detailed category
    2. Count and total of monthly recurring payments
    3. Share of spend going to fixed costs
    4. Recent 3-month vs prior 3-month mean spend, only beyond a 5% change

    The fixed-cost statement names rent, utilities and loans only when
    fixed_categories is the default allowlist.
    """
    insights: List[str] = []

    if category_breakdown:
        insights.append(_top_category_text(category_breakdown))

    monthly = [r for r in recurring_payments if r.frequency is Frequency.MONTHLY]
    if monthly:
        total_monthly = sum(r.amount for r in monthly)
        insights.append(
            f"You have {len(monthly)} recurring monthly payments totaling {total_monthly:.2f}."
        )

    total_spend = spending_patterns.total
    if total_spend > 0:
        fixed_pct = spending_patterns.fixed / total_spend * 100
        examples = " (rent, utilities, loans)" if fixed_categories == DEFAULT_FIXED_CATEGORIES else ""
        insights.append(f"{fixed_pct:.1f}% of your spending is on fixed costs{examples}.")

    trend = _trend_text(monthly_trends)
    if trend:
        insights.append(trend)

    return insights
