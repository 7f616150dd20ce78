"""Category breakdown of expense transactions"""

from typing import Dict, List, Sequence

from insights_gateway.domain.models import (
    CategoryBreakdownEntry,
    DetailedCategoryEntry,
    Transaction,
)
from insights_gateway.domain.taxonomy import CategoryTaxonomy, DEFAULT_TAXONOMY


def build_category_breakdown(
    transactions: Sequence[Transaction],
    taxonomy: CategoryTaxonomy = DEFAULT_TAXONOMY,
) -> List[CategoryBreakdownEntry]:
    """
    Group expense spend by primary and detailed category.

    Only expenses carrying a valid (primary, detailed) pair are grouped. The
    percentage base is total spend across ALL expenses, so uncategorized spend
    lowers every share instead of inflating them.

    Ordering:
    - Primary categories descending by total
    - Detailed categories descending by amount within each primary
    """
    expenses = [t for t in transactions if t.is_expense]
    total_spend = sum(t.amount for t in expenses)

    totals: Dict[str, float] = {}
    detailed: Dict[str, Dict[str, list]] = {}

    for txn in expenses:
        if not taxonomy.is_valid(txn.primary_category, txn.detailed_category):
            continue

        primary = txn.primary_category
        totals[primary] = totals.get(primary, 0.0) + txn.amount

        # [amount, count] per detailed category
        stats = detailed.setdefault(primary, {}).setdefault(txn.detailed_category, [0.0, 0])
        stats[0] += txn.amount
        stats[1] += 1

    breakdown = []
    for primary, total in totals.items():
        sub_entries = sorted(
            (
                DetailedCategoryEntry(
                    detailed_category=name,
                    amount=amount,
                    transaction_count=count,
                )
                for name, (amount, count) in detailed[primary].items()
            ),
            key=lambda e: e.amount,
            reverse=True,
        )
        breakdown.append(
            CategoryBreakdownEntry(
                primary_category=primary,
                total_amount=total,
                percentage=total / total_spend * 100 if total_spend > 0 else 0.0,
                detailed_breakdown=sub_entries,
            )
        )

    return sorted(breakdown, key=lambda e: e.total_amount, reverse=True)
