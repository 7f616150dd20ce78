"""Fixed / variable / discretionary spending split"""

from typing import Sequence

from insights_gateway.domain.models import SpendingPatterns, Transaction
from insights_gateway.domain.taxonomy import (
    CategoryTaxonomy,
    DEFAULT_TAXONOMY,
    DISCRETIONARY,
    FIXED,
    VARIABLE,
)


def classify_spending_patterns(
    transactions: Sequence[Transaction],
    taxonomy: CategoryTaxonomy = DEFAULT_TAXONOMY,
) -> SpendingPatterns:
    """
    Sum every expense into exactly one bucket by its primary category.

    Fixed and discretionary come from the taxonomy allowlists; everything
    else, uncategorized included, is variable.
    """
    totals = {FIXED: 0.0, VARIABLE: 0.0, DISCRETIONARY: 0.0}

    for txn in transactions:
        if txn.is_expense:
            totals[taxonomy.bucket_for(txn.primary_category)] += txn.amount

    return SpendingPatterns(
        fixed=totals[FIXED],
        variable=totals[VARIABLE],
        discretionary=totals[DISCRETIONARY],
    )
