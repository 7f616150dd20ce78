"""Recurring payment detection - periodic, near-constant payments per counterparty"""

from typing import Dict, List, Optional, Sequence

from insights_gateway.domain.models import Frequency, RecurringPaymentCandidate, Transaction

MIN_OCCURRENCES = 3
AMOUNT_TOLERANCE = 0.10
DESCRIPTION_KEY_LENGTH = 30
MAX_MERCHANT_LENGTH = 50

# Inclusive mean-gap bands in days
INTERVAL_BANDS = (
    (25, 35, Frequency.MONTHLY),
    (360, 370, Frequency.YEARLY),
    (5, 9, Frequency.WEEKLY),
)


def counterparty_key(txn: Transaction) -> str:
    """Merchant name, or the first 30 characters of the raw description"""
    return txn.merchant or txn.description[:DESCRIPTION_KEY_LENGTH]


def classify_interval(mean_gap_days: float) -> Optional[Frequency]:
    """Map an average gap between payments to a frequency, None when irregular"""
    for low, high, frequency in INTERVAL_BANDS:
        if low <= mean_gap_days <= high:
            return frequency
    return None


def _amounts_consistent(amounts: List[float], mean: float) -> bool:
    # All-or-nothing: one outlier rejects the whole group
    if mean <= 0:
        return False
    return all(abs(amount - mean) / mean < AMOUNT_TOLERANCE for amount in amounts)


def detect_recurring_payments(transactions: Sequence[Transaction]) -> List[RecurringPaymentCandidate]:
    """
    Find counterparties paid at a regular interval with near-equal amounts.

    Algorithm:
    1. Group expenses by counterparty key
    2. Drop groups with fewer than 3 payments
    3. Reject the group unless EVERY amount is within 10% of the group mean
    4. Classify the mean day-gap between date-sorted payments:
       25-35 monthly, 360-370 yearly, 5-9 weekly, anything else irregular
    5. Irregular groups produce nothing

    The tolerance and bands are heuristic and deliberately simple; a single
    outlier silences detection for its counterparty.

    Returns:
        Candidates sorted descending by mean amount
    """
    groups: Dict[str, List[Transaction]] = {}
    for txn in transactions:
        if txn.is_expense:
            groups.setdefault(counterparty_key(txn), []).append(txn)

    recurring = []
    for merchant, txns in groups.items():
        if len(txns) < MIN_OCCURRENCES:
            continue

        amounts = [t.amount for t in txns]
        mean_amount = sum(amounts) / len(amounts)
        if not _amounts_consistent(amounts, mean_amount):
            continue

        dates = sorted(t.date for t in txns)
        gaps = [(later - earlier).days for earlier, later in zip(dates, dates[1:])]
        frequency = classify_interval(sum(gaps) / len(gaps))
        if frequency is None:
            continue

        recurring.append(
            RecurringPaymentCandidate(
                merchant=merchant[:MAX_MERCHANT_LENGTH],
                amount=mean_amount,
                frequency=frequency,
                category=txns[0].primary_category or "UNCATEGORIZED",
            )
        )

    return sorted(recurring, key=lambda r: r.amount, reverse=True)
