"""Unit tests for recurring payment detection"""

import pytest
from datetime import date, timedelta
from insights_gateway.domain.models import Direction, Frequency
from insights_gateway.domain.recurring import (
    classify_interval,
    counterparty_key,
    detect_recurring_payments,
)


def test_detect_monthly_subscription(make_transaction):
    """Three evenly spaced equal payments are a monthly recurring payment"""
    transactions = [
        make_transaction(date(2024, 1, 5), 9.99, merchant="NETFLIX", primary="ENTERTAINMENT"),
        make_transaction(date(2024, 2, 4), 9.99, merchant="NETFLIX", primary="ENTERTAINMENT"),
        make_transaction(date(2024, 3, 6), 9.99, merchant="NETFLIX", primary="ENTERTAINMENT"),
    ]

    recurring = detect_recurring_payments(transactions)

    assert len(recurring) == 1
    assert recurring[0].merchant == "NETFLIX"
    assert recurring[0].frequency == Frequency.MONTHLY
    assert recurring[0].amount == pytest.approx(9.99)
    assert recurring[0].category == "ENTERTAINMENT"


def test_two_occurrences_not_enough(make_transaction):
    """Periodicity needs at least 3 payments"""
    transactions = [
        make_transaction(date(2024, 1, 5), 9.99, merchant="NETFLIX"),
        make_transaction(date(2024, 1, 15), 9.99, merchant="NETFLIX"),
    ]

    assert detect_recurring_payments(transactions) == []


def test_removing_one_of_three_drops_detection(make_transaction):
    """Threshold is exactly 3 occurrences"""
    transactions = [
        make_transaction(date(2024, 1, 1), 50.0, merchant="GYM"),
        make_transaction(date(2024, 1, 31), 50.0, merchant="GYM"),
        make_transaction(date(2024, 3, 1), 50.0, merchant="GYM"),
    ]

    assert len(detect_recurring_payments(transactions)) == 1
    assert detect_recurring_payments(transactions[:2]) == []


def test_single_amount_outlier_suppresses_group(make_transaction):
    """One payment more than 10% off the mean rejects the whole group"""
    base = date(2024, 1, 1)
    transactions = [
        make_transaction(base + timedelta(days=30 * i), 20.0, merchant="SPOTIFY")
        for i in range(5)
    ]
    transactions.append(make_transaction(base + timedelta(days=150), 40.0, merchant="SPOTIFY"))

    assert detect_recurring_payments(transactions) == []


def test_amounts_within_tolerance_accepted(make_transaction):
    """Small price changes stay within the 10% band"""
    transactions = [
        make_transaction(date(2024, 1, 10), 100.0, merchant="POWER CO"),
        make_transaction(date(2024, 2, 10), 105.0, merchant="POWER CO"),
        make_transaction(date(2024, 3, 10), 95.0, merchant="POWER CO"),
    ]

    recurring = detect_recurring_payments(transactions)

    assert len(recurring) == 1
    assert recurring[0].amount == pytest.approx(100.0)


def test_weekly_and_yearly_frequencies(make_transaction):
    """Mean gaps of ~7 and ~365 days map to weekly and yearly"""
    weekly = [make_transaction(date(2024, 1, 1) + timedelta(days=7 * i), 15.0, merchant="LAUNDRY") for i in range(4)]
    yearly = [make_transaction(date(2021 + i, 6, 1), 120.0, merchant="DOMAIN RENEWAL") for i in range(3)]

    recurring = {r.merchant: r.frequency for r in detect_recurring_payments(weekly + yearly)}

    assert recurring == {"LAUNDRY": Frequency.WEEKLY, "DOMAIN RENEWAL": Frequency.YEARLY}


def test_irregular_interval_discarded(make_transaction):
    """Groups outside every interval band produce no output"""
    transactions = [
        make_transaction(date(2024, 1, 1) + timedelta(days=14 * i), 30.0, merchant="BIWEEKLY")
        for i in range(4)
    ]

    assert detect_recurring_payments(transactions) == []


def test_income_not_considered(make_transaction):
    """Only expenses are grouped"""
    transactions = [
        make_transaction(date(2024, m, 1), 3000.0, merchant="Employer", direction=Direction.INCOME)
        for m in range(1, 5)
    ]

    assert detect_recurring_payments(transactions) == []


def test_description_fallback_key(make_transaction):
    """Without a merchant, the first 30 description characters group payments"""
    description = "DIRECT DEBIT COUNCIL TAX REF 0001"
    transactions = [
        make_transaction(date(2024, m, 15), 150.0, description=description + str(m))
        for m in range(1, 4)
    ]

    recurring = detect_recurring_payments(transactions)

    assert len(recurring) == 1
    assert recurring[0].merchant == description[:30]
    assert recurring[0].category == "UNCATEGORIZED"


def test_sorted_descending_by_amount(make_transaction):
    """Larger recurring payments come first"""
    transactions = []
    for m in range(1, 4):
        transactions.append(make_transaction(date(2024, m, 1), 9.99, merchant="NETFLIX"))
        transactions.append(make_transaction(date(2024, m, 3), 1200.0, merchant="Landlord"))

    recurring = detect_recurring_payments(transactions)

    assert [r.merchant for r in recurring] == ["Landlord", "NETFLIX"]


def test_counterparty_key_prefers_merchant(make_transaction):
    txn = make_transaction(date(2024, 1, 1), 5.0, merchant="Cafe", description="CARD PAYMENT TO CAFE LTD")
    assert counterparty_key(txn) == "Cafe"


@pytest.mark.parametrize(
    "gap,expected",
    [
        (4.9, None),
        (5, Frequency.WEEKLY),
        (9, Frequency.WEEKLY),
        (9.5, None),
        (25, Frequency.MONTHLY),
        (35, Frequency.MONTHLY),
        (35.5, None),
        (360, Frequency.YEARLY),
        (370, Frequency.YEARLY),
        (371, None),
    ],
)
def test_classify_interval_band_edges(gap, expected):
    """Band edges are inclusive"""
    assert classify_interval(gap) == expected


def test_deviation_of_exactly_ten_percent_rejected(make_transaction):
    """The tolerance is strict: 90 and 110 sit exactly 10% from a mean of 100"""
    transactions = [
        make_transaction(date(2024, 1, 10), 90.0, merchant="WATER CO"),
        make_transaction(date(2024, 2, 10), 100.0, merchant="WATER CO"),
        make_transaction(date(2024, 3, 10), 110.0, merchant="WATER CO"),
    ]

    assert detect_recurring_payments(transactions) == []


def test_deviation_just_inside_tolerance_detected(make_transaction):
    transactions = [
        make_transaction(date(2024, 1, 10), 91.0, merchant="WATER CO"),
        make_transaction(date(2024, 2, 10), 100.0, merchant="WATER CO"),
        make_transaction(date(2024, 3, 10), 109.0, merchant="WATER CO"),
    ]

    recurring = detect_recurring_payments(transactions)

    assert len(recurring) == 1
    assert recurring[0].amount == pytest.approx(100.0)
    assert recurring[0].frequency == Frequency.MONTHLY


def test_category_taken_from_first_transaction_in_input_order(make_transaction):
    """Input order decides the category, not date order"""
    transactions = [
        make_transaction(date(2024, 3, 1), 30.0, merchant="AMAZON", primary="GENERAL_MERCHANDISE"),
        make_transaction(date(2024, 1, 1), 30.0, merchant="AMAZON", primary="ENTERTAINMENT"),
        make_transaction(date(2024, 1, 31), 30.0, merchant="AMAZON", primary="SHOPPING"),
    ]

    recurring = detect_recurring_payments(transactions)

    assert len(recurring) == 1
    assert recurring[0].category == "GENERAL_MERCHANDISE"
