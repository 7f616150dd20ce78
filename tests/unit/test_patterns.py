"""Unit tests for the fixed/variable/discretionary split"""

import pytest
from datetime import date
from insights_gateway.domain.models import Direction
from insights_gateway.domain.patterns import classify_spending_patterns
from insights_gateway.domain.taxonomy import CategoryTaxonomy


def test_static_bucket_mapping(make_transaction):
    transactions = [
        make_transaction(date(2024, 1, 1), 1000.0, primary="RENT_AND_UTILITIES"),
        make_transaction(date(2024, 1, 2), 200.0, primary="LOAN_PAYMENTS"),
        make_transaction(date(2024, 1, 3), 50.0, primary="INSURANCE"),
        make_transaction(date(2024, 1, 4), 80.0, primary="ENTERTAINMENT"),
        make_transaction(date(2024, 1, 5), 70.0, primary="TRAVEL"),
        make_transaction(date(2024, 1, 6), 120.0, primary="FOOD_AND_DRINK"),
        make_transaction(date(2024, 1, 7), 30.0),
        make_transaction(date(2024, 1, 8), 999.0, primary="INCOME", direction=Direction.INCOME),
    ]

    patterns = classify_spending_patterns(transactions)

    assert patterns.fixed == pytest.approx(1250.0)
    assert patterns.discretionary == pytest.approx(150.0)
    assert patterns.variable == pytest.approx(150.0)
    assert patterns.total == pytest.approx(1550.0)


def test_food_is_variable(make_transaction):
    transactions = [
        make_transaction(date(2024, 1, 1), 50.0, primary="FOOD_AND_DRINK", detailed="FOOD_AND_DRINK_GROCERIES"),
        make_transaction(date(2024, 1, 2), 50.0, primary="FOOD_AND_DRINK", detailed="FOOD_AND_DRINK_GROCERIES"),
    ]

    patterns = classify_spending_patterns(transactions)

    assert (patterns.fixed, patterns.variable, patterns.discretionary) == (0.0, 100.0, 0.0)


def test_custom_bucket_allowlists(make_transaction):
    taxonomy = CategoryTaxonomy(fixed=frozenset({"MEDICAL"}), discretionary=frozenset())
    transactions = [
        make_transaction(date(2024, 1, 1), 40.0, primary="MEDICAL"),
        make_transaction(date(2024, 1, 2), 60.0, primary="ENTERTAINMENT"),
    ]

    patterns = classify_spending_patterns(transactions, taxonomy)

    assert patterns.fixed == pytest.approx(40.0)
    assert patterns.variable == pytest.approx(60.0)
    assert patterns.discretionary == 0.0
