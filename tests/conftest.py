"""Canonical loan fixtures used across all tests.

Fixture: $200K, 6% nominal, 30yr monthly payments, monthly compounding.
"""

import pytest

from mortgage_calculator.models.loan import LoanTerms


@pytest.fixture
def standard_terms() -> LoanTerms:
    """$200K at 6% for 360 monthly payments, compounded monthly."""
    return LoanTerms(
        principal=200000,
        annual_interest_rate=0.06,
        number_of_payments=360,
        payment_frequency=12,
        compounding_frequency=12,
    )


@pytest.fixture
def canadian_terms() -> LoanTerms:
    """Monthly payments on a semi-annually compounded rate."""
    return LoanTerms(
        principal=350000,
        annual_interest_rate=0.05,
        number_of_payments=300,
        payment_frequency=12,
        compounding_frequency=2,
    )


@pytest.fixture
def biweekly_daily_terms() -> LoanTerms:
    """Bi-weekly payments with daily compounding, 20.5 years."""
    return LoanTerms(
        principal=150000,
        annual_interest_rate=0.045,
        number_of_payments=533,
        payment_frequency=26,
        compounding_frequency=365,
    )


@pytest.fixture
def zero_rate_terms() -> LoanTerms:
    return LoanTerms(
        principal=36000,
        annual_interest_rate=0.0,
        number_of_payments=36,
        payment_frequency=12,
        compounding_frequency=12,
    )


@pytest.fixture
def single_payment_terms() -> LoanTerms:
    return LoanTerms(
        principal=10000,
        annual_interest_rate=0.08,
        number_of_payments=1,
        payment_frequency=12,
        compounding_frequency=4,
    )


@pytest.fixture
def all_terms(standard_terms, canadian_terms, biweekly_daily_terms, zero_rate_terms, single_payment_terms):
    return [standard_terms, canadian_terms, biweekly_daily_terms, zero_rate_terms, single_payment_terms]
