"""Amortization schedule computation.

Pure functions: LoanTerms in, dataclasses out. No I/O.
"""

from collections.abc import Iterable, Iterator
from math import isclose

from mortgage_calculator.models.loan import LoanTerms
from mortgage_calculator.models.results import PaymentRow, SummaryStats, YearlySummary

# Balances smaller than this are floating-point residue, not money owed
BALANCE_SNAP_THRESHOLD = 1e-2
# Residue left after the last payment grows with the principal
FINAL_BALANCE_REL_TOLERANCE = 1e-8
MONTHS_PER_YEAR = 12


def _is_zero_rate(i: float) -> bool:
    return isclose(i, 0.0, abs_tol=1e-15)


def periodic_interest_factor(terms: LoanTerms) -> float:
    """Effective interest rate per payment period.

    Converts the nominal annual rate, compounded ``compounding_frequency``
    times a year, to the rate that applies between two payments. With monthly
    payments and monthly compounding this is simply rate / 12.
    """
    c = terms.compounding_frequency
    return (1 + terms.annual_interest_rate / c) ** (c / terms.payment_frequency) - 1


def blended_payment(terms: LoanTerms, i: float | None = None) -> float:
    """Level payment covering interest and principal each period."""
    if i is None:
        i = periodic_interest_factor(terms)
    n = terms.number_of_payments
    if _is_zero_rate(i):
        return terms.principal / n
    # A = P * i / (1 - (1+i)^-n)
    return terms.principal * i / (1 - (1 + i) ** (-n))


def iter_schedule(
    terms: LoanTerms,
    i: float | None = None,
    payment: float | None = None,
) -> Iterator[PaymentRow]:
    """Yield one PaymentRow per payment, in order.

    Each call starts over from the full principal. ``i`` and ``payment`` may be
    passed when the caller already computed them.
    """
    if i is None:
        i = periodic_interest_factor(terms)
    if payment is None:
        payment = blended_payment(terms, i)
    balance = terms.principal
    last = terms.number_of_payments
    final_tolerance = max(BALANCE_SNAP_THRESHOLD, terms.principal * FINAL_BALANCE_REL_TOLERANCE)

    for index in range(1, last + 1):
        interest = balance * i
        principal_paid = payment - interest
        balance -= principal_paid
        if abs(balance) < BALANCE_SNAP_THRESHOLD:
            balance = 0.0
        elif index == last and abs(balance) < final_tolerance:
            balance = 0.0

        yield PaymentRow(
            index=index,
            payment=payment,
            interest_portion=interest,
            principal_portion=principal_paid,
            remaining_balance=balance,
        )


def generate_schedule(
    terms: LoanTerms,
    i: float | None = None,
    payment: float | None = None,
) -> list[PaymentRow]:
    return list(iter_schedule(terms, i, payment))


def compute_summary(
    terms: LoanTerms,
    i: float | None = None,
    payment: float | None = None,
) -> SummaryStats:
    if i is None:
        i = periodic_interest_factor(terms)
    if payment is None:
        payment = blended_payment(terms, i)

    if _is_zero_rate(i):
        # principal / n * n need not give back principal exactly
        total_interest = 0.0
    else:
        total_interest = payment * terms.number_of_payments - terms.principal
    years = terms.amortization_years
    per_year = total_interest / years

    return SummaryStats(
        total_interest_paid=total_interest,
        total_paid=terms.principal + total_interest,
        interest_to_principal_ratio=total_interest / terms.principal,
        amortization_years=years,
        average_interest_per_year=per_year,
        average_interest_per_month=per_year / MONTHS_PER_YEAR,
    )


def yearly_summary(rows: Iterable[PaymentRow], payment_frequency: int) -> list[YearlySummary]:
    """Aggregate a schedule by loan year.

    Every ``payment_frequency`` consecutive payments form one year; a trailing
    partial year gets its own entry.
    """
    yearly: list[YearlySummary] = []
    count = 0
    year_principal = 0.0
    year_interest = 0.0
    year_paid = 0.0
    last = None

    for row in rows:
        count += 1
        year_principal += row.principal_portion
        year_interest += row.interest_portion
        year_paid += row.payment
        last = row

        if row.index % payment_frequency == 0:
            yearly.append(YearlySummary(
                year=row.index // payment_frequency,
                payments=count,
                principal=year_principal,
                interest=year_interest,
                total_paid=year_paid,
                ending_balance=row.remaining_balance,
            ))
            count = 0
            year_principal = 0.0
            year_interest = 0.0
            year_paid = 0.0

    if count and last is not None:
        yearly.append(YearlySummary(
            year=(last.index - 1) // payment_frequency + 1,
            payments=count,
            principal=year_principal,
            interest=year_interest,
            total_paid=year_paid,
            ending_balance=last.remaining_balance,
        ))

    return yearly
