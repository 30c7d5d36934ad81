"""Single entry point used by every front end (CLI, HTTP API, dashboard).

Orchestrates: build LoanTerms → compute schedule and summary → render report.
Invalid input comes back inside the result; nothing here prints or raises it.
"""

import logging
import math
from dataclasses import astuple

from mortgage_calculator.engine.amortization import (
    blended_payment,
    compute_summary,
    generate_schedule,
    periodic_interest_factor,
)
from mortgage_calculator.engine.report import render_report
from mortgage_calculator.exceptions import InvalidInputError
from mortgage_calculator.models.loan import LoanTerms
from mortgage_calculator.models.results import CalculationResult

logger = logging.getLogger(__name__)


def _rejected(error: InvalidInputError) -> CalculationResult:
    logger.info("Rejected loan terms: %s", error)
    return CalculationResult(error=error)


def calculate_terms(terms: LoanTerms) -> CalculationResult:
    try:
        i = periodic_interest_factor(terms)
    except OverflowError:
        i = math.inf
    if not math.isfinite(i):
        return _rejected(InvalidInputError(
            "annual_interest_rate", terms.annual_interest_rate, "is too large to compute"))

    payment = blended_payment(terms, i)
    summary = compute_summary(terms, i, payment)
    if not all(math.isfinite(v) for v in astuple(summary)):
        return _rejected(InvalidInputError(
            "principal", terms.principal, "is too large to compute at this rate"))

    logger.debug("Computing amortization schedule for %s", terms)
    schedule = generate_schedule(terms, i, payment)
    return CalculationResult(
        terms=terms,
        report=render_report(terms, schedule, summary),
        summary=summary,
        periodic_interest_factor=i,
        blended_payment=payment,
        schedule=schedule,
    )


def calculate(
    principal: float,
    annual_interest_rate: float,
    number_of_payments: int,
    payment_frequency: int,
    compounding_frequency: int,
) -> CalculationResult:
    """Validate the five inputs and compute the report.

    Args:
        principal: Loan amount
        annual_interest_rate: Nominal annual rate as a fraction (0.06 for 6%)
        number_of_payments: Total payments over the life of the loan
        payment_frequency: Payments per year
        compounding_frequency: Compounding periods per year

    Returns:
        A CalculationResult; on invalid input its ``error`` is set and no
        report or schedule is produced.
    """
    try:
        terms = LoanTerms(
            principal=principal,
            annual_interest_rate=annual_interest_rate,
            number_of_payments=number_of_payments,
            payment_frequency=payment_frequency,
            compounding_frequency=compounding_frequency,
        )
    except InvalidInputError as e:
        return _rejected(e)

    return calculate_terms(terms)
