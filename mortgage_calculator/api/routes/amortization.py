"""Amortization routes — the API entry point to the calculator."""

from dataclasses import asdict

from fastapi import APIRouter, HTTPException

from mortgage_calculator.api.schemas import (
    AmortizationRequest,
    AmortizationResponse,
    FrequenciesResponse,
    FrequencyOption,
    PaymentRowResponse,
    SummaryResponse,
    YearlySummaryResponse,
)
from mortgage_calculator.engine.amortization import yearly_summary
from mortgage_calculator.engine.calculator import calculate
from mortgage_calculator.models.loan import COMPOUNDING_FREQUENCIES, PaymentFrequency

router = APIRouter(prefix="/api/v1", tags=["amortization"])


@router.get("/frequencies", response_model=FrequenciesResponse)
def frequencies():
    return FrequenciesResponse(
        payment_frequencies=[
            FrequencyOption(label=f.label, value=f.value) for f in PaymentFrequency
        ],
        compounding_frequencies=list(COMPOUNDING_FREQUENCIES),
    )


@router.post("/amortization", response_model=AmortizationResponse)
def amortization(req: AmortizationRequest):
    """Loan terms → level payment, schedule, yearly totals and the text report."""
    result = calculate(
        principal=req.principal,
        annual_interest_rate=req.annual_interest_rate_pct / 100,
        number_of_payments=req.number_of_payments,
        payment_frequency=req.payment_frequency,
        compounding_frequency=req.compounding_frequency,
    )
    if not result:
        raise HTTPException(status_code=400, detail=result.error.message)

    yearly = yearly_summary(result.schedule, result.terms.payment_frequency)
    schedule = result.schedule if req.include_schedule else []

    return AmortizationResponse(
        periodic_interest_factor=result.periodic_interest_factor,
        blended_payment=result.blended_payment,
        summary=SummaryResponse(**asdict(result.summary)),
        schedule=[PaymentRowResponse(**asdict(row)) for row in schedule],
        yearly=[YearlySummaryResponse(**asdict(y)) for y in yearly],
        report=result.report,
    )
