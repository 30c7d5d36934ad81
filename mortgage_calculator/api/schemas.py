"""Pydantic schemas for API request/response models."""

from pydantic import BaseModel, Field


# ---- Request schemas ----

class AmortizationRequest(BaseModel):
    principal: float = Field(..., description="Loan amount")
    annual_interest_rate_pct: float = Field(..., description="Nominal annual rate in percent, e.g. 6 for 6%")
    number_of_payments: int = Field(..., description="Total number of payments")
    payment_frequency: int = Field(12, description="Payments per year (12, 26, 52)")
    compounding_frequency: int = Field(12, description="Compounding periods per year (1, 2, 4, 12, 365)")
    include_schedule: bool = True


# ---- Response schemas ----

class PaymentRowResponse(BaseModel):
    index: int
    payment: float
    interest_portion: float
    principal_portion: float
    remaining_balance: float


class SummaryResponse(BaseModel):
    total_interest_paid: float
    total_paid: float
    interest_to_principal_ratio: float
    amortization_years: float
    average_interest_per_year: float
    average_interest_per_month: float


class YearlySummaryResponse(BaseModel):
    year: int
    payments: int
    principal: float
    interest: float
    total_paid: float
    ending_balance: float


class AmortizationResponse(BaseModel):
    periodic_interest_factor: float
    blended_payment: float
    summary: SummaryResponse
    schedule: list[PaymentRowResponse] = []
    yearly: list[YearlySummaryResponse] = []
    report: str


class FrequencyOption(BaseModel):
    label: str
    value: int


class FrequenciesResponse(BaseModel):
    payment_frequencies: list[FrequencyOption]
    compounding_frequencies: list[int]
