from dataclasses import dataclass, field

from mortgage_calculator.exceptions import InvalidInputError
from mortgage_calculator.models.loan import LoanTerms


@dataclass(frozen=True)
class PaymentRow:
    index: int
    payment: float
    interest_portion: float
    principal_portion: float
    remaining_balance: float


@dataclass(frozen=True)
class SummaryStats:
    total_interest_paid: float
    total_paid: float  # Principal + interest
    interest_to_principal_ratio: float
    amortization_years: float  # May be fractional
    average_interest_per_year: float
    average_interest_per_month: float


@dataclass(frozen=True)
class YearlySummary:
    year: int
    payments: int  # Fewer than the payment frequency in a trailing partial year
    principal: float
    interest: float
    total_paid: float
    ending_balance: float


@dataclass
class CalculationResult:
    """Outcome of one calculation: a report, or the reason there is none.

    Truthy on success. On failure only ``error`` is set.
    """
    terms: LoanTerms | None = None
    report: str = ""
    summary: SummaryStats | None = None
    periodic_interest_factor: float | None = None
    blended_payment: float | None = None
    schedule: list[PaymentRow] = field(default_factory=list)
    error: InvalidInputError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> str:
        """Return the report, raising the stored error if the calculation failed."""
        if self.error is not None:
            raise self.error
        return self.report
