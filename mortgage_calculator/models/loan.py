import math
from dataclasses import dataclass
from enum import Enum
from numbers import Integral, Real

from mortgage_calculator.exceptions import InvalidInputError

# Compounding choices offered by the form, CLI and API
COMPOUNDING_FREQUENCIES = (1, 2, 4, 12, 365)


class PaymentFrequency(Enum):
    MONTHLY = 12
    BI_WEEKLY = 26
    WEEKLY = 52

    @property
    def label(self) -> str:
        return _FREQUENCY_LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> "PaymentFrequency":
        """Look up a frequency by its display label ("Bi-Weekly") or CLI slug ("bi-weekly")."""
        wanted = label.strip().lower()
        for freq, text in _FREQUENCY_LABELS.items():
            if text.lower() == wanted:
                return freq
        raise InvalidInputError("payment_frequency", label, "is not a known payment frequency")


_FREQUENCY_LABELS = {
    PaymentFrequency.MONTHLY: "Monthly",
    PaymentFrequency.BI_WEEKLY: "Bi-Weekly",
    PaymentFrequency.WEEKLY: "Weekly",
}


def _real(field: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(field, value, "must be a number")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidInputError(field, value, "must be finite")
    return value


def _count(field: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidInputError(field, value, "must be an integer")
    value = int(value)
    if value <= 0:
        raise InvalidInputError(field, value, "must be greater than 0")
    return value


@dataclass(frozen=True)
class LoanTerms:
    """Inputs of a single amortization calculation.

    Validated on construction; an instance that exists is always usable by the
    engine without further checks.
    """
    principal: float
    annual_interest_rate: float  # Decimal fraction, e.g. 0.05 for 5%
    number_of_payments: int
    payment_frequency: int  # Payments per year
    compounding_frequency: int  # Compounding periods per year

    def __post_init__(self):
        principal = _real("principal", self.principal)
        if principal <= 0:
            raise InvalidInputError("principal", principal, "must be greater than 0")
        rate = _real("annual_interest_rate", self.annual_interest_rate)
        if rate < 0:
            raise InvalidInputError("annual_interest_rate", rate, "must not be negative")

        # Frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "principal", principal)
        object.__setattr__(self, "annual_interest_rate", rate)
        for field in ("number_of_payments", "payment_frequency", "compounding_frequency"):
            object.__setattr__(self, field, _count(field, getattr(self, field)))

    @property
    def amortization_years(self) -> float:
        return self.number_of_payments / self.payment_frequency
