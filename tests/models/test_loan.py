import math

import pytest

from mortgage_calculator.exceptions import InvalidInputError, MortgageCalculatorError
from mortgage_calculator.models.loan import COMPOUNDING_FREQUENCIES, LoanTerms, PaymentFrequency


def _terms(**overrides) -> LoanTerms:
    fields = dict(
        principal=200000,
        annual_interest_rate=0.06,
        number_of_payments=360,
        payment_frequency=12,
        compounding_frequency=12,
    )
    fields.update(overrides)
    return LoanTerms(**fields)


class TestLoanTerms:
    def test_normalises_types(self):
        terms = _terms()
        assert isinstance(terms.principal, float)
        assert isinstance(terms.annual_interest_rate, float)
        assert terms.number_of_payments == 360

    def test_frozen(self, standard_terms):
        with pytest.raises(AttributeError):
            standard_terms.principal = 1

    def test_zero_rate_allowed(self):
        assert _terms(annual_interest_rate=0).annual_interest_rate == 0.0

    def test_amortization_years(self):
        assert _terms(number_of_payments=390).amortization_years == 32.5

    @pytest.mark.parametrize("field, value", [
        ("principal", 0),
        ("principal", -100),
        ("annual_interest_rate", -0.01),
        ("number_of_payments", 0),
        ("number_of_payments", -12),
        ("payment_frequency", 0),
        ("compounding_frequency", 0),
        ("compounding_frequency", -1),
    ])
    def test_out_of_range(self, field, value):
        with pytest.raises(InvalidInputError) as exc:
            _terms(**{field: value})
        assert exc.value.field == field
        assert exc.value.details == {"field": field, "value": value}

    @pytest.mark.parametrize("field, value", [
        ("principal", math.nan),
        ("principal", math.inf),
        ("annual_interest_rate", math.nan),
        ("principal", "200000"),
        ("number_of_payments", 360.5),
        ("number_of_payments", "360"),
        ("payment_frequency", True),
        ("principal", None),
    ])
    def test_malformed(self, field, value):
        with pytest.raises(InvalidInputError):
            _terms(**{field: value})

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            _terms(principal=-1)
        with pytest.raises(MortgageCalculatorError):
            _terms(principal=-1)

    def test_error_message(self):
        with pytest.raises(InvalidInputError) as exc:
            _terms(principal=-100)
        assert exc.value.message == "principal must be greater than 0"
        assert "principal must be greater than 0 - " in str(exc.value)


class TestPaymentFrequency:
    def test_values(self):
        assert PaymentFrequency.MONTHLY.value == 12
        assert PaymentFrequency.BI_WEEKLY.value == 26
        assert PaymentFrequency.WEEKLY.value == 52

    def test_labels(self):
        assert [f.label for f in PaymentFrequency] == ["Monthly", "Bi-Weekly", "Weekly"]

    def test_from_label(self):
        assert PaymentFrequency.from_label("Bi-Weekly") is PaymentFrequency.BI_WEEKLY
        assert PaymentFrequency.from_label("weekly") is PaymentFrequency.WEEKLY

    def test_unknown_label(self):
        with pytest.raises(InvalidInputError):
            PaymentFrequency.from_label("Daily")

    def test_compounding_choices(self):
        assert COMPOUNDING_FREQUENCIES == (1, 2, 4, 12, 365)
