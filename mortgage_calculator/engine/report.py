"""Fixed-width text report of an amortization schedule.

Every amount, in the table and in the summary, is rendered with two decimal
places. The format line at the top of the report says so.
"""

from collections.abc import Iterable

from mortgage_calculator.engine.amortization import compute_summary, iter_schedule
from mortgage_calculator.models.loan import LoanTerms
from mortgage_calculator.models.results import PaymentRow, SummaryStats, YearlySummary

INDEX_WIDTH = 10
AMOUNT_WIDTH = 16
SEPARATOR = " | "

COLUMNS = ("Payment", "Blended Payment", "Interest", "Principal Amount", "Balance")
YEARLY_COLUMNS = ("Year", "Payments", "Principal", "Interest", "Total Paid", "Balance")

FORMAT_NOTE = "All amounts are rounded to 2 decimal places."


def _header(columns: tuple[str, ...]) -> str:
    first, *rest = columns
    cells = [first.ljust(INDEX_WIDTH)] + [c.rjust(AMOUNT_WIDTH) for c in rest]
    return SEPARATOR.join(cells)


def _amount(value: float) -> str:
    return f"{value:>{AMOUNT_WIDTH}.2f}"


def _terms_line(terms: LoanTerms) -> str:
    return (
        f"Principal: {terms.principal:.2f} | "
        f"Annual Rate: {terms.annual_interest_rate * 100:.4f}% | "
        f"Payments: {terms.number_of_payments} | "
        f"Payment Frequency: {terms.payment_frequency}/yr | "
        f"Compounding: {terms.compounding_frequency}/yr"
    )


def format_row(row: PaymentRow) -> str:
    cells = [
        str(row.index).ljust(INDEX_WIDTH),
        _amount(row.payment),
        _amount(row.interest_portion),
        _amount(row.principal_portion),
        _amount(row.remaining_balance),
    ]
    return SEPARATOR.join(cells)


def render_schedule(rows: Iterable[PaymentRow]) -> str:
    header = _header(COLUMNS)
    lines = [header, "-" * len(header)]
    lines.extend(format_row(row) for row in rows)
    return "\n".join(lines) + "\n"


def render_summary(summary: SummaryStats) -> str:
    items = [
        ("Total Interest Paid", summary.total_interest_paid),
        ("Total Interest and Principal", summary.total_paid),
        ("Interest/Principal Ratio", summary.interest_to_principal_ratio),
        ("Average Interest Paid per Month", summary.average_interest_per_month),
        ("Average Interest Paid per Year", summary.average_interest_per_year),
        ("Amortization in Years", summary.amortization_years),
    ]
    width = max(len(label) for label, _ in items) + 1
    lines = ["Additional Information:"]
    lines.extend(f"{label + ':':<{width}} {value:.2f}" for label, value in items)
    return "\n".join(lines) + "\n"


def render_yearly(yearly: Iterable[YearlySummary]) -> str:
    header = _header(YEARLY_COLUMNS)
    lines = [header, "-" * len(header)]
    for y in yearly:
        cells = [
            str(y.year).ljust(INDEX_WIDTH),
            f"{y.payments:>{AMOUNT_WIDTH}d}",
            _amount(y.principal),
            _amount(y.interest),
            _amount(y.total_paid),
            _amount(y.ending_balance),
        ]
        lines.append(SEPARATOR.join(cells))
    return "\n".join(lines) + "\n"


def render_report(
    terms: LoanTerms,
    rows: Iterable[PaymentRow] | None = None,
    summary: SummaryStats | None = None,
) -> str:
    """Full report: terms, payment-by-payment table, then summary statistics.

    ``rows`` and ``summary`` are computed from ``terms`` unless given.
    """
    if rows is None:
        rows = iter_schedule(terms)
    if summary is None:
        summary = compute_summary(terms)
    parts = [
        "Mortgage Amortization Schedule\n",
        _terms_line(terms) + "\n",
        FORMAT_NOTE + "\n",
        "\n",
        render_schedule(rows),
        "\n",
        render_summary(summary),
    ]
    return "".join(parts)
