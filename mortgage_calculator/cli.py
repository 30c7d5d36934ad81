"""Command-line mortgage calculator.

Usage:
    mortgage-calc --principal 200000 --rate 6 --payments 360
    mortgage-calc --principal 200000 --rate 6 --payments 780 --frequency bi-weekly --compounding 2 --yearly
    mortgage-calc --principal 200000 --rate 6 --payments 360 --api-url http://localhost:8000
"""

import argparse
import logging
import sys

import httpx

from mortgage_calculator.config import settings
from mortgage_calculator.engine.amortization import yearly_summary
from mortgage_calculator.engine.calculator import calculate
from mortgage_calculator.engine.report import render_summary, render_yearly
from mortgage_calculator.models.loan import COMPOUNDING_FREQUENCIES, PaymentFrequency
from mortgage_calculator.models.results import YearlySummary

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_TRANSPORT_ERROR = 1
EXIT_INVALID_INPUT = 2

FREQUENCY_CHOICES = [f.label.lower() for f in PaymentFrequency]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fixed-payment mortgage amortization schedule")
    parser.add_argument("--principal", type=float, required=True, help="Loan amount")
    parser.add_argument("--rate", type=float, required=True, help="Annual interest rate in percent (6 for 6%%)")
    parser.add_argument("--payments", type=int, required=True, help="Total number of payments")
    parser.add_argument("--frequency", choices=FREQUENCY_CHOICES, default="monthly",
                        help="Payment frequency (default: monthly)")
    parser.add_argument("--compounding", type=int, choices=COMPOUNDING_FREQUENCIES,
                        default=settings.default_compounding_frequency,
                        help="Compounding periods per year (default: %(default)s)")
    parser.add_argument("--summary-only", action="store_true", help="Print only the summary statistics")
    parser.add_argument("--yearly", action="store_true", help="Append a per-year breakdown")
    parser.add_argument("--api-url", nargs="?", const=settings.api_url, default=None,
                        help="Compute through a running HTTP API instead of locally "
                             "(default URL: %(const)s)")
    return parser


def _error(message: str, code: int) -> int:
    print(f"error: {message}", file=sys.stderr)
    return code


def run_local(args, payment_frequency: int) -> int:
    result = calculate(
        principal=args.principal,
        annual_interest_rate=args.rate / 100,
        number_of_payments=args.payments,
        payment_frequency=payment_frequency,
        compounding_frequency=args.compounding,
    )
    if not result:
        return _error(result.error.message, EXIT_INVALID_INPUT)

    print(render_summary(result.summary) if args.summary_only else result.report, end="")
    if args.yearly:
        print()
        print(render_yearly(yearly_summary(result.schedule, payment_frequency)), end="")
    return EXIT_OK


def _detail_message(detail) -> str:
    """Flatten an API error detail: a plain string (400) or a list of field errors (422)."""
    if isinstance(detail, list):
        return "; ".join(
            f"{'.'.join(str(p) for p in err.get('loc', [])[1:])}: {err.get('msg', 'invalid')}"
            for err in detail
        )
    return detail or "invalid input"


def run_remote(args, payment_frequency: int) -> int:
    payload = {
        "principal": args.principal,
        "annual_interest_rate_pct": args.rate,
        "number_of_payments": args.payments,
        "payment_frequency": payment_frequency,
        "compounding_frequency": args.compounding,
        "include_schedule": False,
    }
    url = f"{args.api_url.rstrip('/')}/api/v1/amortization"
    try:
        with httpx.Client(timeout=settings.request_timeout) as client:
            resp = client.post(url, json=payload)
    except httpx.HTTPError as e:
        logger.warning("Request to %s failed: %s", url, e)
        return _error(f"could not reach {url}: {e}", EXIT_TRANSPORT_ERROR)

    if resp.status_code in (400, 422):
        return _error(_detail_message(resp.json().get("detail")), EXIT_INVALID_INPUT)
    try:
        resp.raise_for_status()
    except httpx.HTTPStatusError as e:
        return _error(str(e), EXIT_TRANSPORT_ERROR)

    data = resp.json()
    if args.summary_only:
        report = data["report"]
        print(report[report.index("Additional Information:"):], end="")
    else:
        print(data["report"], end="")
    if args.yearly:
        print()
        print(render_yearly(YearlySummary(**y) for y in data["yearly"]), end="")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=settings.log_level)

    payment_frequency = PaymentFrequency.from_label(args.frequency).value
    if args.api_url:
        return run_remote(args, payment_frequency)
    return run_local(args, payment_frequency)


if __name__ == "__main__":
    sys.exit(main())
