"""Mortgage calculator CLI.

Usage:
    python -m src.cli --home-price 300000 --down-payment 60000 --rate 6.5 --term 30
    python -m src.cli --down-payment 90000 --yearly
    python -m src.cli --rate 7.25 --api
    python -m src.cli --rate 7.25 --api --api-url http://calc.internal:8000
"""

import argparse
import asyncio
import logging
import sys
from dataclasses import asdict

import httpx

from src.config import settings
from src.engine.amortization import (
    down_payment_ratio,
    summary_rows,
    loan_breakdown,
    amortization_schedule,
    yearly_summary,
)
from src.engine.calculator import MortgageCalculator
from src.engine.input_ranges import check_input_ranges
from src.models.mortgage import LoanInputs

logger = logging.getLogger(__name__)

NO_RESULT_MESSAGE = "Enter valid loan details to see your payment calculation"


# ── Helpers ──────────────────────────────────────────────────────────────────

def _dollar(v) -> str:
    return f"${float(v):,.2f}"


def _header(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}")


# ── Report sections ──────────────────────────────────────────────────────────

def print_loan_details(data: dict) -> None:
    inputs = data["inputs"]
    _header("Loan Details")
    print(f"  Home Price:       {_dollar(inputs['home_price'])}")
    ratio = data.get("down_payment_ratio")
    share = f"  ({ratio * 100:.1f}% of home price)" if ratio is not None else ""
    print(f"  Down Payment:     {_dollar(inputs['down_payment'])}{share}")
    print(f"  Interest Rate:    {float(inputs['annual_interest_rate_pct']):.2f}%")
    print(f"  Loan Term:        {inputs['term_years']} years")

    for advisory in data.get("advisories", []):
        print(f"  ! {advisory}")


def print_payment_summary(data: dict) -> None:
    _header("Payment Summary")
    if data.get("result") is None:
        print(f"  {NO_RESULT_MESSAGE}")
        return

    for row in data["summary"]:
        print(f"  {row['label'] + ':':<22}{_dollar(row['amount']):>16}")
    print()
    print("  Loan Breakdown")
    for row in data["breakdown"]:
        print(f"    {row['label'] + ':':<20}{_dollar(row['amount']):>16}")


def print_yearly_schedule(yearly: list[dict]) -> None:
    if not yearly:
        return
    _header("Yearly Amortization")
    print(f"  {'Yr':>3}  {'Principal':>14}  {'Interest':>14}  {'Balance':>14}")
    print(f"  {'---':>3}  {'-' * 14}  {'-' * 14}  {'-' * 14}")
    for y in yearly:
        print(
            f"  {y['year']:>3}  {_dollar(y['principal']):>14}  "
            f"{_dollar(y['interest']):>14}  {_dollar(y['ending_balance']):>14}"
        )


# ── Data sources ─────────────────────────────────────────────────────────────

def calculate_local(inputs: LoanInputs) -> dict:
    """Build the same payload the API returns, without a server."""
    calculator = MortgageCalculator(inputs)
    result = calculator.result
    return {
        "inputs": asdict(inputs),
        "result": asdict(result) if result is not None else None,
        "down_payment_ratio": down_payment_ratio(inputs),
        "summary": [{"label": label, "amount": amount} for label, amount in summary_rows(result)],
        "breakdown": [{"label": label, "amount": amount} for label, amount in loan_breakdown(result)],
        "advisories": check_input_ranges(inputs),
    }


async def calculate_remote(inputs: LoanInputs, api_url: str) -> dict:
    url = f"{api_url}/api/v1/mortgage/calculate"

    async with httpx.AsyncClient(timeout=30) as client:
        try:
            resp = await client.post(url, json=asdict(inputs))
        except httpx.ConnectError:
            print(f"Error: Could not connect to API at {api_url}", file=sys.stderr)
            print("Is the server running? Start with: uvicorn src.api.app:app --reload", file=sys.stderr)
            sys.exit(1)
        except httpx.TimeoutException:
            print("Error: Request timed out", file=sys.stderr)
            sys.exit(1)

        if resp.status_code != 200:
            logger.warning("Mortgage API returned %s for %s", resp.status_code, url)
            print(f"Error: API returned {resp.status_code}", file=sys.stderr)
            try:
                detail = resp.json().get("detail", resp.text)
            except ValueError:
                detail = resp.text
            print(f"  {detail}", file=sys.stderr)
            sys.exit(1)

        return resp.json()


# ── Main ─────────────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fixed-rate mortgage payment calculator")
    parser.add_argument("--home-price", type=float, default=settings.default_home_price,
                        help=f"Home price (default: {settings.default_home_price:,.0f})")
    parser.add_argument("--down-payment", type=float, default=settings.default_down_payment,
                        help=f"Down payment (default: {settings.default_down_payment:,.0f})")
    parser.add_argument("--rate", type=float, default=settings.default_interest_rate_pct,
                        help=f"Annual interest rate in percent (default: {settings.default_interest_rate_pct})")
    parser.add_argument("--term", type=int, default=settings.default_term_years,
                        help=f"Loan term in years (default: {settings.default_term_years})")
    parser.add_argument("--yearly", action="store_true", help="Print the yearly amortization table")
    parser.add_argument("--api", action="store_true", help="Calculate through the API instead of locally")
    parser.add_argument("--api-url", default=settings.api_base_url,
                        help=f"API base URL (default: {settings.api_base_url})")
    return parser


async def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    inputs = LoanInputs(
        home_price=args.home_price,
        down_payment=args.down_payment,
        annual_interest_rate_pct=args.rate,
        term_years=args.term,
    )

    if args.api:
        data = await calculate_remote(inputs, args.api_url)
    else:
        data = calculate_local(inputs)

    print_loan_details(data)
    print_payment_summary(data)
    if args.yearly:
        print_yearly_schedule(yearly_summary(amortization_schedule(inputs)))
    print()


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level)
    asyncio.run(main())
