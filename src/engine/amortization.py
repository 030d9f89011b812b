"""Fixed-rate mortgage amortization.

Pure functions: floats in, frozen dataclasses out. No I/O, no rounding.
Rounding for display belongs to whoever renders the numbers.
"""

import math

from src.models.mortgage import AmortizationPayment, AmortizationResult, LoanInputs


def compute(inputs: LoanInputs) -> AmortizationResult | None:
    """Derive the monthly payment and lifetime totals for a loan.

    Returns None when the loan is not computable: non-positive principal
    (down payment covers the home price), non-positive rate, or non-positive
    term. That outcome is a value, never an exception.

    Values too large for a double become +/-inf. A principal that is not a
    finite double cannot be amortized and also yields None.
    """
    principal = _as_float(inputs.home_price) - _as_float(inputs.down_payment)
    monthly_rate = _as_float(inputs.annual_interest_rate_pct) / 100 / 12
    number_of_payments = _as_float(inputs.term_years) * 12

    if not 0 < principal < math.inf or not monthly_rate > 0 or not number_of_payments > 0:
        return None

    payment = _annuity_payment(principal, monthly_rate, number_of_payments)
    total_paid = payment * number_of_payments

    return AmortizationResult(
        principal=principal,
        monthly_payment=payment,
        total_paid=total_paid,
        total_interest=total_paid - principal,
    )


def _as_float(value: float) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _annuity_payment(principal: float, monthly_rate: float, number_of_payments: float) -> float:
    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    try:
        growth = math.pow(1 + monthly_rate, number_of_payments)
    except OverflowError:
        growth = math.inf

    if math.isinf(number_of_payments) or math.isinf(growth) or math.isinf(monthly_rate * growth):
        # Growth diverges: payment converges to interest-only
        return principal * monthly_rate

    if growth == 1:
        # Rate vanishes against 1.0: payment converges to straight-line
        return principal / number_of_payments

    return principal * (monthly_rate * growth) / (growth - 1)


def down_payment_ratio(inputs: LoanInputs) -> float | None:
    """Down payment as a fraction of home price (0.20 = 20%)."""
    if inputs.home_price <= 0:
        return None
    return inputs.down_payment / inputs.home_price


def summary_rows(result: AmortizationResult | None) -> list[tuple[str, float]]:
    if result is None:
        return []
    return [
        ("Monthly Payment", result.monthly_payment),
        ("Total Interest Paid", result.total_interest),
        ("Total Amount Paid", result.total_paid),
    ]


def loan_breakdown(result: AmortizationResult | None) -> list[tuple[str, float]]:
    if result is None:
        return []
    return [
        ("Principal", result.principal),
        ("Interest", result.total_interest),
    ]


def amortization_schedule(inputs: LoanInputs) -> list[AmortizationPayment]:
    """Month-by-month schedule for the fixed payment from `compute`.

    Empty when the loan is not computable. The last period pays off
    whatever balance remains, so the schedule always ends at exactly 0.
    Assumes an integral term in years.
    """
    result = compute(inputs)
    if result is None:
        return []

    r = inputs.annual_interest_rate_pct / 100 / 12
    n_periods = int(inputs.term_years * 12)

    payments: list[AmortizationPayment] = []
    balance = result.principal

    for period in range(1, n_periods + 1):
        interest = balance * r
        principal_paid = result.monthly_payment - interest

        # Final payment adjustment
        if principal_paid > balance or period == n_periods:
            principal_paid = balance
            actual_payment = interest + principal_paid
        else:
            actual_payment = result.monthly_payment

        balance -= principal_paid

        payments.append(AmortizationPayment(
            period=period,
            payment=actual_payment,
            principal=principal_paid,
            interest=interest,
            balance=balance,
        ))

        if balance <= 0:
            break

    return payments


def yearly_summary(schedule: list[AmortizationPayment]) -> list[dict[str, float]]:
    """Aggregate a monthly schedule by loan year.

    Returns list of dicts with keys: year, principal, interest, payments, ending_balance
    """
    yearly: list[dict[str, float]] = []
    year_principal = 0.0
    year_interest = 0.0
    year_payments = 0.0

    for p in schedule:
        year_principal += p.principal
        year_interest += p.interest
        year_payments += p.payment

        if p.period % 12 == 0 or p.period == len(schedule):
            yearly.append({
                "year": (p.period - 1) // 12 + 1,
                "principal": year_principal,
                "interest": year_interest,
                "payments": year_payments,
                "ending_balance": p.balance,
            })
            year_principal = 0.0
            year_interest = 0.0
            year_payments = 0.0

    return yearly
