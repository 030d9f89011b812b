from dataclasses import dataclass


@dataclass(frozen=True)
class LoanInputs:
    home_price: float
    down_payment: float
    annual_interest_rate_pct: float  # 6.5 means 6.5%
    term_years: int


@dataclass(frozen=True)
class AmortizationResult:
    principal: float
    monthly_payment: float
    total_paid: float
    total_interest: float


@dataclass(frozen=True)
class AmortizationPayment:
    period: int
    payment: float
    principal: float
    interest: float
    balance: float


@dataclass(frozen=True)
class FieldRange:
    """Advisory bounds for a single input field."""
    minimum: float
    maximum: float | None = None  # None = unbounded (down payment is bounded by home price)
    decimals: int | None = None


INPUT_RANGES: dict[str, FieldRange] = {
    "home_price": FieldRange(minimum=1000),
    "down_payment": FieldRange(minimum=0),
    "annual_interest_rate_pct": FieldRange(minimum=0.1, maximum=20, decimals=2),
    "term_years": FieldRange(minimum=1, maximum=50, decimals=0),
}
