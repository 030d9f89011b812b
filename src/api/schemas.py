"""Pydantic schemas for API request/response models."""

from pydantic import BaseModel, Field

from src.models.mortgage import LoanInputs


# ---- Request schemas ----

class MortgageRequest(BaseModel):
    home_price: float = Field(..., allow_inf_nan=False, description="Home price in currency units")
    down_payment: float = Field(0, allow_inf_nan=False, description="Down payment in currency units")
    annual_interest_rate_pct: float = Field(..., allow_inf_nan=False, description="Annual rate, 6.5 = 6.5%")
    term_years: int = Field(..., le=1_000_000, description="Loan term in years")

    def to_inputs(self) -> LoanInputs:
        return LoanInputs(
            home_price=self.home_price,
            down_payment=self.down_payment,
            annual_interest_rate_pct=self.annual_interest_rate_pct,
            term_years=self.term_years,
        )


# ---- Response schemas ----

class LoanInputsResponse(BaseModel):
    home_price: float
    down_payment: float
    annual_interest_rate_pct: float
    term_years: int


class AmortizationResultResponse(BaseModel):
    principal: float
    monthly_payment: float
    total_paid: float
    total_interest: float


class SummaryRowResponse(BaseModel):
    label: str
    amount: float


class MortgageResponse(BaseModel):
    inputs: LoanInputsResponse
    result: AmortizationResultResponse | None = None
    down_payment_ratio: float | None = None
    summary: list[SummaryRowResponse] = []
    breakdown: list[SummaryRowResponse] = []
    advisories: list[str] = []


class PaymentResponse(BaseModel):
    period: int
    payment: float
    principal: float
    interest: float
    balance: float


class YearlyDebtResponse(BaseModel):
    year: int
    principal: float
    interest: float
    payments: float
    ending_balance: float


class ScheduleResponse(BaseModel):
    monthly_payment: float | None = None
    payments: list[PaymentResponse] = []
    yearly: list[YearlyDebtResponse] = []
