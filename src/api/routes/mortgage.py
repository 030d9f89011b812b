"""Mortgage calculator routes."""

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException

from src.api.deps import get_settings
from src.api.schemas import (
    MortgageRequest,
    MortgageResponse,
    LoanInputsResponse,
    AmortizationResultResponse,
    SummaryRowResponse,
    ScheduleResponse,
    PaymentResponse,
    YearlyDebtResponse,
)
from src.config import Settings
from src.engine.amortization import (
    compute,
    down_payment_ratio,
    summary_rows,
    loan_breakdown,
    amortization_schedule,
    yearly_summary,
)
from src.engine.input_ranges import check_input_ranges

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/mortgage", tags=["mortgage"])


@router.get("/defaults", response_model=LoanInputsResponse)
async def get_defaults(config: Settings = Depends(get_settings)):
    """Starting values for the calculator fields."""
    return LoanInputsResponse(**asdict(config.default_loan_inputs()))


@router.post("/calculate", response_model=MortgageResponse)
async def calculate(req: MortgageRequest):
    """Monthly payment and lifetime totals. `result` is null for a non-computable loan."""
    inputs = req.to_inputs()
    result = compute(inputs)

    advisories = check_input_ranges(inputs)
    if advisories:
        logger.warning("Out-of-range mortgage inputs %s: %s", inputs, "; ".join(advisories))

    return MortgageResponse(
        inputs=LoanInputsResponse(**asdict(inputs)),
        result=AmortizationResultResponse(**asdict(result)) if result is not None else None,
        down_payment_ratio=down_payment_ratio(inputs),
        summary=[SummaryRowResponse(label=label, amount=amount) for label, amount in summary_rows(result)],
        breakdown=[SummaryRowResponse(label=label, amount=amount) for label, amount in loan_breakdown(result)],
        advisories=advisories,
    )


@router.post("/schedule", response_model=ScheduleResponse)
async def schedule(req: MortgageRequest, config: Settings = Depends(get_settings)):
    """Month-by-month amortization with yearly totals."""
    if req.term_years * 12 > config.max_schedule_payments:
        raise HTTPException(
            status_code=422,
            detail=f"Schedule limited to {config.max_schedule_payments} payments",
        )

    inputs = req.to_inputs()
    result = compute(inputs)
    payments = amortization_schedule(inputs)

    return ScheduleResponse(
        monthly_payment=result.monthly_payment if result is not None else None,
        payments=[PaymentResponse(**asdict(p)) for p in payments],
        yearly=[YearlyDebtResponse(**y) for y in yearly_summary(payments)],
    )
