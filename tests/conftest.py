"""Canonical test fixtures used across all mortgage tests.

Fixture: $300K home, $60K down (20%), 6.5% rate, 30yr fixed.
"""

import pytest

from src.models.mortgage import LoanInputs


@pytest.fixture
def canonical_inputs() -> LoanInputs:
    """The calculator's starting values."""
    return LoanInputs(
        home_price=300000,
        down_payment=60000,
        annual_interest_rate_pct=6.5,
        term_years=30,
    )


@pytest.fixture
def paid_in_full_inputs() -> LoanInputs:
    """Down payment covers the whole home price."""
    return LoanInputs(
        home_price=300000,
        down_payment=300000,
        annual_interest_rate_pct=6.5,
        term_years=30,
    )


@pytest.fixture
def short_term_inputs() -> LoanInputs:
    """$100K loan at 5% over 2 years, small enough to check by hand."""
    return LoanInputs(
        home_price=120000,
        down_payment=20000,
        annual_interest_rate_pct=5.0,
        term_years=2,
    )
