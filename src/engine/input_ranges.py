"""Advisory input-range checks mirroring the calculator's entry fields.

These never gate `compute`; an out-of-range loan still gets a result
(or None) from the engine. Callers surface the messages as hints.
"""

from src.models.mortgage import INPUT_RANGES, LoanInputs

FIELD_LABELS = {
    "home_price": "Home price",
    "down_payment": "Down payment",
    "annual_interest_rate_pct": "Interest rate",
    "term_years": "Loan term",
}


def _fmt(value: float) -> str:
    if float(value).is_integer():
        return f"{value:,.0f}"
    return f"{value:g}"


def _has_more_decimals(value: float, decimals: int) -> bool:
    scaled = value * 10 ** decimals
    return abs(scaled - round(scaled)) > 1e-9 * max(1.0, abs(scaled))


def check_input_ranges(inputs: LoanInputs) -> list[str]:
    """Return one message per field outside its advisory range."""
    messages: list[str] = []

    for field_name, bounds in INPUT_RANGES.items():
        value = getattr(inputs, field_name)
        label = FIELD_LABELS[field_name]
        maximum = bounds.maximum
        if field_name == "down_payment":
            maximum = inputs.home_price

        if value < bounds.minimum:
            messages.append(f"{label} is below the minimum of {_fmt(bounds.minimum)}")
        elif maximum is not None and value > maximum:
            messages.append(f"{label} is above the maximum of {_fmt(maximum)}")

        if bounds.decimals is not None and _has_more_decimals(value, bounds.decimals):
            if bounds.decimals == 0:
                messages.append(f"{label} should be a whole number")
            else:
                messages.append(f"{label} allows at most {bounds.decimals} decimal places")

    return messages
