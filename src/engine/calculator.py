"""Reactive host for the amortization engine.

Holds the four current inputs and the single derived result. Every
committed input change recomputes synchronously, so `result` is never
stale relative to `inputs`.
"""

import logging
from dataclasses import replace
from typing import Callable

from src.engine.amortization import compute
from src.models.mortgage import AmortizationResult, LoanInputs

logger = logging.getLogger(__name__)

Listener = Callable[[LoanInputs, AmortizationResult | None], None]


class MortgageCalculator:
    def __init__(self, inputs: LoanInputs):
        self._inputs = inputs
        self._result = compute(inputs)
        self._listeners: list[Listener] = []

    @property
    def inputs(self) -> LoanInputs:
        return self._inputs

    @property
    def result(self) -> AmortizationResult | None:
        return self._result

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called after every recompute. Returns an unsubscribe hook."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def update(self, **changes) -> AmortizationResult | None:
        """Commit new values for any of the four inputs and recompute.

        Unchanged inputs skip the recompute and do not notify listeners.
        """
        new_inputs = replace(self._inputs, **changes)
        if new_inputs == self._inputs:
            return self._result

        self._inputs = new_inputs
        self._result = compute(new_inputs)
        logger.debug("Recomputed %s -> %s", new_inputs, self._result)

        for listener in list(self._listeners):
            listener(self._inputs, self._result)
        return self._result

    def set_home_price(self, value: float) -> AmortizationResult | None:
        return self.update(home_price=value)

    def set_down_payment(self, value: float) -> AmortizationResult | None:
        return self.update(down_payment=value)

    def set_interest_rate(self, value: float) -> AmortizationResult | None:
        return self.update(annual_interest_rate_pct=value)

    def set_term_years(self, value: int) -> AmortizationResult | None:
        return self.update(term_years=value)
