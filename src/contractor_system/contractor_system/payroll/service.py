from __future__ import annotations

import logging
from typing import Sequence

from ..contractors.model import Subcontractor
from .model import PayStub

logger = logging.getLogger(__name__)


class PayrollService:
    """Computes period pay per subcontractor and keeps the resulting stubs."""

    def __init__(self):
        self._stubs: list[PayStub] = []

    def compute(self, subcontractor: Subcontractor, hours_worked: float) -> PayStub:
        amount = subcontractor.compute_pay(hours_worked)
        stub = PayStub(subcontractor=subcontractor, hours_worked=float(hours_worked), amount=amount)
        self._stubs.append(stub)
        logger.debug(
            "Pay for #%s: %.2f h x %.2f (%s) = %.2f",
            subcontractor.contractor_number,
            stub.hours_worked,
            subcontractor.hourly_pay_rate,
            subcontractor.shift.name,
            amount,
        )
        return stub

    @property
    def stubs(self) -> Sequence[PayStub]:
        return tuple(self._stubs)

    @property
    def total(self) -> float:
        return sum(s.amount for s in self._stubs)
