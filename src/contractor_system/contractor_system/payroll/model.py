from __future__ import annotations

from dataclasses import dataclass

from ..contractors.model import Subcontractor


@dataclass(frozen=True)
class PayStub:
    """Pay computed for one subcontractor over the current period."""

    subcontractor: Subcontractor
    hours_worked: float
    amount: float
