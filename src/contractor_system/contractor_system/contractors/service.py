from __future__ import annotations

import logging
from datetime import date
from typing import Sequence, Union

from ..core.enums import Shift
from .model import Subcontractor
from .repository import SubcontractorRepository

logger = logging.getLogger(__name__)


class SubcontractorService:
    """Use case: register subcontractors for the current pay period."""

    def __init__(self, subcontractors: SubcontractorRepository):
        self._subcontractors = subcontractors

    def create(
        self,
        *,
        name: str,
        contractor_number: int,
        start_date: date,
        shift: Union[Shift, int],
        hourly_pay_rate: float,
    ) -> Subcontractor:
        # Construction validates every field; nothing is stored if it raises.
        sub = Subcontractor(name, contractor_number, start_date, shift, hourly_pay_rate)
        position = self._subcontractors.add(sub)
        logger.info("Created subcontractor #%s (%s) at position %d", sub.contractor_number, sub.name, position)
        return sub

    def list_subcontractors(self) -> Sequence[Subcontractor]:
        return self._subcontractors.list_all()

    def count(self) -> int:
        return self._subcontractors.count()
