from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union

import numpy as np

from ..common import datetime_utils
from ..common.formatting import format_currency, format_date
from ..common.validators import require_int, require_non_empty, require_non_negative, require_not_after
from ..core.constants import DEFAULT_CONTRACTOR_NAME, DEFAULT_CURRENCY_SYMBOL
from ..core.enums import Shift
from ..core.exceptions import ValidationError

_MAX_SINGLE = float(np.finfo(np.float32).max)


class Contractor:
    """Domain entity: Contractor.

    Every field is validated on assignment, so an instance never holds an
    invalid value, whether it was set in the constructor or later.
    """

    def __init__(
        self,
        name: str = DEFAULT_CONTRACTOR_NAME,
        contractor_number: int = 0,
        start_date: Optional[Union[date, datetime]] = None,
    ):
        self.name = name
        self.contractor_number = contractor_number
        self.start_date = start_date if start_date is not None else datetime_utils.today_local()

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = require_non_empty(value, "Name can't be empty.")

    @property
    def contractor_number(self) -> int:
        return self._contractor_number

    @contractor_number.setter
    def contractor_number(self, value: int) -> None:
        value = require_int(value, "Contractor number must be an integer.")
        if value < 0:
            raise ValidationError("Contractor number must be non-negative.")
        self._contractor_number = value

    @property
    def start_date(self) -> date:
        return self._start_date

    @start_date.setter
    def start_date(self, value: Union[date, datetime]) -> None:
        if not isinstance(value, date):
            raise ValidationError("Start date must be a date.")
        self._start_date = require_not_after(
            datetime_utils.to_date(value),
            datetime_utils.today_local(),
            "Start date can't be in the future.",
        )

    def describe(self) -> str:
        return f"{self.name} (#{self.contractor_number}) — Start: {format_date(self.start_date)}"

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, contractor_number={self.contractor_number!r}, "
            f"start_date={self.start_date!r})"
        )


class Subcontractor(Contractor):
    """Contractor working a Day or Night shift at an hourly rate."""

    def __init__(
        self,
        name: str = DEFAULT_CONTRACTOR_NAME,
        contractor_number: int = 0,
        start_date: Optional[Union[date, datetime]] = None,
        shift: Union[Shift, int] = Shift.DAY,
        hourly_pay_rate: float = 0.0,
    ):
        super().__init__(name, contractor_number, start_date)
        self.shift = shift
        self.hourly_pay_rate = hourly_pay_rate

    @property
    def shift(self) -> Shift:
        return self._shift

    @shift.setter
    def shift(self, value: Union[Shift, int]) -> None:
        message = "Shift must be 1 (Day) or 2 (Night)."
        try:
            self._shift = Shift(require_int(value, message))
        except ValueError as exc:
            raise ValidationError(message) from exc

    @property
    def hourly_pay_rate(self) -> float:
        return self._hourly_pay_rate

    @hourly_pay_rate.setter
    def hourly_pay_rate(self, value: float) -> None:
        self._hourly_pay_rate = require_non_negative(value, "Hourly pay rate can't be negative.")

    def compute_pay(self, hours_worked: float) -> float:
        """Pay for the given hours. Night shift earns a 3% differential.

        The result is rounded to single precision.
        """
        hours = require_non_negative(hours_worked, "Hours can't be negative.")
        total = self.hourly_pay_rate * hours * self.shift.pay_multiplier
        if not abs(total) <= _MAX_SINGLE:
            raise ValidationError("Computed pay is too large.")
        return float(np.float32(total))

    def describe(self, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
        return (
            f"{super().describe()} — Shift: {self.shift.label}, "
            f"Rate: {format_currency(self.hourly_pay_rate, currency_symbol)}"
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, contractor_number={self.contractor_number!r}, "
            f"start_date={self.start_date!r}, shift={self.shift!r}, hourly_pay_rate={self.hourly_pay_rate!r})"
        )
