from __future__ import annotations

from enum import IntEnum

from .constants import DAY_SHIFT_MULTIPLIER, NIGHT_SHIFT_DIFFERENTIAL


class Shift(IntEnum):
    """Work shift of a subcontractor, keyed by the number typed at the prompt."""

    DAY = 1
    NIGHT = 2

    @property
    def label(self) -> str:
        return f"{self.name.title()} ({self.value})"

    @property
    def pay_multiplier(self) -> float:
        if self is Shift.NIGHT:
            return NIGHT_SHIFT_DIFFERENTIAL
        return DAY_SHIFT_MULTIPLIER
