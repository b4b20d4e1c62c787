from __future__ import annotations

from datetime import date, datetime, timedelta

import numpy as np
import pytest

from src.contractor_system.contractor_system.common import datetime_utils
from src.contractor_system.contractor_system.contractors.model import Contractor, Subcontractor
from src.contractor_system.contractor_system.core.enums import Shift
from src.contractor_system.contractor_system.core.exceptions import ValidationError


def make_sub(**overrides) -> Subcontractor:
    fields = dict(
        name="Alice",
        contractor_number=1,
        start_date=date(2024, 1, 1),
        shift=Shift.DAY,
        hourly_pay_rate=20.0,
    )
    fields.update(overrides)
    return Subcontractor(**fields)


@pytest.mark.parametrize("bad", ["", "   ", "\t\n"])
def test_name_rejects_empty_or_blank(bad):
    c = Contractor("Bo", 1, date(2024, 1, 1))
    with pytest.raises(ValidationError, match="Name can't be empty."):
        c.name = bad
    assert c.name == "Bo"


def test_name_is_trimmed():
    c = Contractor("  Bo ", 1, date(2024, 1, 1))
    assert c.name == "Bo"


def test_contractor_number_must_be_non_negative():
    c = Contractor("Bo", 5, date(2024, 1, 1))
    with pytest.raises(ValidationError, match="non-negative"):
        c.contractor_number = -1
    c.contractor_number = 0
    assert c.contractor_number == 0


def test_contractor_number_rejects_non_integers():
    c = Contractor("Bo", 5, date(2024, 1, 1))
    with pytest.raises(ValidationError):
        c.contractor_number = "7"
    with pytest.raises(ValidationError):
        c.contractor_number = True


def test_start_date_cannot_be_in_the_future():
    tomorrow = date.today() + timedelta(days=1)
    c = Contractor("Bo", 1, date(2024, 1, 1))
    with pytest.raises(ValidationError, match="future"):
        c.start_date = tomorrow
    assert c.start_date == date(2024, 1, 1)


def test_start_date_today_is_stored_date_only():
    c = Contractor("Bo", 1, date(2024, 1, 1))
    now = datetime.now()
    c.start_date = now
    assert type(c.start_date) is date
    assert c.start_date == now.date()


def test_start_date_uses_patchable_today(monkeypatch):
    monkeypatch.setattr(datetime_utils, "today_local", lambda: date(2020, 6, 1))
    with pytest.raises(ValidationError):
        Contractor("Bo", 1, date(2020, 6, 2))
    assert Contractor("Bo", 1, date(2020, 6, 1)).start_date == date(2020, 6, 1)


def test_contractor_defaults():
    c = Contractor()
    assert c.name == "Unknown"
    assert c.contractor_number == 0
    assert c.start_date == date.today()


def test_constructor_validates_fields():
    with pytest.raises(ValidationError):
        Contractor("", 1, date(2024, 1, 1))
    with pytest.raises(ValidationError):
        Contractor("Bo", -3, date(2024, 1, 1))


@pytest.mark.parametrize("bad", [0, 3, -1, "1", 1.5])
def test_shift_rejects_values_outside_day_and_night(bad):
    sub = make_sub()
    with pytest.raises(ValidationError, match=r"Shift must be 1 \(Day\) or 2 \(Night\)\."):
        sub.shift = bad
    assert sub.shift is Shift.DAY


@pytest.mark.parametrize("value, expected", [(1, Shift.DAY), (2, Shift.NIGHT), (Shift.NIGHT, Shift.NIGHT)])
def test_shift_accepts_day_and_night(value, expected):
    sub = make_sub()
    sub.shift = value
    assert sub.shift is expected


def test_hourly_pay_rate_must_be_non_negative():
    sub = make_sub()
    with pytest.raises(ValidationError, match="can't be negative"):
        sub.hourly_pay_rate = -0.01
    with pytest.raises(ValidationError):
        sub.hourly_pay_rate = float("nan")
    sub.hourly_pay_rate = 0
    assert sub.hourly_pay_rate == 0.0


def test_subcontractor_defaults():
    sub = Subcontractor()
    assert sub.shift is Shift.DAY
    assert sub.hourly_pay_rate == 0.0


@pytest.mark.parametrize("rate, hours", [(20.0, 10.0), (17.35, 38.5), (0.0, 12.0), (99.99, 0.0)])
def test_compute_pay_day_shift_is_rate_times_hours(rate, hours):
    sub = make_sub(shift=Shift.DAY, hourly_pay_rate=rate)
    assert sub.compute_pay(hours) == float(np.float32(rate * hours))


@pytest.mark.parametrize("rate, hours", [(20.0, 10.0), (17.35, 38.5), (12.5, 7.25)])
def test_compute_pay_night_shift_adds_differential(rate, hours):
    sub = make_sub(shift=Shift.NIGHT, hourly_pay_rate=rate)
    assert sub.compute_pay(hours) == float(np.float32(rate * hours * 1.03))


def test_compute_pay_night_example():
    sub = make_sub(shift=2, hourly_pay_rate=20.0)
    assert sub.compute_pay(10) == 206.0


def test_compute_pay_rejects_negative_hours():
    with pytest.raises(ValidationError, match="Hours can't be negative."):
        make_sub().compute_pay(-1)


def test_describe_contractor():
    c = Contractor("Bo", 7, date(2023, 3, 9))
    assert c.describe() == "Bo (#7) — Start: 2023-03-09"
    assert str(c) == c.describe()


def test_describe_subcontractor():
    sub = make_sub(shift=Shift.NIGHT, hourly_pay_rate=1234.5)
    assert sub.describe() == "Alice (#1) — Start: 2024-01-01 — Shift: Night (2), Rate: $1,234.50"
    assert make_sub().describe("€").endswith("Shift: Day (1), Rate: €20.00")


@pytest.mark.parametrize("bad", [float("inf"), float("-inf")])
def test_hourly_pay_rate_must_be_finite(bad):
    sub = make_sub()
    with pytest.raises(ValidationError):
        sub.hourly_pay_rate = bad
    assert sub.hourly_pay_rate == 20.0


def test_compute_pay_rejects_infinite_hours():
    with pytest.raises(ValidationError):
        make_sub().compute_pay(float("inf"))


def test_compute_pay_beyond_single_precision_is_rejected():
    sub = make_sub(hourly_pay_rate=1e300)
    with pytest.raises(ValidationError, match="too large"):
        sub.compute_pay(1e10)
    with pytest.raises(ValidationError, match="too large"):
        make_sub(hourly_pay_rate=1e30).compute_pay(1e10)


def test_contractor_describe_takes_no_currency():
    c = Contractor("Bo", 7, date(2023, 3, 9))
    with pytest.raises(TypeError):
        c.describe("$")
