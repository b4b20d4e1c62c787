"""Example: use the service layer directly (no console).

Goal: the console controller is a thin layer, the business rules live in services/models.
"""

from datetime import date

from src.contractor_system.contractor_system.container import build_container
from src.contractor_system.contractor_system.core.enums import Shift


def main():
    container = build_container()
    alice = container.subcontractor_service.create(
        name="Alice",
        contractor_number=1,
        start_date=date(2024, 1, 1),
        shift=Shift.NIGHT,
        hourly_pay_rate=20.0,
    )
    stub = container.payroll_service.compute(alice, 10)
    print(alice)
    print(f"{stub.hours_worked} h -> {stub.amount:.2f}")


if __name__ == "__main__":
    main()
