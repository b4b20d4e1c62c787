from __future__ import annotations

from datetime import date

from ..core.constants import DATE_FORMAT, DEFAULT_CURRENCY_SYMBOL


def format_currency(amount: float, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Format money as e.g. ``$1,234.50`` (negative: ``-$3.00``)."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)
