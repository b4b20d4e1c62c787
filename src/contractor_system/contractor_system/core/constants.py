"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

QUIT_SENTINEL = "q"
DATE_FORMAT = "%Y-%m-%d"

NIGHT_SHIFT_DIFFERENTIAL = 1.03
DAY_SHIFT_MULTIPLIER = 1.00

DEFAULT_CONTRACTOR_NAME = "Unknown"
DEFAULT_CURRENCY_SYMBOL = "$"
