"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Python weekday() numbering: Monday=0 ... Sunday=6
WEEK_START_WEEKDAY = 6

CURRENCY_CODE = "SAR"
CURRENCY_SYMBOL = "﷼"

TRAILING_WEEK_DAYS = 7
TRAILING_MONTH_DAYS = 30

MONTH_FORMAT = "%Y-%m"
