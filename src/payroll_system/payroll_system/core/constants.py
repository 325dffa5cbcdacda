"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_BASIC_PERCENTAGE = 40.0
DEFAULT_HRA_PERCENTAGE = 20.0
DEFAULT_DEDUCTION_PERCENTAGE = 5.0

# Python weekday numbers: Monday=0 ... Sunday=6
DEFAULT_WEEKLY_OFF_DAYS = (5, 6)

DEFAULT_ANNUAL_CASUAL_LEAVES = 12
DEFAULT_ANNUAL_SICK_LEAVES = 6

DEFAULT_LIST_LIMIT = 200
