"""Utility constants for fractional_months.

Time unit constants represent durations in milliseconds, the resolution of
an instant. Months have no constant length and so have no constant here.
"""

# Time unit constants (all values in milliseconds)
MILLISECOND = 1
SECOND = 1000
MINUTE = 60000
HOUR = 3600000
DAY = 86400000
