"""Utility constants for chronospan.

Time unit constants represent durations in milliseconds.
Months and years are fixed-length approximations (30 and 365 days) and are
never reconciled with a real calendar.
"""

# Time unit constants (all values in milliseconds)
MILLISECOND = 1
SECOND = 1000
MINUTE = 60_000
HOUR = 3_600_000
DAY = 86_400_000
WEEK = 604_800_000
MONTH = 2_592_000_000
YEAR = 31_536_000_000
