"""Date manipulation utilities"""

import math
from datetime import date, timedelta

# Savings horizons use a flat 30-day month, not calendar months
DAYS_PER_MONTH = 30


def days_between(start: date, end: date) -> int:
    """Whole days from start to end (negative when end is before start)"""
    return (end - start).days


def months_from_days(days: int) -> int:
    """Convert a day count to 30-day months, rounding up, never less than 1"""
    return max(1, math.ceil(days / DAYS_PER_MONTH))


def add_months(from_date: date, months: int) -> date:
    """Add 30-day months to a date"""
    return from_date + timedelta(days=months * DAYS_PER_MONTH)
