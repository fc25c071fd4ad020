"""Date manipulation utilities"""

from datetime import date, datetime
from typing import Union

from dateutil.relativedelta import relativedelta

DateLike = Union[date, datetime]


def as_date(value: DateLike) -> date:
    """Truncate a datetime to its calendar date (midnight)"""
    if isinstance(value, datetime):
        return value.date()
    return value


def add_months(from_date: date, months: int) -> date:
    """Add calendar months, clamping to the last valid day of the target month"""
    return from_date + relativedelta(months=months)


def add_years(from_date: date, years: int) -> date:
    """Add calendar years, Feb 29 clamps to Feb 28 on non-leap targets"""
    return from_date + relativedelta(years=years)


def days_between(start: date, end: date) -> int:
    """Whole days from start to end (negative when end is earlier)"""
    return (end - start).days
