"""Date Helpers
--------------

Small calendar utilities for single dates, used by the period module.

Examples:
  >>> min_date(date(2022, 1, 2), date(2022, 1, 1))
  datetime.date(2022, 1, 1)

  >>> to_iso_string(date(2022, 3, 1))
  '2022-03-01'
"""

from datetime import date

try:
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e


def min_date(lhs: date, rhs: date) -> date:
    """Return the earliest of two dates."""
    return lhs if lhs < rhs else rhs


def max_date(lhs: date, rhs: date) -> date:
    """Return the latest of two dates."""
    return lhs if lhs > rhs else rhs


def to_iso_string(d: date) -> str:
    """
    Format a date as yyyy-MM-dd.

    Zero padded and locale independent, so years below 1000 still
    produce four digits.

    Examples:
        >>> to_iso_string(date(2022, 1, 1))
        '2022-01-01'

        >>> to_iso_string(date(99, 12, 31))
        '0099-12-31'
    """
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def add_days(d: date, days: int) -> date:
    """
    Shift a date by a whole number of days.

    Raises:
        OverflowError: If the result falls outside date.min..date.max
    """
    try:
        return d + relativedelta(days=days)
    except (OverflowError, ValueError) as e:
        raise OverflowError(f"date value out of range: {to_iso_string(d)} + {days} days") from e


__all__ = [
    "min_date",
    "max_date",
    "to_iso_string",
    "add_days",
]
