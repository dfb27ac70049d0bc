"""Period module for half-open date periods.

A DatePeriod is the span [start_on, end_before) of calendar dates, with
canonical text form "yyyy-MM-dd/yyyy-MM-dd".

Public API:
    DatePeriod(start_on, end_before)
        Immutable period value; raises InvalidRangeError if end < start

    parse_period(text) -> DatePeriod
        Strict parse of canonical text

    try_parse_period(text) -> (bool, DatePeriod | None)
        Non-raising parse

    format_period(period) -> str
        Canonical text

    extract_periods(text) -> list[DatePeriod]
        Find canonical period tokens in free text

Examples:
    >>> from dateperiod.period import parse_period
    >>> a = parse_period("2022-01-01/2022-02-01")
    >>> b = parse_period("2022-02-01/2022-03-01")
    >>> a.overlaps_with(b)
    False
    >>> str(a.union_with(b))
    '2022-01-01/2022-03-01'
"""

from dateperiod.period.periodexceptions import (
    DatePeriodError,
    InvalidRangeError,
    PeriodFormatError,
    PeriodDecodeError,
)
from dateperiod.period.periodidentity import DatePeriod
from dateperiod.period.periodapi import (
    make_period,
    one_day,
    parse_period,
    try_parse_period,
    format_period,
    overlaps,
    union,
    intersection,
    all_days,
    sort_periods,
    extract_periods,
    format_period_display,
)

__all__ = [
    "DatePeriod",
    "DatePeriodError",
    "InvalidRangeError",
    "PeriodFormatError",
    "PeriodDecodeError",
    "make_period",
    "one_day",
    "parse_period",
    "try_parse_period",
    "format_period",
    "overlaps",
    "union",
    "intersection",
    "all_days",
    "sort_periods",
    "extract_periods",
    "format_period_display",
]
