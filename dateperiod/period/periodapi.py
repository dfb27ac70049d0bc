"""Date period API.

Public functions for building, parsing, combining and displaying
date periods. Each one is a thin wrapper over DatePeriod so callers can
stay function-first.
"""

import logging
import re
from datetime import date
from typing import Iterable, Iterator, Optional

from dateperiod.dates.datehelpers import add_days, to_iso_string
from dateperiod.period.periodidentity import DatePeriod
from dateperiod.period.periodnormalize import format_period_bounds

logger = logging.getLogger(__name__)

# Candidate tokens for extract_periods; validity is decided by parsing
_PERIOD_TOKEN = re.compile(r"(?<![0-9])[0-9]{4}-[0-9]{2}-[0-9]{2}/[0-9]{4}-[0-9]{2}-[0-9]{2}(?![0-9])")

# English abbreviations, independent of the process locale
_MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def make_period(start_on: date, end_before: date) -> DatePeriod:
    """
    Create a period [start_on, end_before).

    Raises:
        InvalidRangeError: If end_before is before start_on
    """
    return DatePeriod(start_on, end_before)


def one_day(day: date) -> DatePeriod:
    """Create the period covering the single date `day`."""
    return DatePeriod.one_day(day)


def parse_period(text: str) -> DatePeriod:
    """
    Parse canonical period text.

    Args:
        text: "yyyy-MM-dd/yyyy-MM-dd", exactly 21 characters

    Returns:
        The parsed DatePeriod

    Raises:
        TypeError: If text is None
        PeriodFormatError: Wrong length, wrong separator or a malformed date
        InvalidRangeError: If the end date precedes the start date

    Examples:
        >>> period = parse_period("2022-01-01/2022-02-01")
        >>> period.length
        31
    """
    return DatePeriod.parse(text)


def try_parse_period(text: Optional[str]) -> tuple[bool, Optional[DatePeriod]]:
    """
    Parse canonical period text without raising.

    Returns:
        (True, period) on success. (False, None) when text is None or
        not a string, is malformed, or describes an inverted range.

    Examples:
        >>> try_parse_period("2022-01-01/2022-02-01")
        (True, DatePeriod(start_on=datetime.date(2022, 1, 1), end_before=datetime.date(2022, 2, 1)))

        >>> try_parse_period("2022-01-02/2022-01-01")
        (False, None)
    """
    return DatePeriod.try_parse(text)


def format_period(period: DatePeriod) -> str:
    """Format a period as "yyyy-MM-dd/yyyy-MM-dd"; the inverse of parse_period."""
    return format_period_bounds(period.start_on, period.end_before)


def overlaps(a: DatePeriod, b: DatePeriod) -> bool:
    """True if the periods share at least one day."""
    return a.overlaps_with(b)


def union(a: DatePeriod, b: DatePeriod) -> DatePeriod:
    """Convex hull of two periods; empty periods are ignored."""
    return a.union_with(b)


def intersection(a: DatePeriod, b: DatePeriod) -> DatePeriod:
    """Common days of two periods, or the empty period."""
    return a.intersection_with(b)


def all_days(period: DatePeriod) -> Iterator[date]:
    """Lazily yield every date in the period."""
    return period.all_days()


def sort_periods(periods: Iterable[Optional[DatePeriod]]) -> list[Optional[DatePeriod]]:
    """
    Sort periods by start_on, then end_before.

    None entries are kept and sorted first.
    """
    return sorted(periods, key=lambda p: (0,) if p is None else (1, p.start_on, p.end_before))


def extract_periods(text: str) -> list[DatePeriod]:
    """
    Extract canonical period tokens from free text.

    Tokens that look like periods but do not parse (impossible dates,
    inverted ranges) are skipped.

    Args:
        text: Text to scan, e.g. a log line

    Returns:
        List of DatePeriods in period order (empty list if none found)

    Examples:
        >>> extract_periods("billed 2022-02-01/2022-03-01 and 2022-01-01/2022-02-01")
        [DatePeriod(start_on=datetime.date(2022, 1, 1), ...),
         DatePeriod(start_on=datetime.date(2022, 2, 1), ...)]
    """
    if not text or not text.strip():
        return []

    periods = []
    for match in _PERIOD_TOKEN.finditer(text):
        ok, period = DatePeriod.try_parse(match.group(0))
        if ok:
            periods.append(period)
        else:
            logger.debug(f"Skipping invalid period token {match.group(0)!r} at {match.start()}")

    periods.sort()
    return periods


def format_period_display(period: Optional[DatePeriod]) -> str:
    """
    Format a period for human-readable display.

    The last day shown is inclusive (the day before end_before). Month
    names are English abbreviations whatever the current locale.

    Examples:
        >>> format_period_display(parse_period("2022-01-01/2022-02-01"))
        'Jan 1 - Jan 31, 2022 (31 days)'

        >>> format_period_display(parse_period("2021-12-31/2022-01-01"))
        'Dec 31, 2021 (1 day)'

        >>> format_period_display(parse_period("2022-01-01/2022-01-01"))
        'empty (2022-01-01)'
    """
    if period is None:
        return ""

    if period.is_empty:
        return f"empty ({to_iso_string(period.start_on)})"

    start = period.start_on
    last = add_days(period.end_before, -1)
    start_month = _MONTH_ABBR[start.month - 1]
    last_month = _MONTH_ABBR[last.month - 1]

    if period.length == 1:
        return f"{start_month} {start.day}, {start.year} (1 day)"

    if start.year == last.year:
        span = f"{start_month} {start.day} - {last_month} {last.day}, {last.year}"
    else:
        span = (
            f"{start_month} {start.day}, {start.year} - "
            f"{last_month} {last.day}, {last.year}"
        )
    return f"{span} ({period.length} days)"


__all__ = [
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
