"""Date Period Value Type
-----------------------

DatePeriod is a half-open span of calendar dates [start_on, end_before).

Key Design Principles:
  1. end_before >= start_on always holds; checked at construction, never later
  2. Values are immutable; operations return new periods
  3. A period with start_on == end_before is empty (spans zero days)
  4. union_with returns the convex hull, so a gap between two disjoint
     periods is included in the result

Example:
  >>> period = DatePeriod.parse("2022-01-01/2022-02-01")
  >>> start_on, end_before = period.bounds
  >>> start_on
  datetime.date(2022, 1, 1)
  >>> period.length
  31
  >>> len(list(period.all_days()))
  31
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterator, Optional

from dateperiod.dates.datehelpers import add_days, max_date, min_date
from dateperiod.period.periodexceptions import InvalidRangeError
from dateperiod.period.periodnormalize import format_period_bounds, parse_period_bounds

logger = logging.getLogger(__name__)


def _check_date(name: str, value) -> None:
    # datetime is a date subclass but carries a time of day
    if value is None:
        raise TypeError(f"{name} must not be None")
    if isinstance(value, datetime) or not isinstance(value, date):
        raise TypeError(f"{name} must be a datetime.date, got {type(value).__name__}")


@dataclass(frozen=True, order=True)
class DatePeriod:
    """A continuous sequence of dates, from start_on up to the day before end_before."""

    start_on: date
    end_before: date

    def __post_init__(self):
        _check_date("start_on", self.start_on)
        _check_date("end_before", self.end_before)
        if self.end_before < self.start_on:
            raise InvalidRangeError(self.start_on, self.end_before)

    # ---- Lifecycle ----

    @classmethod
    def one_day(cls, day: date) -> DatePeriod:
        """
        Create a period covering the single date `day`.

        Raises:
            OverflowError: For date.max, which has no following day
        """
        _check_date("day", day)
        return cls(day, add_days(day, 1))

    @classmethod
    def empty(cls) -> DatePeriod:
        """Return the empty period used for intersections without overlap."""
        return _EMPTY

    @property
    def bounds(self) -> tuple[date, date]:
        """The pair (start_on, end_before)."""
        return self.start_on, self.end_before

    # ---- To and from strings ----

    def __str__(self) -> str:
        return format_period_bounds(self.start_on, self.end_before)

    @classmethod
    def parse(cls, text: str) -> DatePeriod:
        """
        Parse canonical text "yyyy-MM-dd/yyyy-MM-dd" into a period.

        Raises:
            TypeError: If text is None
            PeriodFormatError: If text is not in the canonical format
            InvalidRangeError: If the end date precedes the start date
        """
        start_on, end_before = parse_period_bounds(text)
        return cls(start_on, end_before)

    @classmethod
    def try_parse(cls, text: Optional[str]) -> tuple[bool, Optional[DatePeriod]]:
        """
        Parse without raising.

        Returns:
            (True, period) on success, (False, None) on any failure
        """
        try:
            return True, cls.parse(text)
        except (TypeError, ValueError) as e:
            logger.debug(f"Could not parse period {text!r}: {e}")
            return False, None

    # ---- Misc ----

    @property
    def length(self) -> int:
        """Number of days in the period."""
        return (self.end_before - self.start_on).days

    @property
    def duration(self) -> timedelta:
        """Length of the period as a timedelta of whole days."""
        return timedelta(days=self.length)

    @property
    def is_empty(self) -> bool:
        """True if the period spans zero days."""
        return self.start_on == self.end_before

    def all_days(self) -> Iterator[date]:
        """Yield every date in the period in order, lazily."""
        current = self.start_on
        while current < self.end_before:
            yield current
            current = add_days(current, 1)

    def contains(self, day: date) -> bool:
        """True if `day` falls inside [start_on, end_before)."""
        return self.start_on <= day < self.end_before

    def __contains__(self, day) -> bool:
        return self.contains(day)

    # ---- Set algebra ----

    def overlaps_with(self, other: DatePeriod) -> bool:
        """True if the periods share at least one day; touching periods do not overlap."""
        return self.start_on < other.end_before and self.end_before > other.start_on

    def union_with(self, other: DatePeriod) -> DatePeriod:
        """
        Smallest period covering both periods.

        An empty operand is ignored. For disjoint periods the result also
        covers the gap between them; it is not a true set union.
        """
        if other.is_empty:
            return self
        if self.is_empty:
            return other
        return DatePeriod(
            min_date(self.start_on, other.start_on),
            max_date(self.end_before, other.end_before),
        )

    def intersection_with(self, other: DatePeriod) -> DatePeriod:
        """Days common to both periods, or the empty period if they do not overlap."""
        if not self.overlaps_with(other):
            return _EMPTY
        return DatePeriod(
            max_date(self.start_on, other.start_on),
            min_date(self.end_before, other.end_before),
        )

    # ---- Comparison ----

    def compare(self, other: Optional[DatePeriod]) -> int:
        """
        Three-way comparison: -1, 0 or 1.

        Orders by start_on, then end_before. None sorts before any period.
        """
        if other is None:
            return 1
        if not isinstance(other, DatePeriod):
            raise TypeError(f"Object must be of type DatePeriod, got {type(other).__name__}")
        if self.bounds == other.bounds:
            return 0
        return -1 if self.bounds < other.bounds else 1


_EMPTY = DatePeriod(date.min, date.min)


__all__ = [
    "DatePeriod",
]
