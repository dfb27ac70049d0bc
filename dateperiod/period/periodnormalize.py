"""Period Text Grammar
---------------------

Strict fixed-width grammar for the canonical period text form:

    yyyy-MM-dd/yyyy-MM-dd

The first date is the inclusive start, the second the exclusive end.
This is deliberately narrower than ISO 8601 intervals: no durations,
no repeating intervals, no omitted components, no surrounding whitespace.

Examples:
  >>> split_period_text("2022-01-01/2022-02-01")
  ('2022-01-01', '2022-02-01')

  >>> parse_period_bounds("2022-01-01/2022-02-01")
  (datetime.date(2022, 1, 1), datetime.date(2022, 2, 1))

  >>> format_period_bounds(date(2022, 1, 1), date(2022, 2, 1))
  '2022-01-01/2022-02-01'
"""

import re
from datetime import date

from dateperiod.dates.datehelpers import to_iso_string
from dateperiod.period.periodexceptions import PeriodFormatError


# ---- Grammar constants ----

DATE_FORMAT = "yyyy-MM-dd"
DATE_TEXT_LENGTH = 10
PERIOD_SEPARATOR = "/"
SEPARATOR_INDEX = DATE_TEXT_LENGTH
PERIOD_TEXT_LENGTH = 2 * DATE_TEXT_LENGTH + len(PERIOD_SEPARATOR)

# ASCII digits only; \d would also accept other Unicode digits
_DATE_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def parse_iso_date(text: str) -> date:
    """
    Parse a single date strictly against yyyy-MM-dd.

    Args:
        text: Exactly 10 characters, e.g. "2022-01-31"

    Returns:
        The parsed date

    Raises:
        TypeError: If text is not a string
        PeriodFormatError: On any deviation from the pattern or an
            impossible calendar date (e.g. "2022-02-30")

    Examples:
        >>> parse_iso_date("2022-03-01")
        datetime.date(2022, 3, 1)

        >>> parse_iso_date("2022-3-1")
        Traceback (most recent call last):
        ...
        PeriodFormatError: ...
    """
    if not isinstance(text, str):
        raise TypeError(f"date text must be a str, got {type(text).__name__}")

    match = _DATE_PATTERN.fullmatch(text)
    if not match:
        raise PeriodFormatError(f"Date must be in the format `{DATE_FORMAT}`, got {text!r}")

    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as e:
        raise PeriodFormatError(f"Invalid date {text!r}: {e}") from e


def split_period_text(text: str) -> tuple[str, str]:
    """
    Split canonical period text into its two date halves.

    Only the shape is checked here (length and separator position);
    the halves are validated by parse_iso_date.

    Raises:
        TypeError: If text is None or not a string
        PeriodFormatError: If the length is not 21 or there is no "/" at index 10
    """
    if text is None:
        raise TypeError("period text must not be None")
    if not isinstance(text, str):
        raise TypeError(f"period text must be a str, got {type(text).__name__}")

    if len(text) != PERIOD_TEXT_LENGTH or text[SEPARATOR_INDEX] != PERIOD_SEPARATOR:
        raise PeriodFormatError(
            f"Input must be in the ISO 8601 period format `{DATE_FORMAT}/{DATE_FORMAT}`, got {text!r}"
        )

    return text[:SEPARATOR_INDEX], text[SEPARATOR_INDEX + 1:]


def parse_period_bounds(text: str) -> tuple[date, date]:
    """
    Parse canonical period text into (start_on, end_before).

    The order of the bounds is not checked here; constructing a
    DatePeriod from them does that.
    """
    start_text, end_text = split_period_text(text)
    return parse_iso_date(start_text), parse_iso_date(end_text)


def format_period_bounds(start_on: date, end_before: date) -> str:
    """Format two dates as canonical period text."""
    return f"{to_iso_string(start_on)}{PERIOD_SEPARATOR}{to_iso_string(end_before)}"


__all__ = [
    "DATE_FORMAT",
    "PERIOD_SEPARATOR",
    "PERIOD_TEXT_LENGTH",
    "parse_iso_date",
    "split_period_text",
    "parse_period_bounds",
    "format_period_bounds",
]
