"""Period Exceptions
-------------------

Error kinds raised by the period module.

All of them derive from ValueError, so callers that only care about
"bad input" can keep catching the builtin.

  - InvalidRangeError: end_before precedes start_on
  - PeriodFormatError: text does not match "yyyy-MM-dd/yyyy-MM-dd"
  - PeriodDecodeError: JSON object does not have the period shape

Absent input (None where a str or date is required) raises TypeError.
"""

from dateperiod.dates.datehelpers import to_iso_string


class DatePeriodError(ValueError):
    """Base class for date period errors."""


class InvalidRangeError(DatePeriodError):
    """Raised when a period would end before it starts."""

    def __init__(self, start_on, end_before):
        self.start_on = start_on
        self.end_before = end_before
        super().__init__(
            f"start_on `{to_iso_string(start_on)}` must not be later than "
            f"end_before `{to_iso_string(end_before)}`"
        )


class PeriodFormatError(DatePeriodError):
    """Raised when text is not in the canonical period or date format."""


class PeriodDecodeError(DatePeriodError):
    """Raised when a JSON value cannot be decoded into a period."""


__all__ = [
    "DatePeriodError",
    "InvalidRangeError",
    "PeriodFormatError",
    "PeriodDecodeError",
]
