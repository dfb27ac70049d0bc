"""Single-date calendar helpers."""

from dateperiod.dates.datehelpers import (
    min_date,
    max_date,
    to_iso_string,
    add_days,
)

__all__ = [
    "min_date",
    "max_date",
    "to_iso_string",
    "add_days",
]
