"""Date Period - half-open spans of calendar dates

Public API for building, parsing, combining and encoding date periods.

Usage:
    from dateperiod import DatePeriod, parse_period, try_parse_period
    from dateperiod import dumps_period, loads_period, camel_case

    # Parse canonical text
    period = parse_period("2022-01-01/2022-02-01")  # 31 days of January

    # Non-raising parse
    ok, period = try_parse_period("2022-01-02/2022-01-01")  # (False, None)

    # Set algebra
    hull = period.union_with(DatePeriod.one_day(date(2022, 3, 1)))

    # JSON
    text = dumps_period(period, naming=camel_case)  # '{"startOn": ..., "endBefore": ...}'
"""

__version__ = "0.1.0"

# ============================================================================
# Core value type and errors
# ============================================================================

from .period.periodidentity import DatePeriod

from .period.periodexceptions import (
    DatePeriodError,
    InvalidRangeError,
    PeriodFormatError,
    PeriodDecodeError,
)

# ============================================================================
# Period API
# ============================================================================

from .period.periodapi import (
    make_period,             # Construct [start_on, end_before)
    one_day,                 # Single-day period
    parse_period,            # Strict parse of canonical text
    try_parse_period,        # Non-raising parse
    format_period,           # Canonical text
    overlaps,                # Overlap test
    union,                   # Convex hull of two periods
    intersection,            # Common days of two periods
    all_days,                # Lazy day enumeration
    sort_periods,            # Sort with None first
    extract_periods,         # Find period tokens in free text
    format_period_display,   # Human-readable display
)

# ============================================================================
# JSON encoding
# ============================================================================

from .period.periodjson import (
    camel_case,
    snake_case,
    period_to_json,
    period_from_json,
    dumps_period,
    loads_period,
    period_pairs_hook,
    DatePeriodJSONEncoder,
)

# ============================================================================
# pandas bridge
# ============================================================================

from .period.periodframe import (
    period_days_index,       # Daily DatetimeIndex over a period
    periods_to_frame,        # One row per period
    periods_from_frame,      # Periods from start/end columns
)

# ============================================================================
# Date helpers
# ============================================================================

from .dates.datehelpers import (
    min_date,
    max_date,
    to_iso_string,
    add_days,
)

__all__ = [
    "__version__",
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
    "camel_case",
    "snake_case",
    "period_to_json",
    "period_from_json",
    "dumps_period",
    "loads_period",
    "period_pairs_hook",
    "DatePeriodJSONEncoder",
    "period_days_index",
    "periods_to_frame",
    "periods_from_frame",
    "min_date",
    "max_date",
    "to_iso_string",
    "add_days",
]
