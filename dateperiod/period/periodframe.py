"""pandas bridge for date periods.

Tabular views of periods for analysis code:

  - period_days_index: daily DatetimeIndex over a period
  - periods_to_frame: one row per period
  - periods_from_frame: build periods from start/end columns
"""

import logging
from datetime import date, datetime
from typing import Iterable, List

import pandas as pd

from dateperiod.period.periodidentity import DatePeriod
from dateperiod.period.periodnormalize import format_period_bounds, parse_iso_date

logger = logging.getLogger(__name__)

FRAME_COLUMNS = ["start_on", "end_before", "length", "period"]


def period_days_index(period: DatePeriod, name: str = "day") -> pd.DatetimeIndex:
    """
    Daily DatetimeIndex covering the days of a period.

    Same days as period.all_days(), but materialized for pandas.
    An empty period gives an empty index. Dates must lie within the
    pandas Timestamp range (years 1677-2262).

    Example:
        >>> period_days_index(parse_period("2022-01-01/2022-01-04"))
        DatetimeIndex(['2022-01-01', '2022-01-02', '2022-01-03'], dtype='datetime64[ns]', name='day', freq='D')
    """
    return pd.date_range(start=period.start_on, periods=period.length, freq="D", name=name)


def periods_to_frame(periods: Iterable[DatePeriod]) -> pd.DataFrame:
    """
    One row per period with columns start_on, end_before, length, period.

    Dates stay as datetime.date objects; period holds the canonical text.
    """
    rows = [
        {
            "start_on": p.start_on,
            "end_before": p.end_before,
            "length": p.length,
            "period": format_period_bounds(p.start_on, p.end_before),
        }
        for p in periods
    ]
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def _as_date(value) -> date:
    # Timestamp is a datetime subclass
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_iso_date(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to a date")


def periods_from_frame(
    df: pd.DataFrame,
    start_col: str = "start_on",
    end_col: str = "end_before",
) -> List[DatePeriod]:
    """
    Build periods from two date columns of a DataFrame.

    Cells may hold dates, datetimes/Timestamps (the date part is used) or
    yyyy-MM-dd strings. Each row goes through the DatePeriod constructor.

    Raises:
        ValueError: If a column is missing
        TypeError: For missing values or cells that are not date-like
        InvalidRangeError: If a row ends before it starts
        PeriodFormatError: For malformed date strings
    """
    missing = [col for col in (start_col, end_col) if col not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")

    periods = []
    for start_value, end_value in zip(df[start_col], df[end_col]):
        if pd.isna(start_value) or pd.isna(end_value):
            raise TypeError("period bounds must not be missing")
        periods.append(DatePeriod(_as_date(start_value), _as_date(end_value)))

    logger.debug(f"Built {len(periods)} periods from columns {start_col!r}, {end_col!r}")
    return periods


__all__ = [
    "FRAME_COLUMNS",
    "period_days_index",
    "periods_to_frame",
    "periods_from_frame",
]
