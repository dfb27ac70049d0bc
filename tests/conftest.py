"""Shared test fixtures for dateperiod tests."""

import pytest
from datetime import date

from dateperiod.period.periodidentity import DatePeriod


@pytest.fixture
def january_2022():
    """Fixture providing the period covering January 2022."""
    return DatePeriod(date(2022, 1, 1), date(2022, 2, 1))


@pytest.fixture
def sample_periods():
    """Fixture providing canonical period strings for testing.

    Returns a dict of canonical text to expected length in days.
    """
    return {
        "2022-01-01/2022-02-01": 31,
        "2022-01-01/2022-03-01": 59,
        "2024-02-01/2024-03-01": 29,
        "2022-01-01/2022-01-02": 1,
        "2022-01-01/2022-01-01": 0,
    }
