"""Calendar arithmetic primitives used by structure generation and lookup.

Dates are plain ``datetime.date`` values. Adding past ``date.max`` raises
``OverflowError``; the generator treats that as a skipped unit.
"""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta

from periodization_engine.models.enums import DAYS_PER_WEEK, Weekday


def add_weeks(start: date, weeks: int) -> date:
    """Return *start* shifted by a whole number of weeks.

    Raises:
        OverflowError: If the result falls outside the supported date range.
    """
    return start + timedelta(weeks=weeks)


def add_days(start: date, days: int) -> date:
    """Return *start* shifted by *days* calendar days.

    Raises:
        OverflowError: If the result falls outside the supported date range.
    """
    return start + timedelta(days=days)


def days_between(start: date, end: date) -> int:
    """Number of calendar days from *start* to *end* (negative if reversed)."""
    return (end - start).days


def weeks_spanned(start: date, end: date) -> int:
    """Weeks needed to cover ``[start, end]``, rounding a partial week up."""
    return math.ceil(days_between(start, end) / DAYS_PER_WEEK)


def weekday_index(on: date) -> Weekday:
    """Weekday of *on* in the engine's numbering (1 = Sunday … 7 = Saturday).

    ``isoweekday()`` is 1 = Monday … 7 = Sunday, so shift by one and wrap.
    """
    return Weekday(on.isoweekday() % DAYS_PER_WEEK + 1)


def as_date(moment: date | datetime) -> date:
    """Normalize a ``datetime`` to its calendar day; dates pass through."""
    if isinstance(moment, datetime):
        return moment.date()
    return moment


def progress_between(start: date, end: date, on: date) -> float:
    """Percentage (0-100) of the way from *start* to *end* at *on*."""
    if on < start:
        return 0.0
    if on > end:
        return 100.0
    total = days_between(start, end)
    if total <= 0:
        return 100.0
    return days_between(start, on) / total * 100.0
