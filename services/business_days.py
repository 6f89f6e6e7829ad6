"""
Business-day calendar.

A business day is Monday-Friday. No statutory holidays are excluded unless
the caller passes them in explicitly through ``holidays``.

Counting conventions used for goal pacing:
  - "remaining" runs from today through the end of the period, inclusive
    of today.
  - "elapsed" runs from the start of the period up to, but excluding, today.
Together they cover the period exactly once: elapsed + remaining == total,
whether or not today is itself a business day.
"""

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta


@dataclass(frozen=True)
class BusinessDayWindow:
    total: int
    elapsed: int
    remaining: int

    def to_dict(self):
        return {
            "total": self.total,
            "elapsed": self.elapsed,
            "remaining": self.remaining,
        }


def normalize_date(value) -> date:
    """Drop the time of day from a datetime; dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def is_business_day(day: date, holidays=()) -> bool:
    return day.weekday() < 5 and day not in holidays


def count_business_days(start: date, end: date, holidays=()) -> int:
    """Count business days in [start, end]. Empty range -> 0."""
    holidays = frozenset(holidays)
    count = 0
    day = start
    while day <= end:
        if is_business_day(day, holidays):
            count += 1
        day += timedelta(days=1)
    return count


def _month_bounds(year: int, month: int) -> tuple[date, date]:
    last = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last)


# ── Month scope ──────────────────────────────────────────────────────────

def business_days_in_month(year: int, month: int, holidays=()) -> int:
    """Business days in a calendar month (month is 1-12)."""
    first, last = _month_bounds(year, month)
    return count_business_days(first, last, holidays)


def business_days_remaining_in_month(today, holidays=()) -> int:
    today = normalize_date(today)
    _, last = _month_bounds(today.year, today.month)
    return count_business_days(today, last, holidays)


def business_days_elapsed_in_month(today, holidays=()) -> int:
    today = normalize_date(today)
    first, _ = _month_bounds(today.year, today.month)
    return count_business_days(first, today - timedelta(days=1), holidays)


# ── Year scope ───────────────────────────────────────────────────────────

def business_days_in_year(year: int, holidays=()) -> int:
    return count_business_days(date(year, 1, 1), date(year, 12, 31), holidays)


def business_days_remaining_in_year(today, holidays=()) -> int:
    today = normalize_date(today)
    return count_business_days(today, date(today.year, 12, 31), holidays)


def business_days_elapsed_in_year(today, holidays=()) -> int:
    today = normalize_date(today)
    return count_business_days(
        date(today.year, 1, 1), today - timedelta(days=1), holidays
    )


# ── Windows ──────────────────────────────────────────────────────────────

def month_window(today, holidays=()) -> BusinessDayWindow:
    today = normalize_date(today)
    return BusinessDayWindow(
        total=business_days_in_month(today.year, today.month, holidays),
        elapsed=business_days_elapsed_in_month(today, holidays),
        remaining=business_days_remaining_in_month(today, holidays),
    )


def year_window(today, holidays=()) -> BusinessDayWindow:
    today = normalize_date(today)
    return BusinessDayWindow(
        total=business_days_in_year(today.year, holidays),
        elapsed=business_days_elapsed_in_year(today, holidays),
        remaining=business_days_remaining_in_year(today, holidays),
    )
