"""
Revenue aggregation.

Groups revenue entries by status, by calendar month and by year. Entries
can be plain dicts (e.g. ``to_dict()`` output) or model instances; amounts
are parsed from their decimal text only here, at calculation time.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from services.money import ZERO, money, to_decimal
from services.status import STATUSES

logger = logging.getLogger(__name__)


@dataclass
class StatusTotals:
    planned: Decimal = ZERO
    pending: Decimal = ZERO
    received: Decimal = ZERO

    def add(self, status, amount: Decimal) -> None:
        if status not in STATUSES:
            return
        setattr(self, status, getattr(self, status) + amount)

    def to_dict(self) -> dict:
        return {s: str(money(getattr(self, s))) for s in STATUSES}


@dataclass
class MonthBucket:
    month_key: str
    totals: StatusTotals = field(default_factory=StatusTotals)
    by_subtype: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "month": self.month_key,
            **self.totals.to_dict(),
            "by_subtype": {k: v.to_dict() for k, v in self.by_subtype.items()},
        }


@dataclass
class RevenueSummary:
    by_status: StatusTotals
    by_month: list
    by_subtype: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "by_status": self.by_status.to_dict(),
            "by_month": [b.to_dict() for b in self.by_month],
            "by_subtype": {k: v.to_dict() for k, v in self.by_subtype.items()},
        }


def entry_value(entry, key):
    """Read a field from a dict-like or attribute-style entry."""
    if isinstance(entry, Mapping):
        return entry.get(key)
    return getattr(entry, key, None)


def entry_date(entry):
    """Parse an entry's ISO date; None when missing or malformed."""
    raw = entry_value(entry, "date")
    if isinstance(raw, date):
        return raw
    try:
        return date.fromisoformat(str(raw))
    except (TypeError, ValueError):
        logger.debug("Skipping entry with malformed date %r", raw)
        return None


def _matches_subtype(entry, subtype_key, subtype) -> bool:
    if subtype is None or subtype_key is None:
        return True
    return entry_value(entry, subtype_key) == subtype


def aggregate(entries, amount_key: str = "amount", subtype_key=None) -> RevenueSummary:
    """
    Aggregate entries into per-status totals and a monthly breakdown.

    Args:
        entries: iterable of revenue entries
        amount_key: field holding the amount ("amount", "commission_amount")
        subtype_key: optional field splitting totals further ("entry_type")

    Returns:
        RevenueSummary with months sorted most recent first.
    """
    by_status = StatusTotals()
    by_subtype = {}
    months = {}

    for entry in entries:
        status = entry_value(entry, "status")
        amount = to_decimal(entry_value(entry, amount_key))
        subtype = entry_value(entry, subtype_key) if subtype_key else None

        by_status.add(status, amount)
        if subtype_key:
            by_subtype.setdefault(subtype, StatusTotals()).add(status, amount)

        day = entry_date(entry)
        if day is None:
            continue
        month_key = f"{day.year:04d}-{day.month:02d}"
        bucket = months.setdefault(month_key, MonthBucket(month_key))
        bucket.totals.add(status, amount)
        if subtype_key:
            bucket.by_subtype.setdefault(subtype, StatusTotals()).add(status, amount)

    by_month = sorted(months.values(), key=lambda b: b.month_key, reverse=True)
    return RevenueSummary(by_status=by_status, by_month=by_month, by_subtype=by_subtype)


def totals_between(entries, start: date, end: date, amount_key: str = "amount",
                   subtype_key=None, subtype=None) -> StatusTotals:
    """Per-status totals for entries dated within [start, end]."""
    totals = StatusTotals()
    for entry in entries:
        if not _matches_subtype(entry, subtype_key, subtype):
            continue
        day = entry_date(entry)
        if day is None or not (start <= day <= end):
            continue
        totals.add(entry_value(entry, "status"), to_decimal(entry_value(entry, amount_key)))
    return totals


def year_to_date(entries, year: int, amount_key: str = "amount",
                 subtype_key=None, subtype=None) -> StatusTotals:
    return totals_between(
        entries, date(year, 1, 1), date(year, 12, 31), amount_key, subtype_key, subtype
    )


def month_to_date(entries, year: int, month: int, amount_key: str = "amount",
                  subtype_key=None, subtype=None) -> StatusTotals:
    first = date(year, month, 1)
    next_month = date(year + month // 12, month % 12 + 1, 1)
    last = date.fromordinal(next_month.toordinal() - 1)
    return totals_between(entries, first, last, amount_key, subtype_key, subtype)
