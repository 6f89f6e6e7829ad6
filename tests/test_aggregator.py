import random
from decimal import Decimal

from services.aggregator import aggregate, month_to_date, year_to_date


def test_end_to_end_breakdown(sample_entries):
    summary = aggregate(sample_entries)

    assert summary.by_status.received == Decimal("175.00")
    assert summary.by_status.pending == Decimal("50.00")
    assert summary.by_status.planned == Decimal("0")

    assert [b.month_key for b in summary.by_month] == ["2025-04", "2025-03"]
    april, march = summary.by_month
    assert april.totals.received == Decimal("75.00")
    assert march.totals.received == Decimal("100.00")
    assert march.totals.pending == Decimal("50.00")


def test_empty_input():
    summary = aggregate([])
    assert summary.by_status.to_dict() == {
        "planned": "0.00",
        "pending": "0.00",
        "received": "0.00",
    }
    assert summary.by_month == []


def test_aggregate_is_idempotent_and_order_independent(sample_entries):
    first = aggregate(sample_entries).to_dict()
    assert aggregate(sample_entries).to_dict() == first

    shuffled = list(sample_entries)
    random.Random(7).shuffle(shuffled)
    assert aggregate(shuffled).by_status == aggregate(sample_entries).by_status


def test_subtype_split():
    entries = [
        {"date": "2025-03-03", "amount": "40.00", "status": "received", "entry_type": "dividend"},
        {"date": "2025-03-10", "amount": "25000", "status": "pending", "entry_type": "new_aum"},
        {"date": "2025-03-12", "amount": "10.50", "status": "received", "entry_type": "dividend"},
    ]
    summary = aggregate(entries, subtype_key="entry_type")

    (march,) = summary.by_month
    assert march.by_subtype["dividend"].received == Decimal("50.50")
    assert march.by_subtype["new_aum"].pending == Decimal("25000")
    assert summary.by_subtype["dividend"].received == Decimal("50.50")


def test_alternate_amount_field_and_objects():
    class Entry:
        def __init__(self, date, commission_amount, status):
            self.date = date
            self.commission_amount = commission_amount
            self.status = status

    entries = [Entry("2025-01-15", Decimal("1368.00"), "received")]
    summary = aggregate(entries, amount_key="commission_amount")
    assert summary.by_status.received == Decimal("1368.00")


def test_bad_amounts_count_as_zero():
    entries = [
        {"date": "2025-03-05", "amount": "", "status": "received"},
        {"date": "2025-03-05", "amount": "n/a", "status": "received"},
        {"date": "2025-03-05", "amount": "5", "status": "unknown"},
    ]
    summary = aggregate(entries)
    assert summary.by_status.received == Decimal("0")
    assert summary.by_month[0].totals.to_dict()["received"] == "0.00"


def test_malformed_dates_stay_in_totals_but_not_buckets():
    entries = [{"date": "garbage", "amount": "10", "status": "received"}]
    summary = aggregate(entries)
    assert summary.by_status.received == Decimal("10")
    assert summary.by_month == []
    assert year_to_date(entries, 2025).received == Decimal("0")


def test_year_to_date_uses_calendar_range(sample_entries):
    entries = sample_entries + [
        {"date": "2024-12-31", "amount": "999", "status": "received"},
        {"date": "2026-01-01", "amount": "999", "status": "received"},
    ]
    ytd = year_to_date(entries, 2025)
    assert ytd.received == Decimal("175.00")
    assert ytd.pending == Decimal("50.00")


def test_month_to_date(sample_entries):
    march = month_to_date(sample_entries, 2025, 3)
    assert march.received == Decimal("100.00")
    assert march.pending == Decimal("50.00")
    assert month_to_date(sample_entries, 2025, 12).received == Decimal("0")
