from decimal import Decimal

import pytest

from services.commission import (
    POLICY_FORMULAS,
    POLICY_TYPES,
    commission_breakdown,
    compute_commission,
    is_computed_policy_type,
    required_premium_for_daily_target,
    resolve_commission_amount,
)


@pytest.mark.parametrize(
    "policy_type, expected",
    [
        ("T10", Decimal("13680.00")),
        ("T20", Decimal("15390.00")),
        ("Layered WL", Decimal("18810.00")),
    ],
)
def test_structured_policy_commission(policy_type, expected):
    assert compute_commission(policy_type, "1000") == expected


def test_manual_entry_types_do_not_compute():
    assert compute_commission("Health Insurance", 500) == Decimal("0")
    assert compute_commission("T15", 500) == Decimal("0")
    assert not is_computed_policy_type("Life Insurance")


def test_invalid_input_degrades_to_zero():
    assert compute_commission(None, 1000) == Decimal("0.00")
    assert compute_commission("T10", 0) == Decimal("0.00")
    assert compute_commission("T10", -50) == Decimal("0.00")
    assert compute_commission("T10", "") == Decimal("0.00")
    assert compute_commission("T10", "abc") == Decimal("0.00")


def test_huge_premiums_degrade_to_zero():
    assert compute_commission("T10", "1e30") == Decimal("0.00")
    assert compute_commission("T10", "1e999999") == Decimal("0.00")
    assert commission_breakdown("T10", "1e30")["total_commission"] == "0.00"
    assert required_premium_for_daily_target("1e999999") == Decimal("0.00")


def test_rounds_half_up_at_final_step():
    # 1.5 * 12 * 0.45 * 2.85 = 23.085
    assert compute_commission("T20", "1.5") == Decimal("23.09")
    # 333.33 * 13.68 = 4559.9544
    assert compute_commission("T10", "333.33") == Decimal("4559.95")


def test_commission_never_negative():
    for policy_type in POLICY_TYPES + [None, "Unknown"]:
        for premium in ("0", "0.01", "1", "99.99", "1234.56", "100000"):
            assert compute_commission(policy_type, premium) >= 0


def test_resolve_uses_formula_only_for_structured_types():
    assert resolve_commission_amount("T10", "1000", "1.00") == Decimal("13680.00")
    assert resolve_commission_amount("Health Insurance", "1000", "250.50") == Decimal("250.50")
    assert resolve_commission_amount("Other", "1000", "") == Decimal("0")


def test_breakdown_shows_base_and_total():
    breakdown = commission_breakdown("T10", "1000")
    assert breakdown["computed"] is True
    assert breakdown["annual_premium"] == "12000.00"
    assert breakdown["base_commission"] == "4800.00"
    assert breakdown["total_commission"] == "13680.00"

    manual = commission_breakdown("Annuities", "1000")
    assert manual["computed"] is False
    assert manual["total_commission"] == "0.00"


def test_required_premium_inverts_t10():
    assert required_premium_for_daily_target("13.68") == Decimal("1.00")
    assert required_premium_for_daily_target(100) == Decimal("7.31")


def test_required_premium_zero_for_non_positive_target():
    assert required_premium_for_daily_target(0) == Decimal("0")
    assert required_premium_for_daily_target(-10) == Decimal("0")


def test_required_premium_uses_forward_formula():
    daily = compute_commission("T20", "200")
    assert required_premium_for_daily_target(daily, "T20") == Decimal("200.00")
    assert POLICY_FORMULAS["T10"].multiplier == Decimal("13.68")
