"""
Insurance commission calculator.

Only the structured products (T10, T20, Layered WL) have a formula:

    annual premium   = monthly premium x 12
    base commission  = annual premium x base rate
    total commission = base commission x (1 + bonus multiplier)

Every other policy type is entered by hand and passed through untouched.
"""

from dataclasses import dataclass
from decimal import Decimal, DecimalException, ROUND_HALF_UP

from services.money import CENTS, ZERO, money, to_decimal


@dataclass(frozen=True)
class CommissionFormula:
    base_rate: Decimal
    bonus_multiplier: Decimal

    @property
    def multiplier(self) -> Decimal:
        """Commission per dollar of monthly premium."""
        return 12 * self.base_rate * (1 + self.bonus_multiplier)


BONUS_MULTIPLIER = Decimal("1.85")

POLICY_FORMULAS = {
    "T10": CommissionFormula(Decimal("0.40"), BONUS_MULTIPLIER),
    "T20": CommissionFormula(Decimal("0.45"), BONUS_MULTIPLIER),
    "Layered WL": CommissionFormula(Decimal("0.55"), BONUS_MULTIPLIER),
}

POLICY_TYPES = [
    "T10",
    "T15",
    "T20",
    "Layered WL",
    "CI",
    "Life Insurance",
    "Health Insurance",
    "Disability Insurance",
    "Critical Illness",
    "Long-Term Care",
    "Travel Insurance",
    "Group Benefits",
    "Segregated Funds",
    "Annuities",
    "Other",
]

DEFAULT_SOLVER_POLICY = "T10"


def is_computed_policy_type(policy_type) -> bool:
    return policy_type in POLICY_FORMULAS


def compute_commission(policy_type, monthly_premium) -> Decimal:
    """
    Commission for a structured policy, rounded half-up to cents.

    Unsupported or missing policy types and non-positive premiums give 0.00.
    """
    formula = POLICY_FORMULAS.get(policy_type)
    premium = to_decimal(monthly_premium)
    if formula is None or premium <= 0:
        return money(ZERO)

    try:
        annual_premium = premium * 12
        base = annual_premium * formula.base_rate
        total = base * (1 + formula.bonus_multiplier)
        return total.quantize(CENTS, rounding=ROUND_HALF_UP)
    except DecimalException:
        return money(ZERO)


def commission_breakdown(policy_type, monthly_premium) -> dict:
    """
    Intermediate figures for the entry form preview.

    Returns:
        {
            "policy_type": "T10",
            "computed": True,
            "monthly_premium": "1000.00",
            "annual_premium": "12000.00",
            "base_rate": "0.40",
            "base_commission": "4800.00",
            "total_commission": "13680.00"
        }
    """
    formula = POLICY_FORMULAS.get(policy_type)
    premium = to_decimal(monthly_premium)
    if formula is None or premium <= 0:
        premium = max(premium, ZERO)
        return {
            "policy_type": policy_type,
            "computed": formula is not None,
            "monthly_premium": str(money(premium)),
            "annual_premium": str(money(premium * 12)),
            "base_rate": str(formula.base_rate) if formula else None,
            "base_commission": "0.00",
            "total_commission": "0.00",
        }

    annual_premium = premium * 12
    return {
        "policy_type": policy_type,
        "computed": True,
        "monthly_premium": str(money(premium)),
        "annual_premium": str(money(annual_premium)),
        "base_rate": str(formula.base_rate),
        "base_commission": str(money(annual_premium * formula.base_rate)),
        "total_commission": str(compute_commission(policy_type, premium)),
    }


def resolve_commission_amount(policy_type, monthly_premium, entered_amount) -> Decimal:
    """Computed commission for structured types, the user's figure otherwise."""
    if is_computed_policy_type(policy_type):
        return compute_commission(policy_type, monthly_premium)
    return to_decimal(entered_amount)


def required_premium_for_daily_target(daily_target, policy_type=DEFAULT_SOLVER_POLICY) -> Decimal:
    """
    Monthly premium that must be written to earn ``daily_target`` in
    commission, using the forward formula for ``policy_type`` (T10 by
    default). Non-positive targets and unknown types give 0.00.
    """
    formula = POLICY_FORMULAS.get(policy_type)
    target = to_decimal(daily_target)
    if formula is None or target <= 0:
        return money(ZERO)
    try:
        return (target / formula.multiplier).quantize(CENTS, rounding=ROUND_HALF_UP)
    except DecimalException:
        return money(ZERO)
