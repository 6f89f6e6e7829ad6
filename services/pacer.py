"""
Goal pacing.

Combines received revenue, a user-set goal and the business-day calendar
into progress, remaining amount and a per-business-day target. The monthly
and yearly goals are paced independently of each other.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from services.aggregator import month_to_date, year_to_date
from services.business_days import (
    BusinessDayWindow,
    month_window,
    normalize_date,
    year_window,
)
from services.commission import DEFAULT_SOLVER_POLICY, required_premium_for_daily_target
from services.money import ZERO, money, to_decimal


class GoalPeriod(str, Enum):
    MONTHLY = "monthly"
    YEARLY = "yearly"


# (scope, metric) pairs that have goals in the app
GOAL_METRICS = {
    "insurance": ["commission"],
    "investment": ["dividend", "aum"],
}

# investment entry_type for each investment metric
METRIC_ENTRY_TYPES = {"dividend": "dividend", "aum": "new_aum"}


def goal_key(scope: str, metric: str, period) -> str:
    return f"{scope}.{metric}.{GoalPeriod(period).value}"


def all_goal_keys() -> list[str]:
    return [
        goal_key(scope, metric, period)
        for scope, metrics in GOAL_METRICS.items()
        for metric in metrics
        for period in GoalPeriod
    ]


@dataclass(frozen=True)
class PaceResult:
    progress_pct: Decimal
    remaining: Decimal
    daily_target: Decimal
    achieved: bool = False

    def to_dict(self):
        return {
            "progress_pct": str(money(self.progress_pct)),
            "remaining": str(money(self.remaining)),
            "daily_target": str(money(self.daily_target)),
            "achieved": self.achieved,
        }


def pace(received_so_far, goal_amount, business_days_remaining) -> PaceResult:
    """
    Pace received revenue against a goal.

    progress_pct is capped at 100, remaining never goes below 0, and the
    daily target is 0 when there is no goal or no business day left.
    """
    received = to_decimal(received_so_far)
    goal = to_decimal(goal_amount)
    days = int(to_decimal(business_days_remaining))

    if goal <= 0:
        return PaceResult(ZERO, ZERO, ZERO, achieved=False)

    progress = min(received / goal * 100, Decimal(100))
    remaining = max(goal - received, ZERO)
    daily_target = remaining / days if days > 0 else ZERO
    return PaceResult(progress, remaining, daily_target, achieved=received >= goal)


@dataclass(frozen=True)
class GoalProgress:
    key: str
    period: GoalPeriod
    goal: Decimal
    received: Decimal
    window: BusinessDayWindow
    pace: PaceResult
    # Monthly premium per business day needed to hit the daily target
    required_premium: Decimal = None

    def to_dict(self):
        data = {
            "key": self.key,
            "period": self.period.value,
            "goal": str(money(self.goal)),
            "received": str(money(self.received)),
            "business_days": self.window.to_dict(),
            **self.pace.to_dict(),
        }
        if self.required_premium is not None:
            data["required_premium"] = str(self.required_premium)
        return data


def goal_progress(entries, store, scope: str, metric: str, today=None,
                  amount_key: str = "amount", subtype_key=None, subtype=None,
                  holidays=(), solver_policy=None) -> dict:
    """
    Monthly and yearly progress for one goal metric.

    Args:
        entries: revenue entries for the scope
        store: GoalStore holding the goal amounts
        scope/metric: goal identity, e.g. ("investment", "dividend")
        today: reference date, defaults to date.today()
        subtype_key/subtype: restrict to one entry type (dividend vs new_aum)
        solver_policy: policy type for the required-premium figure, if any

    Returns:
        {"monthly": GoalProgress, "yearly": GoalProgress}
    """
    today = normalize_date(today or date.today())
    entries = list(entries)

    received_by_period = {
        GoalPeriod.MONTHLY: month_to_date(
            entries, today.year, today.month, amount_key, subtype_key, subtype
        ).received,
        GoalPeriod.YEARLY: year_to_date(
            entries, today.year, amount_key, subtype_key, subtype
        ).received,
    }
    windows = {
        GoalPeriod.MONTHLY: month_window(today, holidays),
        GoalPeriod.YEARLY: year_window(today, holidays),
    }

    result = {}
    for period in GoalPeriod:
        key = goal_key(scope, metric, period)
        goal = store.get(key) or ZERO
        received = received_by_period[period]
        window = windows[period]
        paced = pace(received, goal, window.remaining)

        required = None
        if solver_policy:
            required = required_premium_for_daily_target(paced.daily_target, solver_policy)

        result[period.value] = GoalProgress(
            key=key,
            period=period,
            goal=goal,
            received=received,
            window=window,
            pace=paced,
            required_premium=required,
        )
    return result


def insurance_goal_progress(entries, store, today=None, holidays=()) -> dict:
    return goal_progress(
        entries, store, "insurance", "commission", today,
        amount_key="commission_amount",
        holidays=holidays,
        solver_policy=DEFAULT_SOLVER_POLICY,
    )


def investment_goal_progress(entries, store, today=None, holidays=()) -> dict:
    entries = list(entries)
    return {
        metric: goal_progress(
            entries, store, "investment", metric, today,
            amount_key="amount",
            subtype_key="entry_type",
            subtype=METRIC_ENTRY_TYPES[metric],
            holidays=holidays,
        )
        for metric in GOAL_METRICS["investment"]
    }
