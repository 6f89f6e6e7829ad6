import logging
from datetime import datetime, timezone
from decimal import Decimal

from models import db
from services.goal_store import GoalStore, clean_goal_amount
from services.money import format_currency

logger = logging.getLogger(__name__)


class Goal(db.Model):
    """A revenue goal, keyed like 'insurance.commission.monthly'."""

    __tablename__ = "goals"

    key = db.Column(db.String(100), primary_key=True)
    amount = db.Column(db.String(32), nullable=False)  # exact decimal text
    updated_at = db.Column(
        db.DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def to_dict(self):
        return {"key": self.key, "amount": self.amount}


class DatabaseGoalStore(GoalStore):
    """GoalStore backed by the goals table. Every change is committed."""

    def __init__(self, session=None):
        self.session = session or db.session

    def get(self, key: str):
        goal = self.session.get(Goal, key)
        return Decimal(goal.amount) if goal else None

    def set(self, key: str, value) -> None:
        amount = clean_goal_amount(value)
        if amount is None:
            self.remove(key)
            return

        self.session.merge(Goal(key=key, amount=str(amount)))
        self.session.commit()
        logger.info("Goal %s set to %s", key, format_currency(amount))

    def remove(self, key: str) -> None:
        goal = self.session.get(Goal, key)
        if goal is None:
            return
        self.session.delete(goal)
        self.session.commit()
        logger.info("Goal %s cleared", key)

    def all(self) -> dict:
        goals = self.session.query(Goal).order_by(Goal.key).all()
        return {g.key: Decimal(g.amount) for g in goals}
