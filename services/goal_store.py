"""
Goal persistence.

Goals are simple key -> amount pairs ("insurance.commission.monthly" ->
5000). The pacer only depends on the ``GoalStore`` interface so it can run
against an in-memory store in tests and the database in the app.
"""

from services.money import to_decimal


class GoalStore:
    """Key-value store for goal amounts."""

    def get(self, key: str):
        raise NotImplementedError

    def set(self, key: str, value) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError

    def all(self) -> dict:
        raise NotImplementedError

    def update(self, values: dict) -> None:
        for key, value in values.items():
            self.set(key, value)


def clean_goal_amount(value):
    """A blank or non-positive goal means 'no goal'."""
    amount = to_decimal(value)
    return amount if amount > 0 else None


class InMemoryGoalStore(GoalStore):
    def __init__(self, initial: dict = None):
        self._data = {}
        if initial:
            self.update(initial)

    def get(self, key: str):
        return self._data.get(key)

    def set(self, key: str, value) -> None:
        amount = clean_goal_amount(value)
        if amount is None:
            self.remove(key)
        else:
            self._data[key] = amount

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def all(self) -> dict:
        return dict(self._data)
