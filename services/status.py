"""Revenue entry lifecycle: planned -> pending -> received."""

from enum import Enum


class RevenueStatus(str, Enum):
    PLANNED = "planned"
    PENDING = "pending"
    RECEIVED = "received"

    @property
    def rank(self) -> int:
        return list(RevenueStatus).index(self)


STATUSES = [s.value for s in RevenueStatus]


def parse_status(value) -> RevenueStatus:
    """Raise ValueError for anything outside the lifecycle."""
    try:
        return RevenueStatus(value)
    except ValueError:
        raise ValueError(
            f"Status must be one of {', '.join(STATUSES)} (got {value!r})"
        ) from None


def check_transition(current, new, strict: bool = False) -> RevenueStatus:
    """
    Validate a status change and return the new status.

    Any transition is allowed unless ``strict`` is set, in which case an
    entry may only stay put or move forward (skipping a step is fine).
    """
    new_status = parse_status(new)
    if not strict or current is None:
        return new_status

    current_status = parse_status(current)
    if new_status.rank < current_status.rank:
        raise ValueError(
            f"Cannot move an entry from {current_status.value} back to {new_status.value}"
        )
    return new_status
