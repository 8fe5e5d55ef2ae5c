"""Savings goal tracker."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..logging_config import get_logger
from ..models.records import Goal, GoalCreate
from .collection import RecordCollection

logger = get_logger("services.goals")


class GoalTracker(RecordCollection[Goal]):
    """Savings goals persisted under the ``goals`` key."""

    storage_key = "goals"

    def _decode(self, record: Mapping[str, Any]) -> Goal:
        return Goal.from_record(record)

    def add(self, data: GoalCreate) -> Goal:
        """Open a goal; progress always starts at zero."""
        return self._append(Goal.create(self._next_id(), data))

    def update_progress(self, goal_id: str, delta: float) -> Optional[Goal]:
        """Add ``delta`` to a goal's accumulated amount.

        The delta is signed and the result is not clamped, so progress may pass
        the target or drop below zero. Returns None, without writing, when no
        goal has ``goal_id``.
        """

        for index, goal in enumerate(self._records):
            if goal.id == goal_id:
                break
        else:
            return None

        updated = goal.with_progress(delta)
        self._records[index] = updated
        self._save()
        if updated.current_amount < 0 or updated.current_amount > updated.amount:
            logger.info(
                "Goal progress outside target range",
                extra={"goal_id": goal_id, "current_amount": updated.current_amount},
            )
        return updated
