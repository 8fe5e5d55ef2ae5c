"""Expense ledger."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..models.records import Expense, ExpenseCreate
from .collection import RecordCollection
from .periods import matches_period


class ExpenseLedger(RecordCollection[Expense]):
    """Expenses persisted under the ``expenses`` key."""

    storage_key = "expenses"

    def _decode(self, record: Mapping[str, Any]) -> Expense:
        return Expense.from_record(record)

    def get_by_period(self, period: str) -> list[Expense]:
        """Return expenses whose date starts with ``period`` (``YYYY-MM``)."""
        return [e for e in self._records if e.date.startswith(period)]

    def add(self, data: ExpenseCreate) -> Expense:
        """Record a new expense. Amount, category and date are stored as given."""
        return self._append(Expense.create(self._next_id(), data))

    def _matching(self, period: Optional[str]) -> list[Expense]:
        return [e for e in self._records if matches_period(e.date, period)]

    def get_total_by_period(self, period: Optional[str] = None) -> float:
        """Sum expense amounts for ``period``, or for all time when omitted."""
        return sum(e.amount for e in self._matching(period))

    def get_by_category(self, period: Optional[str] = None) -> dict[str, float]:
        """Sum expense amounts per category for ``period``, or for all time."""

        totals: dict[str, float] = {}
        for expense in self._matching(period):
            totals[expense.category] = totals.get(expense.category, 0) + expense.amount
        return totals
