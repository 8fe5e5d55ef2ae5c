"""Income ledger."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..models.records import Income, IncomeCreate
from .collection import RecordCollection
from .periods import matches_period


class IncomeLedger(RecordCollection[Income]):
    """Income persisted under the ``incomes`` key."""

    storage_key = "incomes"

    def _decode(self, record: Mapping[str, Any]) -> Income:
        return Income.from_record(record)

    def get_by_period(self, period: str) -> list[Income]:
        return [i for i in self._records if i.date.startswith(period)]

    def add(self, data: IncomeCreate) -> Income:
        return self._append(Income.create(self._next_id(), data))

    def get_total_by_period(self, period: Optional[str] = None) -> float:
        """Sum income amounts for ``period``, or for all time when omitted."""
        return sum(i.amount for i in self._records if matches_period(i.date, period))
