"""Budget records and the payloads used to create them.

Records are immutable once created. ``to_record``/``from_record`` translate
between the Python attribute names and the camelCase shape stored under each
collection key.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping, Union

Number = Union[int, float]


def _number(value: Any) -> Number:
    """Return a stored amount unchanged, rejecting anything that is not a JSON number."""

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {value!r}")
    return value


@dataclass(frozen=True, slots=True)
class ExpenseCreate:
    """Fields supplied by the caller when recording an expense."""

    amount: float
    category: str
    description: str
    date: str


@dataclass(frozen=True, slots=True)
class IncomeCreate:
    """Fields supplied by the caller when recording income."""

    amount: float
    source: str
    description: str
    date: str
    is_recurring: bool = False


@dataclass(frozen=True, slots=True)
class GoalCreate:
    """Fields supplied by the caller when opening a savings goal."""

    category: str
    amount: float
    end_date: str


@dataclass(frozen=True, slots=True)
class Expense:
    """Money spent on a given day, filed under a category."""

    id: str
    amount: float
    category: str
    description: str
    date: str

    @classmethod
    def create(cls, record_id: str, data: ExpenseCreate) -> "Expense":
        return cls(
            id=record_id,
            amount=data.amount,
            category=data.category,
            description=data.description,
            date=data.date,
        )

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "amount": self.amount,
            "category": self.category,
            "description": self.description,
            "date": self.date,
        }

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Expense":
        return cls(
            id=str(record["id"]),
            amount=_number(record["amount"]),
            category=str(record["category"]),
            description=str(record.get("description", "")),
            date=str(record["date"]),
        )


@dataclass(frozen=True, slots=True)
class Income:
    """Money received on a given day from a source.

    ``is_recurring`` is informational only; nothing re-creates recurring income.
    """

    id: str
    amount: float
    source: str
    description: str
    date: str
    is_recurring: bool = False

    @classmethod
    def create(cls, record_id: str, data: IncomeCreate) -> "Income":
        return cls(
            id=record_id,
            amount=data.amount,
            source=data.source,
            description=data.description,
            date=data.date,
            is_recurring=data.is_recurring,
        )

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "amount": self.amount,
            "source": self.source,
            "description": self.description,
            "date": self.date,
            "isRecurring": self.is_recurring,
        }

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Income":
        return cls(
            id=str(record["id"]),
            amount=_number(record["amount"]),
            source=str(record["source"]),
            description=str(record.get("description", "")),
            date=str(record["date"]),
            is_recurring=bool(record.get("isRecurring", False)),
        )


@dataclass(frozen=True, slots=True)
class Goal:
    """A savings target with the amount accumulated towards it so far."""

    id: str
    category: str
    amount: float
    current_amount: float
    end_date: str

    @classmethod
    def create(cls, record_id: str, data: GoalCreate) -> "Goal":
        return cls(
            id=record_id,
            category=data.category,
            amount=data.amount,
            current_amount=0,
            end_date=data.end_date,
        )

    def with_progress(self, delta: float) -> "Goal":
        """Return a copy with ``delta`` added to the accumulated amount."""

        return replace(self, current_amount=self.current_amount + delta)

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "category": self.category,
            "amount": self.amount,
            "currentAmount": self.current_amount,
            "endDate": self.end_date,
        }

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Goal":
        return cls(
            id=str(record["id"]),
            category=str(record["category"]),
            amount=_number(record["amount"]),
            current_amount=_number(record.get("currentAmount", 0)),
            end_date=str(record["endDate"]),
        )
