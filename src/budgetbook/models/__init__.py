"""Record types and SQLModel table exports."""

from .records import Expense, ExpenseCreate, Goal, GoalCreate, Income, IncomeCreate
from .stored_collection import StoredCollection

__all__ = [
    "Expense",
    "ExpenseCreate",
    "Goal",
    "GoalCreate",
    "Income",
    "IncomeCreate",
    "StoredCollection",
]
