"""Service module exports."""

from . import budget, expenses, goals, identifiers, incomes, periods, summary
from .budget import BudgetFacade
from .expenses import ExpenseLedger
from .goals import GoalTracker
from .incomes import IncomeLedger

__all__ = [
    "BudgetFacade",
    "ExpenseLedger",
    "GoalTracker",
    "IncomeLedger",
    "budget",
    "expenses",
    "goals",
    "identifiers",
    "incomes",
    "periods",
    "summary",
]
