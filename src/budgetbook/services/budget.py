"""Single entry point used by presentation code."""

from __future__ import annotations

from typing import Optional

from ..logging_config import get_logger
from ..models.records import Expense, ExpenseCreate, Goal, GoalCreate, Income, IncomeCreate
from .expenses import ExpenseLedger
from .goals import GoalTracker
from .incomes import IncomeLedger

logger = get_logger("services.budget")


class BudgetFacade:
    """Composes the expense ledger, income ledger and goal tracker.

    The facade keeps no state of its own. Every mutation returns the affected
    component's full collection as it stands afterwards, so callers holding a
    view can replace it without a separate query.
    """

    def __init__(self, expenses: ExpenseLedger, incomes: IncomeLedger, goals: GoalTracker):
        self._expenses = expenses
        self._incomes = incomes
        self._goals = goals

    @property
    def expenses(self) -> list[Expense]:
        return self._expenses.get_all()

    @property
    def incomes(self) -> list[Income]:
        return self._incomes.get_all()

    @property
    def goals(self) -> list[Goal]:
        return self._goals.get_all()

    def add_expense(self, data: ExpenseCreate) -> list[Expense]:
        expense = self._expenses.add(data)
        logger.info(
            "Expense added",
            extra={"record_id": expense.id, "amount": expense.amount, "category": expense.category},
        )
        return self._expenses.get_all()

    def add_income(self, data: IncomeCreate) -> list[Income]:
        income = self._incomes.add(data)
        logger.info(
            "Income added",
            extra={"record_id": income.id, "amount": income.amount, "source": income.source},
        )
        return self._incomes.get_all()

    def add_goal(self, data: GoalCreate) -> list[Goal]:
        goal = self._goals.add(data)
        logger.info("Goal added", extra={"record_id": goal.id, "target": goal.amount})
        return self._goals.get_all()

    def update_goal_progress(self, goal_id: str, delta: float) -> list[Goal]:
        updated = self._goals.update_progress(goal_id, delta)
        if updated is None:
            logger.warning("Progress update for unknown goal", extra={"record_id": goal_id})
        else:
            logger.info(
                "Goal progress updated",
                extra={"record_id": goal_id, "delta": delta, "current_amount": updated.current_amount},
            )
        return self._goals.get_all()

    def remove_expense(self, expense_id: str) -> list[Expense]:
        self._expenses.remove(expense_id)
        logger.info("Expense removed", extra={"record_id": expense_id})
        return self._expenses.get_all()

    def remove_income(self, income_id: str) -> list[Income]:
        self._incomes.remove(income_id)
        logger.info("Income removed", extra={"record_id": income_id})
        return self._incomes.get_all()

    def remove_goal(self, goal_id: str) -> list[Goal]:
        self._goals.remove(goal_id)
        logger.info("Goal removed", extra={"record_id": goal_id})
        return self._goals.get_all()

    def get_total_expenses(self, period: Optional[str] = None) -> float:
        return self._expenses.get_total_by_period(period)

    def get_total_income(self, period: Optional[str] = None) -> float:
        return self._incomes.get_total_by_period(period)

    def get_expenses_by_category(self, period: Optional[str] = None) -> dict[str, float]:
        return self._expenses.get_by_category(period)
