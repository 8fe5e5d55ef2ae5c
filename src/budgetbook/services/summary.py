"""Derived figures for dashboards and reports: monthly summaries and goal status."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from ..models.records import Goal
from .budget import BudgetFacade


def calculate_percentage(value: float, total: float) -> int:
    """Return ``value`` as a whole-number percentage of ``total``; 0 when total is 0.

    Halves round upwards (12.5 -> 13, -12.5 -> -12).
    """

    if total == 0:
        return 0
    return math.floor(value / total * 100 + 0.5)


@dataclass(slots=True)
class MonthlySummary:
    """Income against expenses for one period (or all time when period is None)."""

    period: Optional[str]
    income: float
    expenses: float

    @property
    def balance(self) -> float:
        return self.income - self.expenses

    @property
    def savings_rate(self) -> int:
        if self.income <= 0:
            return 0
        return calculate_percentage(self.balance, self.income)


@dataclass(slots=True)
class CategoryShare:
    category: str
    amount: float
    percentage: int


@dataclass(slots=True)
class MonthComparison:
    """Side-by-side figures for two periods."""

    current: MonthlySummary
    compare: MonthlySummary

    @property
    def income_change(self) -> float:
        return self.current.income - self.compare.income

    @property
    def expenses_change(self) -> float:
        return self.current.expenses - self.compare.expenses

    @property
    def balance_change(self) -> float:
        return self.current.balance - self.compare.balance


def monthly_summary(budget: BudgetFacade, period: Optional[str] = None) -> MonthlySummary:
    return MonthlySummary(
        period=period,
        income=budget.get_total_income(period),
        expenses=budget.get_total_expenses(period),
    )


def monthly_trend(budget: BudgetFacade, periods: Iterable[str]) -> list[MonthlySummary]:
    """Summaries for ``periods`` in chronological order."""

    return [monthly_summary(budget, period) for period in sorted(periods)]


def compare_months(budget: BudgetFacade, current: str, compare: str) -> MonthComparison:
    return MonthComparison(
        current=monthly_summary(budget, current),
        compare=monthly_summary(budget, compare),
    )


def category_breakdown(budget: BudgetFacade, period: Optional[str] = None) -> list[CategoryShare]:
    """Expense totals per category with their share of the period total, largest first."""

    totals = budget.get_expenses_by_category(period)
    grand_total = sum(totals.values())
    shares = [
        CategoryShare(
            category=category,
            amount=amount,
            percentage=calculate_percentage(amount, grand_total),
        )
        for category, amount in totals.items()
    ]
    shares.sort(key=lambda share: share.amount, reverse=True)
    return shares


def goal_progress_percentage(goal: Goal) -> int:
    """Accumulated amount as a percentage of the target; may exceed 100."""
    return calculate_percentage(goal.current_amount, goal.amount)


def is_goal_completed(goal: Goal) -> bool:
    return goal.current_amount >= goal.amount


def split_goals(goals: Iterable[Goal]) -> tuple[list[Goal], list[Goal]]:
    """Partition goals into (active, completed), each ordered by end date, soonest first."""

    ordered = sorted(goals, key=lambda goal: goal.end_date)
    active = [goal for goal in ordered if not is_goal_completed(goal)]
    completed = [goal for goal in ordered if is_goal_completed(goal)]
    return active, completed


def days_remaining(goal: Goal, today: Optional[date] = None) -> int:
    """Days until the goal's end date; negative once it has passed."""

    today = today or date.today()
    return (date.fromisoformat(goal.end_date) - today).days
