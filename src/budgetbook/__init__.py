"""BudgetBook: expenses, income and savings goals with monthly summaries."""

from __future__ import annotations

from .config import BaseConfig
from .context import BudgetContext, create_budget_context

__all__ = ["BaseConfig", "BudgetContext", "create_budget_context"]
