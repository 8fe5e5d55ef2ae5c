"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.engine import Engine

from .config import BaseConfig
from .domain.repositories.storage import StorageGateway
from .infra.database import bootstrap_database
from .infra.repositories import InMemoryStorageGateway, SQLModelStorageGateway
from .logging_config import get_logger
from .services.budget import BudgetFacade
from .services.expenses import ExpenseLedger
from .services.goals import GoalTracker
from .services.identifiers import IdFactory, new_identifier
from .services.incomes import IncomeLedger

logger = get_logger("context")


@dataclass
class BudgetContext:
    """Everything a front end needs, built once at startup."""

    config: BaseConfig
    storage: StorageGateway
    expenses: ExpenseLedger
    incomes: IncomeLedger
    goals: GoalTracker
    budget: BudgetFacade
    engine: Optional[Engine] = None

    def close(self) -> None:
        if self.engine is not None:
            self.engine.dispose()


def create_storage(config: BaseConfig) -> tuple[StorageGateway, Optional[Engine]]:
    """Build the storage gateway selected by ``config.STORAGE_BACKEND``."""

    if config.STORAGE_BACKEND == "memory":
        return InMemoryStorageGateway(), None

    engine, session_factory = bootstrap_database(config)
    return SQLModelStorageGateway(session_factory), engine


def create_budget_context(
    config: Optional[BaseConfig] = None,
    *,
    storage: Optional[StorageGateway] = None,
    id_factory: IdFactory = new_identifier,
) -> BudgetContext:
    """Create the ledgers, goal tracker and facade over one storage gateway.

    Pass ``storage`` to bypass the configured backend (tests, embedding).
    """

    if config is None:
        config = BaseConfig()

    engine = None
    if storage is None:
        storage, engine = create_storage(config)

    expenses = ExpenseLedger(storage, id_factory=id_factory)
    incomes = IncomeLedger(storage, id_factory=id_factory)
    goals = GoalTracker(storage, id_factory=id_factory)

    logger.info(
        "Budget context ready",
        extra={
            "storage_backend": type(storage).__name__,
            "expense_count": len(expenses),
            "income_count": len(incomes),
            "goal_count": len(goals),
        },
    )

    return BudgetContext(
        config=config,
        storage=storage,
        expenses=expenses,
        incomes=incomes,
        goals=goals,
        budget=BudgetFacade(expenses, incomes, goals),
        engine=engine,
    )
