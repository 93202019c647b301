"""
Repository Layer Package.

One repository per entity over the record service.  All data access flows
through repositories; callers never talk to the record client directly.

The ``create_repositories()`` factory wires the four repositories to a
shared client and notifier, returning a typed container the application
layer can consume without knowing the dependency graph.

Usage:
    from moneyflow.repositories import create_repositories
    repos = create_repositories(client, config, notifier)
    budgets = await repos["budgets"].list_all()
"""

from __future__ import annotations

from typing import Optional, TypedDict

from moneyflow.config import AppConfig
from moneyflow.logger import StructuredLogger, get_logger
from moneyflow.notifications import Notifier
from moneyflow.records.client import RecordClient
from moneyflow.repositories.base_repository import EntityRepository
from moneyflow.repositories.budget_repository import BudgetRepository
from moneyflow.repositories.category_repository import CategoryRepository
from moneyflow.repositories.savings_goal_repository import SavingsGoalRepository
from moneyflow.repositories.transaction_repository import TransactionRepository


class RepositoryContainer(TypedDict):
    """Typed container for the entity repositories."""

    budgets: BudgetRepository
    categories: CategoryRepository
    savings_goals: SavingsGoalRepository
    transactions: TransactionRepository


def create_repositories(
    client: RecordClient,
    config: AppConfig,
    notifier: Notifier,
    logger: Optional[StructuredLogger] = None,
) -> RepositoryContainer:
    """Wire every repository to *client*, using the table names from *config*."""
    log = logger or get_logger("moneyflow.repositories")
    limit = config.LIST_PAGE_LIMIT
    return RepositoryContainer(
        budgets=BudgetRepository(client, config.BUDGET_TABLE, notifier, log, limit),
        categories=CategoryRepository(client, config.CATEGORY_TABLE, notifier, log, limit),
        savings_goals=SavingsGoalRepository(
            client, config.SAVINGS_GOAL_TABLE, notifier, log, limit
        ),
        transactions=TransactionRepository(
            client, config.TRANSACTION_TABLE, notifier, log, limit
        ),
    )


__all__ = [
    "BudgetRepository",
    "CategoryRepository",
    "EntityRepository",
    "RepositoryContainer",
    "SavingsGoalRepository",
    "TransactionRepository",
    "create_repositories",
]
